"""
Session authentication gate and per-URL ownership guard.

Both return a `Result` instead of raising, so callers decide how to react:
routes usually `unwrap()` and let the exception handler answer.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from tinyapp.errors import Forbidden, NotFound, Unauthenticated
from tinyapp.models.url import ShortUrl
from tinyapp.models.user import User
from tinyapp.result import Err, Ok, Result
from tinyapp.services.url_directory import UrlDirectory
from tinyapp.services.user_directory import UserDirectory

logger = logging.getLogger(__name__)


class FailureMode(Enum):
    """How an endpoint wants anonymous callers rejected"""
    STATUS = "status"      # 401 response
    REDIRECT = "redirect"  # redirect to the login page


@dataclass(frozen=True)
class OwnedUrl:
    record: ShortUrl
    user: User


class AuthGate:
    """
    Two states: Anonymous and Authenticated.

    A session is Authenticated only when its user_id is present AND still
    resolves in the user directory; a stale id counts as Anonymous.
    """

    def __init__(self, users: UserDirectory):
        self.users = users

    def current_user(self, session) -> Optional[User]:
        return self.users.get(getattr(session, "user_id", None))

    def require_auth(self, session, on_fail: FailureMode = FailureMode.STATUS) -> Result[str]:
        user = self.current_user(session)
        if user is None:
            logger.debug("Rejected anonymous session (%s)", on_fail.value)
            return Err(Unauthenticated(failure_mode=on_fail))
        return Ok(user.id)


class OwnershipGuard:
    """Authorizes access to a single short URL for the session user"""

    def __init__(self, gate: AuthGate, urls: UrlDirectory, users: UserDirectory):
        self.gate = gate
        self.urls = urls
        self.users = users

    def authorize_and_get(
        self,
        session,
        code: str,
        on_fail: FailureMode = FailureMode.STATUS
    ) -> Result[OwnedUrl]:
        """
        Steps:
        1. Resolve the session user (gate failure propagates)
        2. Look up the code (NotFound before any ownership check)
        3. Compare owner (Forbidden on mismatch)
        4. Return record + acting user
        """
        auth = self.gate.require_auth(session, on_fail)
        if isinstance(auth, Err):
            return auth
        user_id = auth.value

        record = self.urls.get(code)
        if record is None:
            return Err(NotFound())

        if record.owner_id != user_id:
            logger.warning("User %s tried to access %s owned by %s", user_id, code, record.owner_id)
            return Err(Forbidden())

        return Ok(OwnedUrl(record=record, user=self.users.get(user_id)))
