import logging
from typing import Dict

from pydantic import HttpUrl

from tinyapp.errors import NotFound
from tinyapp.models.url import ShortUrl
from tinyapp.result import unwrap
from tinyapp.services.auth import FailureMode, OwnedUrl
from tinyapp.state import AppState

logger = logging.getLogger(__name__)


class URLService:
    """
    URL service used by the routers.

    Wraps the directories with the auth gate and ownership guard, turning
    their results into exceptions the API layer maps to responses:
    - Unauthenticated -> 401 (or redirect to login)
    - NotFound -> 404
    - Forbidden -> 403

    Every method takes the caller's session explicitly, so the service never
    touches the request object.
    """

    def __init__(self, state: AppState):
        """
        Initialize URL service with dependencies.

        Args:
            state: Application state holding the directories and guards
        """
        self.state = state
        self.urls = state.urls
        self.gate = state.gate
        self.guard = state.guard

    def create_short_url(self, session, long_url: HttpUrl) -> ShortUrl:
        """Create a new short URL owned by the session user"""
        user_id = unwrap(self.gate.require_auth(session))
        return self.urls.create(str(long_url), user_id)

    def list_urls(self, session) -> Dict[str, ShortUrl]:
        """All short URLs owned by the session user, keyed by code"""
        user_id = unwrap(self.gate.require_auth(session))
        return self.urls.list_for_owner(user_id)

    def get_owned_url(self, session, code: str, on_fail: FailureMode = FailureMode.STATUS) -> OwnedUrl:
        return unwrap(self.guard.authorize_and_get(session, code, on_fail))

    def update_url(self, session, code: str, long_url: HttpUrl) -> ShortUrl:
        owned = self.get_owned_url(session, code)
        return self.urls.update(owned.record.code, str(long_url))

    def delete_url(self, session, code: str) -> None:
        owned = self.get_owned_url(session, code)
        self.urls.delete(owned.record.code)

    def visit(self, session, code: str) -> str:
        """
        Resolve a short code for redirection and log the visit.

        Flow:
        1. Look up the record (NotFound if absent)
        2. Give the browser a visitor id if it has none yet
        3. Append the visit to the record's log
        4. Return the long URL to redirect to
        """
        record = self.urls.get(code)
        if record is None:
            raise NotFound()

        if not session.visitor_id:
            session.visitor_id = self.state.new_visitor_id()

        self.urls.record_visit(code, session.visitor_id)
        return record.long_url
