from dataclasses import dataclass
from typing import Optional


@dataclass
class SessionState:
    """
    Plain session object for code running outside a request.

    Anything exposing `user_id` and a settable `visitor_id` works as a
    session for the auth gate and the URL service; in the app that is
    `tinyapp.api.session.RequestSession`.
    """
    user_id: Optional[str] = None
    visitor_id: Optional[str] = None
