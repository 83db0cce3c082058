"""
Error taxonomy for TinyApp.

Every error is an expected, caller-recoverable condition. Each one carries
the HTTP status the API layer answers with, so routes can simply let them
propagate to the exception handler registered in `tinyapp.api.errors`.
"""

from typing import Optional


class TinyAppError(Exception):
    """Base class for all TinyApp errors"""

    status_code: int = 400
    detail: str = "Bad request"

    def __init__(self, detail: Optional[str] = None):
        if detail is not None:
            self.detail = detail
        super().__init__(self.detail)


class ValidationError(TinyAppError):
    """Missing or duplicate input (registration, URL submission)"""

    status_code = 400
    detail = "Invalid input"


class Unauthenticated(TinyAppError):
    """No valid session user"""

    status_code = 401
    detail = "You must be logged in to do that"

    def __init__(self, detail: Optional[str] = None, failure_mode=None):
        super().__init__(detail)
        # tinyapp.services.auth.FailureMode; None means plain 401
        self.failure_mode = failure_mode


class InvalidCredentials(TinyAppError):
    """Login with an unknown email or a wrong password"""

    status_code = 403
    detail = "Invalid email or password"


class Forbidden(TinyAppError):
    """Authenticated, but the short URL belongs to someone else"""

    status_code = 403
    detail = "You do not own this short URL"


class NotFound(TinyAppError):
    """Referenced short code does not exist"""

    status_code = 404
    detail = "Short URL not found"


class CodeGenerationError(TinyAppError):
    """
    No free identifier could be generated.

    Raised after `max_retries` collisions; a colliding code never silently
    replaces an existing record.
    """

    status_code = 503
    detail = "Could not generate a unique identifier"
