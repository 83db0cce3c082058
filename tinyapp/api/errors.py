from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, RedirectResponse

from tinyapp.config import settings
from tinyapp.errors import TinyAppError, Unauthenticated
from tinyapp.services.auth import FailureMode


async def tinyapp_error_handler(request: Request, exc: TinyAppError):
    """Render domain errors with the same {"detail": ...} shape as HTTPException"""
    if isinstance(exc, Unauthenticated) and exc.failure_mode == FailureMode.REDIRECT:
        return RedirectResponse(url=settings.login_path, status_code=status.HTTP_302_FOUND)

    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TinyAppError, tinyapp_error_handler)
