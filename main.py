import logging

from fastapi import FastAPI, Depends, status
from fastapi.responses import RedirectResponse
from starlette.middleware.sessions import SessionMiddleware

from tinyapp.config import settings
from tinyapp.api.errors import register_exception_handlers
from tinyapp.api.session import RequestSession
from tinyapp.api.v1 import auth, urls, redirect
from tinyapp.dependencies import get_session, get_state
from tinyapp.result import unwrap
from tinyapp.services.auth import FailureMode
from tinyapp.state import AppState

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="A session-based URL shortener built with FastAPI",
    debug=settings.debug
)

# Signed cookie sessions: the server keeps no session store
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.secret_key,
    session_cookie=settings.session_cookie,
    max_age=settings.session_max_age,
    same_site="lax",
    https_only=settings.session_https_only
)

register_exception_handlers(app)


@app.get("/")
async def read_root(
    session: RequestSession = Depends(get_session),
    state: AppState = Depends(get_state)
):
    """Send logged-in users to their URLs, everyone else to the login page"""
    unwrap(state.gate.require_auth(session, FailureMode.REDIRECT))
    return RedirectResponse(url="/api/v1/urls/", status_code=status.HTTP_302_FOUND)


@app.get(settings.login_path)
def login_page():
    """Where to send credentials"""
    return {
        "message": f"Welcome to {settings.app_name}",
        "login": "/api/v1/auth/login",
        "register": "/api/v1/auth/register",
        "fields": ["email", "password"]
    }


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "environment": settings.environment}


######## Include routers
app.include_router(auth.router, prefix="/api/v1")
app.include_router(urls.router, prefix="/api/v1")
app.include_router(redirect.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host=settings.host, port=settings.port, reload=settings.debug)
