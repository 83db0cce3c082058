"""
FastAPI dependencies for dependency injection.

This module provides the singleton application state and the per-request
session and service objects injected into routes.

Pattern: Dependency Injection
- Routes never build their own state
- Tests override `get_state` with a fresh AppState per test
"""

from functools import lru_cache

from fastapi import Depends, Request

from tinyapp.api.session import RequestSession
from tinyapp.state import AppState
from tinyapp.services.url_service import URLService


@lru_cache()
def get_state() -> AppState:
    """
    Get application state (singleton).

    Built from settings on first use; @lru_cache keeps the same directories
    for the lifetime of the process.
    """
    return AppState()


def get_session(request: Request) -> RequestSession:
    """Session of the current request (requires SessionMiddleware)"""
    return RequestSession(request.session)


def get_url_service(state: AppState = Depends(get_state)) -> URLService:
    """
    Get URLService with the application state injected.

    Controllers depend on the service, the service depends on the state.
    """
    return URLService(state)
