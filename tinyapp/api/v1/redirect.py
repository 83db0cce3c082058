from fastapi import APIRouter, Depends, status
from fastapi.responses import RedirectResponse
from tinyapp.api.session import RequestSession
from tinyapp.services.url_service import URLService
from tinyapp.dependencies import get_session, get_url_service

router = APIRouter(tags=["redirect"])


@router.get("/u/{code}")
async def redirect_to_long_url(
    code: str,
    session: RequestSession = Depends(get_session),
    url_service: URLService = Depends(get_url_service)
):
    """
    Redirect to the original URL.

    Flow:
    1. Resolve the code (404 if unknown)
    2. Tag the browser with a visitor id in its session cookie if needed
    3. Record the visit on the short URL
    4. Redirect

    No login required: short links are public.
    """
    long_url = url_service.visit(session, code)
    return RedirectResponse(url=long_url, status_code=status.HTTP_302_FOUND)
