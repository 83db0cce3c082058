from typing import Dict

from fastapi import APIRouter, Depends, status
from tinyapp.api.session import RequestSession
from tinyapp.schemas.url import URLCreate, URLUpdate, ShortUrlResponse, URLStats
from tinyapp.services.url_service import URLService
from tinyapp.dependencies import get_session, get_url_service

router = APIRouter(prefix="/urls", tags=["urls"])


@router.post("/", response_model=ShortUrlResponse, status_code=status.HTTP_201_CREATED)
async def create_short_url(
    url_data: URLCreate,
    session: RequestSession = Depends(get_session),
    url_service: URLService = Depends(get_url_service)
):
    """Create a new short URL owned by the logged-in user"""
    record = url_service.create_short_url(session, url_data.long_url)
    return ShortUrlResponse.model_validate(record)


@router.get("/", response_model=Dict[str, ShortUrlResponse])
async def list_urls(
    session: RequestSession = Depends(get_session),
    url_service: URLService = Depends(get_url_service)
):
    """List the logged-in user's short URLs, keyed by code"""
    records = url_service.list_urls(session)
    return {code: ShortUrlResponse.model_validate(record) for code, record in records.items()}


@router.get("/{code}", response_model=ShortUrlResponse)
async def get_url_info(
    code: str,
    session: RequestSession = Depends(get_session),
    url_service: URLService = Depends(get_url_service)
):
    """Get information about one of your short URLs"""
    owned = url_service.get_owned_url(session, code)
    return ShortUrlResponse.model_validate(owned.record)


@router.put("/{code}", response_model=ShortUrlResponse)
async def update_url(
    code: str,
    url_data: URLUpdate,
    session: RequestSession = Depends(get_session),
    url_service: URLService = Depends(get_url_service)
):
    """Point one of your short URLs at a new long URL"""
    record = url_service.update_url(session, code, url_data.long_url)
    return ShortUrlResponse.model_validate(record)


@router.delete("/{code}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_url(
    code: str,
    session: RequestSession = Depends(get_session),
    url_service: URLService = Depends(get_url_service)
):
    """Delete one of your short URLs"""
    url_service.delete_url(session, code)


@router.get("/{code}/stats", response_model=URLStats)
async def get_url_stats(
    code: str,
    session: RequestSession = Depends(get_session),
    url_service: URLService = Depends(get_url_service)
):
    """Visit analytics for one of your short URLs"""
    owned = url_service.get_owned_url(session, code)
    return URLStats.model_validate(owned.record)
