from pydantic import BaseModel, HttpUrl, Field, computed_field, ConfigDict
from typing import List, Optional
from datetime import datetime
from tinyapp.config import settings


class URLBase(BaseModel):
    long_url: HttpUrl = Field(..., description="The original URL to be shortened")


class URLCreate(URLBase):
    pass


class URLUpdate(URLBase):
    pass


class ShortUrlResponse(BaseModel):
    """Response schema read straight off a ShortUrl record

    - from_attributes=True reads dataclass attributes and properties
    - @computed_field adds the public short link
    """
    code: str
    long_url: str
    owner_id: str
    created_at: datetime
    visit_count: int
    unique_visitor_count: int

    @computed_field
    @property
    def short_url(self) -> str:
        """Public redirect link for this code"""
        return f"{settings.base_url}/u/{self.code}"

    model_config = ConfigDict(from_attributes=True)


class VisitResponse(BaseModel):
    timestamp: datetime
    visitor_id: str

    model_config = ConfigDict(from_attributes=True)


class URLStats(BaseModel):
    code: str
    created_at: datetime
    visit_count: int
    unique_visitor_count: int
    last_visited: Optional[datetime] = None
    visits: List[VisitResponse]

    model_config = ConfigDict(from_attributes=True)
