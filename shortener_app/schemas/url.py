from typing import List

from pydantic import BaseModel, Field, ConfigDict


class URLCreate(BaseModel):
    # Stored verbatim: no scheme or host validation
    url: str = Field(..., min_length=1, description="The original URL to be shortened")


class URLResponse(BaseModel):
    """Response schema for a single mapping.

    from_attributes=True lets routes return URLMapping values directly.
    """
    id: str = Field(..., description="Short identifier")
    url: str = Field(..., description="Original URL")

    model_config = ConfigDict(from_attributes=True)


class URLListResponse(BaseModel):
    urls: List[URLResponse]
