from fastapi import APIRouter, Depends
from shortener_app.schemas.url import URLCreate, URLResponse, URLListResponse
from shortener_app.services.url_service import ShorteningService, ResolutionService
from shortener_app.dependencies import get_shortening_service, get_resolution_service

router = APIRouter(prefix="/url", tags=["urls"])


@router.post("", response_model=URLResponse)
async def shorten_url(
    url_data: URLCreate,
    service: ShorteningService = Depends(get_shortening_service)
):
    """Create a new short URL"""
    return await service.shorten(url_data.url)


@router.get("", response_model=URLListResponse)
async def list_urls(
    service: ResolutionService = Depends(get_resolution_service)
):
    """List every short URL, ordered by id descending"""
    return URLListResponse(
        urls=[URLResponse.model_validate(m) for m in await service.list_all()]
    )


@router.get("/{url_id}", response_model=URLResponse)
async def get_url(
    url_id: str,
    service: ResolutionService = Depends(get_resolution_service)
):
    """Get the original URL for a short id.

    Unknown ids raise URLNotFoundError, mapped to 404 in main.py.
    """
    return await service.get(url_id)
