from fastapi import APIRouter, Depends, status
from fastapi.responses import RedirectResponse
from shortener_app.services.url_service import ResolutionService
from shortener_app.dependencies import get_resolution_service

router = APIRouter(tags=["redirect"])


@router.get("/redirect/{url_id}")
async def redirect_to_long_url(
    url_id: str,
    service: ResolutionService = Depends(get_resolution_service)
):
    """
    Redirect to the original URL.

    Always answers 301: unknown ids and store failures send the user to
    the configured fallback URL instead of an error page.
    """
    target_url = await service.redirect(url_id)
    return RedirectResponse(url=target_url, status_code=status.HTTP_301_MOVED_PERMANENTLY)
