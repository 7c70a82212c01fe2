import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from shortener_app.config import settings
from shortener_app.database.connection import init_db
from shortener_app.api.v1 import urls, redirect
from shortener_app.services.exceptions import (
    RandomSourceUnavailableError,
    StoreUnavailableError,
    StoreWriteError,
    URLNotFoundError,
)

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Create database tables
init_db()

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="A URL shortener service built with FastAPI",
    debug=settings.debug
)


@app.get("/")
def read_root():
    """Root endpoint with API information"""
    return {
        "message": f"Welcome to {settings.app_name}",
        "version": settings.app_version,
        "docs": "/docs",
    }


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "environment": settings.environment}


######## Map domain errors to HTTP responses
@app.exception_handler(URLNotFoundError)
async def not_found_handler(request: Request, exc: URLNotFoundError):
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": "Short URL not found"})


@app.exception_handler(StoreUnavailableError)
async def store_unavailable_handler(request: Request, exc: StoreUnavailableError):
    logger.error("Store unavailable on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content={"detail": "Storage unavailable"})


@app.exception_handler(StoreWriteError)
async def store_write_handler(request: Request, exc: StoreWriteError):
    logger.error("Could not store mapping: %s", exc)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"detail": "Could not store short URL"})


@app.exception_handler(RandomSourceUnavailableError)
async def random_source_handler(request: Request, exc: RandomSourceUnavailableError):
    logger.error("Id generation failed: %s", exc)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"detail": "Could not generate short id"})


######## Include routers
app.include_router(urls.router)
app.include_router(redirect.router)
