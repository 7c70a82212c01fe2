"""
FastAPI dependencies for dependency injection.

Routes depend on services; services receive the mapping store and cache
built here. Tests swap implementations through app.dependency_overrides
on get_db and get_cache.
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.orm import Session

from shortener_app.cache.factory import CacheFactory, CacheBackend
from shortener_app.cache.strategies import CacheStrategy
from shortener_app.config import settings
from shortener_app.database.connection import get_db
from shortener_app.services.url_service import ResolutionService, ShorteningService
from shortener_app.store.factory import MappingStoreFactory, MappingStoreBackend
from shortener_app.store.strategies import MappingStore


@lru_cache()
def get_cache() -> CacheStrategy:
    """
    Get cache instance (singleton).

    @lru_cache ensures the backend is chosen only once.
    """
    backend = CacheBackend(settings.cache_backend)
    return CacheFactory.create(backend)


def get_mapping_store(db: Session = Depends(get_db)) -> MappingStore:
    """Mapping store for the configured backend, bound to this request's session."""
    backend = MappingStoreBackend(settings.store_backend)
    return MappingStoreFactory.create(backend, db=db)


def get_shortening_service(
    store: MappingStore = Depends(get_mapping_store),
    cache: CacheStrategy = Depends(get_cache)
) -> ShorteningService:
    return ShorteningService(store=store, cache=cache)


def get_resolution_service(
    store: MappingStore = Depends(get_mapping_store),
    cache: CacheStrategy = Depends(get_cache)
) -> ResolutionService:
    return ResolutionService(store=store, cache=cache)
