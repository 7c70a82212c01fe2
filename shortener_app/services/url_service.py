import logging
from typing import List, Optional

from starlette.concurrency import run_in_threadpool

from shortener_app.cache.strategies import CacheStrategy, mapping_key
from shortener_app.config import settings
from shortener_app.models.mapping import URLMapping
from shortener_app.services.exceptions import StoreUnavailableError, URLNotFoundError
from shortener_app.services.id_generator import IdGenerator
from shortener_app.store.strategies import MappingStore

logger = logging.getLogger(__name__)


class ShorteningService:
    """
    Write path: generate an id and persist the mapping.

    The store and cache are injected, so tests can pass in-memory
    implementations. Store calls block, so they run in the threadpool.
    There is no retry when the generated id collides with a stored one;
    the DuplicateIdError from the store reaches the caller as-is.
    """

    def __init__(
        self,
        store: MappingStore,
        cache: Optional[CacheStrategy] = None,
        id_generator: Optional[IdGenerator] = None
    ):
        self.store = store
        self.cache = cache
        self.id_generator = id_generator or IdGenerator()

    async def shorten(self, original_url: str) -> URLMapping:
        """Create a new short URL

        Any non-empty string is accepted and stored verbatim. Shortening
        the same URL twice creates two independent mappings.

        Raises:
            ValueError: original_url is empty
            RandomSourceUnavailableError: no entropy for the id
            StoreWriteError: the insert failed (DuplicateIdError on collision)
            StoreUnavailableError: the store could not be reached
        """
        if not original_url:
            raise ValueError("original_url must be non-empty")

        url_id = self.id_generator.generate()
        mapping = await run_in_threadpool(self.store.insert, url_id, original_url)
        logger.info("Created short id %s", mapping.id)

        if self.cache:
            await self.cache.set(mapping_key(mapping.id), mapping.url, ttl=settings.cache_ttl)

        return mapping


class ResolutionService:
    """
    Read path: lookups, listing and redirects.

    get() and list_all() propagate every store error. redirect() is the one
    place where a failed lookup is turned into a value: the fallback URL.
    """

    def __init__(
        self,
        store: MappingStore,
        cache: Optional[CacheStrategy] = None,
        fallback_url: Optional[str] = None
    ):
        self.store = store
        self.cache = cache
        self.fallback_url = fallback_url or settings.fallback_redirect_url

    async def get(self, url_id: str) -> URLMapping:
        """
        Get the mapping for a short id (cache-aside).

        Raises:
            URLNotFoundError: no mapping with this id
            StoreUnavailableError: the store could not be queried
        """
        key = mapping_key(url_id)

        if self.cache:
            cached_url = await self.cache.get(key)
            if cached_url:
                return URLMapping(id=url_id, url=cached_url)

        mapping = await run_in_threadpool(self.store.get, url_id)

        if self.cache:
            await self.cache.set(key, mapping.url, ttl=settings.cache_ttl)

        return mapping

    async def list_all(self) -> List[URLMapping]:
        """All mappings ordered by id, descending. Empty store gives []."""
        return await run_in_threadpool(self.store.list_all)

    async def redirect(self, url_id: str) -> str:
        """
        Destination for /redirect/{id}.

        Returns the stored URL, or the fallback URL when the id is unknown
        or the store is unavailable. Never raises for a failed lookup.
        """
        try:
            mapping = await self.get(url_id)
        except URLNotFoundError:
            logger.info("Unknown short id %r, redirecting to fallback", url_id)
            return self.fallback_url
        except StoreUnavailableError as e:
            logger.warning("Store unavailable resolving %r, redirecting to fallback: %s", url_id, e)
            return self.fallback_url

        return mapping.url
