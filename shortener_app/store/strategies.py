"""
Mapping store strategies using Strategy Pattern.

The services never talk to the database directly; they receive a
MappingStore and call three primitives on it:
- insert: persist a new id -> url mapping
- get: look up one mapping by exact id
- list_all: every mapping, id descending

Implementations:
- SQLAlchemyMappingStore: the relational `url` table (production)
- InMemoryMappingStore: dict-backed fake (tests, demos)
"""

import logging
import threading
from abc import ABC, abstractmethod
from typing import Dict, List

from sqlalchemy import insert, select
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError
from sqlalchemy.orm import Session

from shortener_app.models.mapping import URLMapping
from shortener_app.models.url import URL
from shortener_app.services.exceptions import (
    DuplicateIdError,
    StoreUnavailableError,
    StoreWriteError,
    URLNotFoundError,
)

logger = logging.getLogger(__name__)


class MappingStore(ABC):
    """
    Abstract base class for mapping stores.

    Mappings are append-only: there is no update or delete.
    Every failure is reported with an exception from
    shortener_app.services.exceptions, never with a sentinel value.
    """

    @abstractmethod
    def insert(self, url_id: str, url: str) -> URLMapping:
        """
        Atomically insert a new mapping.

        Args:
            url_id: Short identifier (primary key)
            url: Original URL, stored verbatim

        Returns:
            The stored mapping

        Raises:
            DuplicateIdError: url_id is already stored
            StoreUnavailableError: the store could not be reached
            StoreWriteError: any other write failure
        """
        pass

    @abstractmethod
    def get(self, url_id: str) -> URLMapping:
        """
        Look up a mapping by exact id.

        Raises:
            URLNotFoundError: no mapping has this id
            StoreUnavailableError: the store could not be queried
        """
        pass

    @abstractmethod
    def list_all(self) -> List[URLMapping]:
        """
        Return all mappings ordered by id, descending.

        An empty store yields an empty list.

        Raises:
            StoreUnavailableError: the store could not be queried
        """
        pass


class SQLAlchemyMappingStore(MappingStore):
    """
    Relational store backed by the `url` table.

    Uses the request-scoped Session; each insert is committed on its own
    and rolled back on failure so no partial row survives.
    """

    def __init__(self, db: Session):
        self.db = db

    def insert(self, url_id: str, url: str) -> URLMapping:
        try:
            self.db.execute(insert(URL).values(id=url_id, original_url=url))
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise DuplicateIdError(url_id) from e
        except OperationalError as e:
            self.db.rollback()
            logger.error("Store unavailable during insert of %s: %s", url_id, e)
            raise StoreUnavailableError(str(e)) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Insert of %s failed: %s", url_id, e)
            raise StoreWriteError(str(e)) from e

        return URLMapping(id=url_id, url=url)

    def get(self, url_id: str) -> URLMapping:
        try:
            original_url = self.db.execute(
                select(URL.original_url).where(URL.id == url_id)
            ).scalar_one_or_none()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Store unavailable during lookup of %s: %s", url_id, e)
            raise StoreUnavailableError(str(e)) from e

        if original_url is None:
            raise URLNotFoundError(url_id)

        return URLMapping(id=url_id, url=original_url)

    def list_all(self) -> List[URLMapping]:
        try:
            rows = self.db.execute(
                select(URL.id, URL.original_url).order_by(URL.id.desc())
            ).all()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Store unavailable during listing: %s", e)
            raise StoreUnavailableError(str(e)) from e

        return [URLMapping(id=row.id, url=row.original_url) for row in rows]


class InMemoryMappingStore(MappingStore):
    """
    In-memory store using a Python dict.

    Same contract as the SQL store, including the duplicate-id failure.
    Lost on restart and not shared between processes.
    """

    def __init__(self):
        self._mappings: Dict[str, str] = {}
        self._lock = threading.Lock()

    def insert(self, url_id: str, url: str) -> URLMapping:
        with self._lock:
            if url_id in self._mappings:
                raise DuplicateIdError(url_id)
            self._mappings[url_id] = url
        return URLMapping(id=url_id, url=url)

    def get(self, url_id: str) -> URLMapping:
        url = self._mappings.get(url_id)
        if url is None:
            raise URLNotFoundError(url_id)
        return URLMapping(id=url_id, url=url)

    def list_all(self) -> List[URLMapping]:
        with self._lock:
            items = list(self._mappings.items())
        return [
            URLMapping(id=url_id, url=url)
            for url_id, url in sorted(items, key=lambda item: item[0], reverse=True)
        ]
