"""
Factory for creating mapping store instances.
"""

import logging
from enum import Enum
from typing import Optional

from sqlalchemy.orm import Session

from .strategies import MappingStore, SQLAlchemyMappingStore, InMemoryMappingStore

logger = logging.getLogger(__name__)


class MappingStoreBackend(Enum):
    """Available mapping store backends"""
    SQL = "sql"
    MEMORY = "memory"


class MappingStoreFactory:
    """
    Simple factory for creating mapping stores.

    The SQL store wraps a request-scoped session, so a new one is built per
    call. The in-memory store holds the data itself and is cached as a
    singleton.
    """

    _memory_instance: Optional[InMemoryMappingStore] = None

    @classmethod
    def create(cls, backend: MappingStoreBackend, db: Optional[Session] = None) -> MappingStore:
        """
        Create a mapping store.

        Args:
            backend: Type of store backend (from enum)
            db: Database session, required for the SQL backend

        Returns:
            MappingStore instance
        """
        if backend == MappingStoreBackend.SQL:
            if db is None:
                raise ValueError("SQL mapping store requires a database session")
            return SQLAlchemyMappingStore(db)

        elif backend == MappingStoreBackend.MEMORY:
            if cls._memory_instance is None:
                cls._memory_instance = InMemoryMappingStore()
                logger.info("In-memory mapping store initialized")
            return cls._memory_instance

        else:
            raise ValueError(f"Unknown store backend: {backend}")

    @classmethod
    def clear_instance(cls):
        """Clear cached in-memory instance (for testing)"""
        cls._memory_instance = None
