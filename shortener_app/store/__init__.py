"""
Mapping store module.

Implements the Strategy Pattern for the persistent id -> url mapping.
"""

from .strategies import MappingStore, SQLAlchemyMappingStore, InMemoryMappingStore
from .factory import MappingStoreFactory, MappingStoreBackend

__all__ = [
    "MappingStore",
    "SQLAlchemyMappingStore",
    "InMemoryMappingStore",
    "MappingStoreFactory",
    "MappingStoreBackend",
]
