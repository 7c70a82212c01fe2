"""
Test configuration and fixtures for the URL shortener.
Every test gets a fresh SQLite database and a fresh in-memory cache.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from main import app
from shortener_app.cache.strategies import InMemoryCache
from shortener_app.database.connection import Base, get_db
from shortener_app.dependencies import get_cache
from shortener_app.models import URL  # noqa: F401
from shortener_app.store.strategies import InMemoryMappingStore, SQLAlchemyMappingStore

# Test database configuration
SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """
    Create a fresh database session for each test.
    Tables are dropped afterwards so tests don't affect each other.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()

    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def cache():
    return InMemoryCache()


@pytest.fixture(scope="function")
def client(db_session, cache):
    """
    Test client with the database session and cache overridden.
    """
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_cache] = lambda: cache

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture(params=["sql", "memory"])
def store(request, db_session):
    """Each MappingStore implementation, so both honour the same contract."""
    if request.param == "sql":
        return SQLAlchemyMappingStore(db_session)
    return InMemoryMappingStore()
