"""
Database engine and session management.

The engine is built once from settings; each request gets its own
Session through the get_db() dependency.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from shortener_app.config import settings


def _connect_args(database_url: str) -> dict:
    # SQLite connections are used from FastAPI's threadpool
    if database_url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(
    settings.database_url,
    connect_args=_connect_args(settings.database_url),
    pool_pre_ping=True,
)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def get_db():
    """Yield a database session and close it after the request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """Create all tables registered on Base."""
    # Import models so metadata is populated before table creation.
    from shortener_app.models import url  # noqa: F401

    Base.metadata.create_all(bind=engine)
