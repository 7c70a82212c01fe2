from sqlalchemy import Column, String, Text
from shortener_app.database.connection import Base


class URL(Base):
    """
    Stored short-id to long-URL mapping.

    The table is append-only: rows are inserted once by the shortening
    service and only ever read afterwards.
    The primary key doubles as the uniqueness constraint that catches
    id collisions on insert.
    """
    __tablename__ = "url"

    id = Column(String(16), primary_key=True)
    original_url = Column(Text, nullable=False)
