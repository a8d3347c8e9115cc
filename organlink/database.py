"""
Database connection and session management.
Provides SQLAlchemy engine, session, and base class for models.
"""
import uuid
from datetime import datetime, timezone

from sqlalchemy import create_engine, DateTime
from sqlalchemy.types import TypeDecorator
from sqlalchemy.orm import sessionmaker, declarative_base
from .config import settings

# Create SQLAlchemy engine for database connection
engine = create_engine(settings.database_url)

# Create session factory for database sessions
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)

# Create base class for declarative models
Base = declarative_base()

def get_db():
    """
    Database dependency - Creates and yields a database session.
    
    The session is automatically closed after the request is processed,
    even if an exception occurs during request handling.
    
    Yields:
        SQLAlchemy Session: Database session
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def generate_id() -> str:
    """Opaque primary key for new rows."""
    return str(uuid.uuid4())

def utc_now() -> datetime:
    """Timezone-aware creation/update instant."""
    return datetime.now(timezone.utc)

class UTCDateTime(TypeDecorator):
    """
    Timezone-aware timestamp column.

    Values are stored in UTC and always loaded back as aware UTC instants,
    including on backends such as SQLite that drop the offset.
    """
    impl = DateTime
    cache_ok = True

    def __init__(self):
        super().__init__(timezone=True)

    def process_bind_param(self, value, dialect):
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value

    def process_result_value(self, value, dialect):
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value
