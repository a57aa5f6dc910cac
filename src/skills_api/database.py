"""Database configuration and session management."""

from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from skills_api.config import settings

DATABASE_URL: str = settings.database_url


def engine_options(url: str) -> dict[str, Any]:
    """
    Build ``create_engine`` keyword arguments for a database URL.

    Args:
        url: SQLAlchemy database URL

    Returns:
        Keyword arguments for ``create_engine``
    """
    options: dict[str, Any] = {"echo": settings.database_echo}
    if url.startswith("sqlite"):
        options["connect_args"] = {"check_same_thread": False}  # Needed for SQLite
    else:
        options["pool_pre_ping"] = True
        options["pool_size"] = settings.database_pool_size
    return options


# Create SQLAlchemy engine; its pool is shared by every request
engine = create_engine(DATABASE_URL, **engine_options(DATABASE_URL))

# Create SessionLocal class for database sessions
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Create Base class for declarative models
Base = declarative_base()


def get_db():
    """
    Dependency function to get database session.

    Yields:
        Session: SQLAlchemy database session
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
