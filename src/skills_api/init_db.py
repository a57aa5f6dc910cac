"""Database initialization script."""

import logging
import sys

from sqlalchemy import func, select

from skills_api.database import Base, SessionLocal, engine
from skills_api.logging_config import setup_logging
from skills_api.models import Skill, Theme  # noqa: F401  (registers tables)

logger = logging.getLogger(__name__)

# Sections the board was originally laid out around
DEFAULT_THEMES: tuple[str, ...] = ("Frontend", "Backend", "SpokenLang", "Frameworks")


def init_database() -> None:
    """
    Initialize the database by creating all tables.

    Safe to run multiple times as it won't recreate existing tables.
    """
    logger.info("Creating database tables...")
    Base.metadata.create_all(bind=engine)
    logger.info("Tables ready: %s", ", ".join(Base.metadata.tables.keys()))


def seed_default_themes() -> int:
    """
    Insert the default themes when the Themes table is empty.

    Returns:
        Number of themes inserted
    """
    db = SessionLocal()
    try:
        existing = db.scalar(select(func.count()).select_from(Theme))
        if existing:
            logger.info("Themes table already has %s rows, skipping seed", existing)
            return 0
        db.add_all(Theme(name=name) for name in DEFAULT_THEMES)
        db.commit()
        logger.info("Seeded %s default themes", len(DEFAULT_THEMES))
        return len(DEFAULT_THEMES)
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    setup_logging()
    init_database()
    if "--seed" in sys.argv[1:]:
        seed_default_themes()
