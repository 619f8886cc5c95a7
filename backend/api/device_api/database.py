"""
Database connection and session management.
"""

import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from .config import settings

logger = logging.getLogger(__name__)


def _connect_args(database_url: str) -> dict:
    # SQLite connections are shared with FastAPI's threadpool
    if database_url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(settings.database_url, connect_args=_connect_args(settings.database_url))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Dependency that provides a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None):
    """Create all database tables."""
    from . import models  # noqa: F401  Import models to register them
    Base.metadata.create_all(bind=bind or engine)
    logger.info("Tables created successfully")
