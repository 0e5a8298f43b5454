"""Database engine, session factory and the FastAPI session dependency."""
import logging
import sqlite3

from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker

from config.settings import get_settings

# Importing the models package registers every table on Base.metadata.
import models  # noqa: F401
from models.base_model import base as Base  # noqa: F401

logger = logging.getLogger(__name__)

settings = get_settings()
DATABASE_URL = settings.database_url

if DATABASE_URL.startswith("sqlite"):
    engine = create_engine(DATABASE_URL, connect_args={"check_same_thread": False})
else:
    engine = create_engine(
        DATABASE_URL,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_pre_ping=True,
    )


def enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """SQLite ignores FOREIGN KEY clauses unless the pragma is switched on per connection."""
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


event.listen(engine, "connect", enable_sqlite_foreign_keys)


SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    """
    Dependency providing one database session per request.

    The session is committed when the request finishes without error and
    rolled back otherwise.
    """
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        logger.debug("Rolling back request session")
        db.rollback()
        raise
    finally:
        db.close()
