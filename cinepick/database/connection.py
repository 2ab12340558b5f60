"""
SQLite engine and session handling for the catalog, ratings and watchlist.

A ``DatabaseManager`` is built from a file path, ``":memory:"`` or a full
``sqlite://`` URL (the form ``DATABASE_URL`` takes).
"""

import logging
import os
from contextlib import contextmanager
from typing import Generator, Optional
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from cinepick.database.models import Base

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = "data/cinepick.db"
MEMORY_DB = ":memory:"
SQLITE_SCHEME = "sqlite://"


def get_database_url(target: str = DEFAULT_DB_PATH) -> str:
    """
    Turn a database target into a SQLAlchemy URL.

    URLs pass through unchanged. File paths become absolute and their parent
    directory is created.

    Args:
        target: File path, ":memory:" or "sqlite://..." URL

    Returns:
        SQLAlchemy database URL
    """
    if target.startswith(SQLITE_SCHEME):
        return target
    if target == MEMORY_DB:
        return SQLITE_SCHEME

    parent = os.path.dirname(target)
    if parent:
        os.makedirs(parent, exist_ok=True)
    return f"sqlite:///{os.path.abspath(target)}"


@event.listens_for(Engine, "connect")
def set_sqlite_pragma(dbapi_conn, connection_record):
    """Turn on SQLite foreign keys so deleting a user drops their ratings and watchlist."""
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class DatabaseManager:
    """
    Owns one engine and its session factory.

    The engine uses a single shared connection, which keeps an in-memory
    database alive for the manager's lifetime.
    """

    def __init__(self, db_path: str = DEFAULT_DB_PATH, echo: bool = False):
        """
        Args:
            db_path: File path, ":memory:" or "sqlite://..." URL
            echo: Log every SQL statement
        """
        self.db_path = db_path
        self.database_url = get_database_url(db_path)
        self.engine = create_engine(
            self.database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        self.SessionLocal = sessionmaker(bind=self.engine, autoflush=False)
        logger.debug(f"Database engine ready for {self.database_url}")

    def create_tables(self):
        """Create missing tables; existing ones are left alone."""
        Base.metadata.create_all(bind=self.engine)

    def drop_tables(self):
        """Drop every table. All users, ratings and watchlists are lost."""
        Base.metadata.drop_all(bind=self.engine)

    def reset_database(self):
        self.drop_tables()
        self.create_tables()

    @contextmanager
    def session_scope(self) -> Generator[Session, None, None]:
        """
        Yield a session that commits on success and rolls back on error.

        Yields:
            SQLAlchemy Session object
        """
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def close(self):
        """Dispose of the engine's connections."""
        self.engine.dispose()


_db_manager: Optional[DatabaseManager] = None


def get_db_manager(db_path: str = DEFAULT_DB_PATH, echo: bool = False) -> DatabaseManager:
    """
    Return the process-wide manager, creating it on first call.

    ``db_path`` and ``echo`` only matter on that first call.
    """
    global _db_manager
    if _db_manager is None:
        _db_manager = DatabaseManager(db_path=db_path, echo=echo)
    return _db_manager
