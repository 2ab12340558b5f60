"""
Database initialization and catalog seeding.

Creates the schema and, when the movies table is empty, loads a starting
catalog (the built-in five-movie catalog unless another one is given).
"""

import logging
from typing import Iterable, Optional

from sqlalchemy import inspect

from cinepick.core.recommendations.catalog import DEFAULT_CATALOG, Movie as CatalogMovie
from cinepick.database.connection import DEFAULT_DB_PATH, DatabaseManager, get_db_manager
from cinepick.database import crud

logger = logging.getLogger(__name__)

EXPECTED_TABLES = {'users', 'movies', 'ratings', 'watchlist'}


def seed_catalog(
    db_manager: DatabaseManager,
    catalog: Optional[Iterable[CatalogMovie]] = None
) -> int:
    """
    Insert catalog movies that aren't in the database yet.

    Args:
        db_manager: DatabaseManager instance
        catalog: Movies to insert (default: built-in catalog)

    Returns:
        Number of movies inserted
    """
    catalog = DEFAULT_CATALOG if catalog is None else catalog
    inserted = 0
    with db_manager.session_scope() as session:
        for movie in catalog:
            if crud.get_movie(session, movie.id):
                continue
            crud.create_movie(
                session,
                movie_id=movie.id,
                title=movie.title,
                genres=movie.genres,
                rating=movie.rating,
                image_url=movie.image_url,
                description=movie.description,
            )
            inserted += 1
    logger.info(f"Seeded {inserted} movies")
    return inserted


def init_database(
    db_path: str = DEFAULT_DB_PATH,
    reset: bool = False,
    seed: bool = True,
    db_manager: Optional[DatabaseManager] = None
) -> DatabaseManager:
    """
    Initialize the database, create all tables and optionally seed the catalog.

    Args:
        db_path: Path to SQLite database file
        reset: If True, drop existing tables before creating new ones
        seed: If True, seed the built-in catalog into an empty movies table
        db_manager: Use this manager instead of the process-wide one

    Returns:
        DatabaseManager instance
    """
    db_manager = db_manager or get_db_manager(db_path=db_path)

    if reset:
        logger.warning("Resetting database (dropping all tables)")
        db_manager.reset_database()
    else:
        db_manager.create_tables()
    logger.info(f"Database tables ready at {db_manager.database_url}")

    if seed:
        with db_manager.session_scope() as session:
            empty = crud.get_movie_count(session) == 0
        if empty:
            seed_catalog(db_manager)

    return db_manager


def verify_schema(db_manager: DatabaseManager) -> bool:
    """
    Verify that all tables exist in the database.

    Returns:
        True if all tables exist, False otherwise
    """
    existing_tables = set(inspect(db_manager.engine).get_table_names())
    missing_tables = EXPECTED_TABLES - existing_tables

    if missing_tables:
        logger.error(f"Missing tables: {missing_tables}")
        return False

    logger.info(f"All tables exist: {sorted(existing_tables)}")
    return True
