"""
Database module for CinePick.

This module provides database models, connection management, and CRUD operations
for the SQLite database using SQLAlchemy ORM.
"""

from cinepick.database.models import Base, User, Movie, Rating, WatchlistItem
from cinepick.database.connection import DatabaseManager, get_database_url, get_db_manager
from cinepick.database.init_db import init_database, seed_catalog, verify_schema
from cinepick.database import crud

__all__ = [
    # Models
    'Base',
    'User',
    'Movie',
    'Rating',
    'WatchlistItem',
    # Connection
    'DatabaseManager',
    'get_database_url',
    'get_db_manager',
    # Initialization
    'init_database',
    'seed_catalog',
    'verify_schema',
    # CRUD module
    'crud',
]
