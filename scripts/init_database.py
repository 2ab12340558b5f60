#!/usr/bin/env python
"""
Database initialization script.

Creates the schema and seeds the catalog, either with the built-in
five-movie catalog or from a CSV file.

Usage:
    # Create tables and seed the built-in catalog
    python scripts/init_database.py

    # Start over
    python scripts/init_database.py --reset

    # Seed from a CSV catalog (id,title,genres,rating[,image_url,description])
    python scripts/init_database.py --catalog data/catalog.csv
"""

import sys
import argparse
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from cinepick.database import crud, init_database, seed_catalog, verify_schema
from cinepick.database.catalog_import import load_catalog_csv
from cinepick.database.connection import DEFAULT_DB_PATH
from cinepick.utils.logging_config import configure_script_logging


def print_section(title):
    """Print a formatted section header."""
    print(f"\n{'='*60}")
    print(f"{title}")
    print('='*60)


def main():
    parser = argparse.ArgumentParser(description="Initialize the CinePick database")
    parser.add_argument("--db-path", default=DEFAULT_DB_PATH, help="SQLite database file or sqlite:// URL")
    parser.add_argument("--reset", action="store_true", help="Drop all tables first")
    parser.add_argument("--catalog", help="CSV catalog to import instead of the built-in one")
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    args = parser.parse_args()

    configure_script_logging(debug=args.debug)

    print_section("CinePick Database Initialization")
    print(f"Database: {args.db_path}")

    try:
        db_manager = init_database(db_path=args.db_path, reset=args.reset, seed=args.catalog is None)

        if args.catalog:
            catalog = load_catalog_csv(args.catalog)
            inserted = seed_catalog(db_manager, catalog)
            print(f"Imported {inserted} of {len(catalog)} movies from {args.catalog}")

        if not verify_schema(db_manager):
            sys.exit(1)

        with db_manager.session_scope() as session:
            print_section("Summary")
            print(f"Movies:  {crud.get_movie_count(session)}")
            print(f"Genres:  {', '.join(crud.get_all_genres(session))}")
            print(f"Users:   {crud.get_user_count(session)}")
            print(f"Ratings: {crud.get_rating_count(session)}")

        print("\n[SUCCESS] Database ready.")
        print("Next: uvicorn cinepick.api.main:app --port 8000")

    except (ValueError, FileNotFoundError) as e:
        print(f"\n[ERROR] Initialization failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
