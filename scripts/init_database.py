#!/usr/bin/env python
"""
Database initialization script for the movies collection.

Creates the unique, case-insensitive title index and verifies it. The API
does the same on startup; this script is for provisioning a database ahead
of the first deploy.

Usage:
    python scripts/init_database.py
    python scripts/init_database.py --uri mongodb://db:27017 --db cineCriticDB
"""

import argparse
import sys

from pymongo.errors import PyMongoError

from cinecritic.database import MongoManager, crud, init_database, verify_indexes


def main():
    """Main entry point for database initialization."""

    parser = argparse.ArgumentParser(description="Initialize the CineCritic movies collection")
    parser.add_argument('--uri', type=str, help='MongoDB URI (default: $MONGODB_URI)')
    parser.add_argument('--db', type=str, help='Database name (default: $MONGODB_DB)')
    parser.add_argument('--collection', type=str, help='Collection name (default: $MONGODB_COLLECTION)')
    args = parser.parse_args()

    manager = MongoManager(uri=args.uri, db_name=args.db, collection_name=args.collection)
    try:
        print(f"Database: {manager.db_name}.{manager.collection_name}")
        index_name = init_database(manager.collection)
        print(f"Index ready: {index_name}")
        print(f"Movies stored: {crud.get_movie_count(manager.collection)}")
        success = verify_indexes(manager.collection)
    except PyMongoError as e:
        print(f"\n[ERROR] Initialization failed: {e}")
        sys.exit(1)
    finally:
        manager.close()

    print("\n[SUCCESS] Collection initialized" if success else "\n[ERROR] Title index missing")
    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
