"""
Database module for the movie API.

This module provides MongoDB connection management, collection
initialization, and CRUD operations for movie documents.
"""

from cinecritic.database.connection import MongoManager
from cinecritic.database.errors import ErrorKind, MovieStoreError
from cinecritic.database.init_db import init_database, verify_indexes
from cinecritic.database import crud

__all__ = [
    # Connection
    'MongoManager',
    # Errors
    'ErrorKind',
    'MovieStoreError',
    # Initialization
    'init_database',
    'verify_indexes',
    # CRUD module
    'crud',
]
