"""
MongoDB connection management using pymongo.

This module owns the MongoClient for the process and hands out the movies
collection. The client is created by the application entry point and closed
on shutdown; nothing here is global.
"""

import logging

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

from cinecritic.api.config import (
    get_collection_name,
    get_database_name,
    get_mongo_uri,
    get_server_selection_timeout_ms,
)

logger = logging.getLogger(__name__)


class MongoManager:
    """
    Database connection manager.

    Handles client creation, collection access, and shutdown. The underlying
    MongoClient keeps its own connection pool and is safe to share between
    request threads.
    """

    def __init__(
        self,
        uri: str | None = None,
        db_name: str | None = None,
        collection_name: str | None = None,
        timeout_ms: int | None = None,
    ):
        """
        Initialize the connection manager.

        Args:
            uri: MongoDB connection URI (default from MONGODB_URI)
            db_name: Database name (default from MONGODB_DB)
            collection_name: Movies collection name (default from MONGODB_COLLECTION)
            timeout_ms: Server selection timeout in milliseconds
        """
        self.uri = uri or get_mongo_uri()
        self.db_name = db_name or get_database_name()
        self.collection_name = collection_name or get_collection_name()

        # MongoClient connects lazily; the first operation selects a server
        self.client = MongoClient(
            self.uri,
            serverSelectionTimeoutMS=timeout_ms or get_server_selection_timeout_ms(),
        )
        logger.info("MongoDB client created for database %s", self.db_name)

    @property
    def database(self) -> Database:
        """The application database."""
        return self.client[self.db_name]

    @property
    def collection(self) -> Collection:
        """The movies collection."""
        return self.database[self.collection_name]

    def ping(self) -> bool:
        """Return True if the server answers a ping."""
        self.client.admin.command("ping")
        return True

    def close(self):
        """Close the client and all pooled connections."""
        self.client.close()
        logger.info("MongoDB client closed")
