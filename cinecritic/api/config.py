"""
API configuration loaded from environment or defaults.
"""

import os


def get_mongo_uri() -> str:
    """Get MongoDB connection URI from env or default."""
    return os.getenv("MONGODB_URI", "mongodb://127.0.0.1:27017")


def get_database_name() -> str:
    """Get MongoDB database name."""
    return os.getenv("MONGODB_DB", "cineCriticDB")


def get_collection_name() -> str:
    """Get name of the movies collection."""
    return os.getenv("MONGODB_COLLECTION", "movies")


def get_server_selection_timeout_ms() -> int:
    """Get how long the client waits for a reachable server."""
    return int(os.getenv("MONGODB_TIMEOUT_MS", "5000"))


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_api_host() -> str:
    """Get API host for binding."""
    return os.getenv("API_HOST", "0.0.0.0")


def get_api_port() -> int:
    """Get API port."""
    return int(os.getenv("API_PORT", "4000"))
