"""
Collection initialization.

Creates the indexes the movies collection relies on. Safe to run on every
startup: creating an index that already exists with the same options is a
no-op on the server.
"""

import logging

from pymongo import ASCENDING
from pymongo.collection import Collection

logger = logging.getLogger(__name__)

TITLE_INDEX_NAME = "title_unique_ci"

# strength 2 compares base letters and accents but ignores case
TITLE_COLLATION = {"locale": "en", "strength": 2}


def init_database(collection: Collection) -> str:
    """
    Create the unique, case-insensitive index on ``title``.

    Args:
        collection: Movies collection

    Returns:
        Name of the title index
    """
    name = collection.create_index(
        [("title", ASCENDING)],
        name=TITLE_INDEX_NAME,
        unique=True,
        collation=TITLE_COLLATION,
    )
    logger.info("Ensured index %s on %s", name, collection.name)
    return name


def verify_indexes(collection: Collection) -> bool:
    """
    Check that the title index exists and is unique.

    Args:
        collection: Movies collection

    Returns:
        True if the index is present, False otherwise
    """
    index = collection.index_information().get(TITLE_INDEX_NAME)
    if index is None or not index.get("unique"):
        logger.warning("Missing unique title index on %s", collection.name)
        return False
    return True
