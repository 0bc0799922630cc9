"""
MongoDB repository for the participant-name list.

The whole list is stored as one document under a fixed key. Names are
stored as given; nothing here validates or deduplicates them.
"""

from __future__ import annotations

from typing import Optional

from pymongo import MongoClient
from pymongo.collection import Collection

from core import config

# Configuration
COLLECTION_NAME = "players"
PLAYERS_KEY = "prompt_deck_players"

# Global connection pool (reused across requests)
_client: Optional[MongoClient] = None
_collection: Optional[Collection] = None


# ---- Connection Management ----

def is_persistence_enabled() -> bool:
    """Check whether a MongoDB connection string is configured."""
    return config.get_mongo_uri() is not None


def get_collection() -> Collection:
    """
    Get a connection to the MongoDB players collection.

    Returns:
        MongoDB collection object

    Raises:
        ValueError: If MONGO_URI is not set
    """
    global _client, _collection

    if _collection is not None:
        return _collection

    mongo_uri = config.get_mongo_uri()
    if not mongo_uri:
        raise ValueError("MONGO_URI not found in environment variables")

    _client = MongoClient(
        mongo_uri,
        maxPoolSize=5,
        minPoolSize=1,
        maxIdleTimeMS=60000
    )
    db = _client[config.get_players_db_name()]
    _collection = db[COLLECTION_NAME]

    return _collection


# ---- Player List ----

def load_players(collection: Optional[Collection] = None) -> list[str]:
    """
    Load the saved participant names.

    Args:
        collection: Optional collection override (defaults to the shared one)

    Returns:
        List of names, empty when nothing has been saved
    """
    collection = collection if collection is not None else get_collection()
    doc = collection.find_one({"_id": PLAYERS_KEY})
    if not doc:
        return []
    return [str(name) for name in doc.get("names", [])]


def save_players(names: list[str], collection: Optional[Collection] = None) -> None:
    """
    Replace the saved participant names.
    """
    collection = collection if collection is not None else get_collection()
    collection.update_one(
        {"_id": PLAYERS_KEY},
        {"$set": {"names": list(names)}},
        upsert=True
    )
    print(f"[PLAYERS] Saved {len(names)} player names")
