"""
Repository Base

Shared plumbing for the MongoDB repositories: collection access through the
injected DatabaseClient and owner-row existence checks.
"""

import logging
from typing import Optional

from bson import ObjectId
from bson.errors import InvalidId
from pymongo.collection import Collection

from src.common.database import DatabaseClient
from src.common.error_handling import NotFound

logger = logging.getLogger(__name__)


def to_object_id(value: str, what: str = "record") -> ObjectId:
    """
    Parse a string id into an ObjectId.

    Raises:
        NotFound: If the id is not a valid ObjectId (no row can match it)
    """
    try:
        return ObjectId(value)
    except (InvalidId, TypeError) as e:
        raise NotFound(f"No {what} with id {value!r}") from e


class MongoRepository:
    """
    Base class for MongoDB repositories.

    Subclasses set `collection_name` to one of the DatabaseClient collection
    properties.
    """

    collection_name: str = ""

    def __init__(self, db_client: DatabaseClient):
        """
        Initialize the repository.

        Args:
            db_client: Shared database client built at startup
        """
        self._db_client = db_client

    def _get_collection(self) -> Collection:
        """Get this repository's collection."""
        return getattr(self._db_client, self.collection_name)

    def _require_user(self, user_id: str) -> ObjectId:
        """
        Check the owning user row exists.

        Returns:
            The user's ObjectId

        Raises:
            NotFound: If no user row has this id
        """
        object_id = to_object_id(user_id, "user")
        if self._db_client.users.count_documents({"_id": object_id}, limit=1) == 0:
            raise NotFound(f"No user with id {user_id!r}")
        return object_id


def inserted_id(result) -> Optional[str]:
    """String form of an InsertOneResult's id."""
    return str(result.inserted_id) if result.inserted_id is not None else None
