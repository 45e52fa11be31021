"""
User Repository

Repository interface for the users collection.
One document per identity-provider subject id.
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from src.common.error_handling import UserNotFound, store_operation
from src.common.types import User, utcnow

from .base import MongoRepository

logger = logging.getLogger(__name__)


class UserRepositoryInterface(ABC):
    """
    Abstract interface for the users collection.

    Users are created on first authenticated access, updated by onboarding,
    and never deleted.
    """

    @abstractmethod
    def find_user_by_subject_id(self, subject_id: str) -> Optional[User]:
        """
        Find a user by identity-provider subject id.

        Returns:
            User or None
        """
        pass

    @abstractmethod
    def ensure_user(self, subject_id: str) -> User:
        """
        Get the user for a subject, creating an empty one if absent.

        Returns:
            The existing or newly created User
        """
        pass

    @abstractmethod
    def update_profile(
        self,
        subject_id: str,
        industry: str,
        experience: Optional[int] = None,
        skills: Optional[List[str]] = None,
        bio: Optional[str] = None,
    ) -> User:
        """
        Set the onboarding fields in one atomic write.

        Raises:
            UserNotFound: If no user row exists for the subject
        """
        pass


class MongoUserRepository(MongoRepository, UserRepositoryInterface):
    """MongoDB implementation of UserRepository."""

    collection_name = "users"

    @store_operation("find user")
    def find_user_by_subject_id(self, subject_id: str) -> Optional[User]:
        doc = self._get_collection().find_one({"subject_id": subject_id})
        return User.from_document(doc) if doc else None

    @store_operation("ensure user")
    def ensure_user(self, subject_id: str) -> User:
        now = utcnow()
        collection = self._get_collection()
        try:
            doc = collection.find_one_and_update(
                {"subject_id": subject_id},
                {
                    "$setOnInsert": {
                        "subject_id": subject_id,
                        "industry": None,
                        "experience": None,
                        "skills": [],
                        "bio": None,
                        "created_at": now,
                        "updated_at": now,
                    }
                },
                upsert=True,
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError:
            # Concurrent first access inserted the row between our match and insert
            doc = collection.find_one({"subject_id": subject_id})
        return User.from_document(doc)

    @store_operation("update profile")
    def update_profile(
        self,
        subject_id: str,
        industry: str,
        experience: Optional[int] = None,
        skills: Optional[List[str]] = None,
        bio: Optional[str] = None,
    ) -> User:
        doc = self._get_collection().find_one_and_update(
            {"subject_id": subject_id},
            {
                "$set": {
                    "industry": industry,
                    "experience": experience,
                    "skills": list(skills or []),
                    "bio": bio,
                    "updated_at": utcnow(),
                }
            },
            return_document=ReturnDocument.AFTER,
        )
        if doc is None:
            raise UserNotFound(subject_id)
        logger.info(f"Updated profile for subject {subject_id[:8]} (industry={industry})")
        return User.from_document(doc)
