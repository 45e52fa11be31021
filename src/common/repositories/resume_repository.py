"""
Resume Repository

Repository interface for the resumes collection.
One document per user holding the whole markdown body.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from pymongo import ReturnDocument

from src.common.error_handling import store_operation
from src.common.types import Resume, utcnow

from .base import MongoRepository

logger = logging.getLogger(__name__)


class ResumeRepositoryInterface(ABC):
    """
    Abstract interface for the resumes collection.

    Saves overwrite the whole body; there is no versioning or merging.
    """

    @abstractmethod
    def upsert_resume(self, user_id: str, content: str) -> Resume:
        """
        Create or overwrite the user's resume.

        Raises:
            NotFound: If the owning user does not exist
        """
        pass

    @abstractmethod
    def get_resume(self, user_id: str) -> Optional[Resume]:
        """
        Get the user's resume.

        Returns:
            Resume or None if never saved
        """
        pass


class MongoResumeRepository(MongoRepository, ResumeRepositoryInterface):
    """MongoDB implementation of ResumeRepository."""

    collection_name = "resumes"

    @store_operation("upsert resume")
    def upsert_resume(self, user_id: str, content: str) -> Resume:
        self._require_user(user_id)
        now = utcnow()
        doc = self._get_collection().find_one_and_update(
            {"user_id": user_id},
            {
                "$set": {"content": content, "updated_at": now},
                "$setOnInsert": {"user_id": user_id, "created_at": now},
            },
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        logger.info(f"Saved resume for user {user_id} ({len(content)} chars)")
        return Resume.from_document(doc)

    @store_operation("get resume")
    def get_resume(self, user_id: str) -> Optional[Resume]:
        doc = self._get_collection().find_one({"user_id": user_id})
        return Resume.from_document(doc) if doc else None
