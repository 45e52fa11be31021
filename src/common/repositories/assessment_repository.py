"""
Assessment Repository

Repository interface for the assessments collection.
Append-only history of completed quiz attempts per user.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List

from pymongo import ASCENDING

from src.common.error_handling import store_operation
from src.common.types import Assessment

from .base import MongoRepository, inserted_id

logger = logging.getLogger(__name__)


class AssessmentRepositoryInterface(ABC):
    """
    Abstract interface for the assessments collection.

    Records are never updated or removed once appended.
    """

    @abstractmethod
    def append_assessment(self, user_id: str, record: Dict[str, Any]) -> Assessment:
        """
        Append one completed attempt.

        Args:
            user_id: Owning user id
            record: Assessment fields (quiz_score, questions, category, ...)

        Raises:
            NotFound: If the owning user does not exist
        """
        pass

    @abstractmethod
    def list_assessments(self, user_id: str) -> List[Assessment]:
        """
        List the user's attempts, oldest first.

        Raises:
            NotFound: If the owning user does not exist
        """
        pass


class MongoAssessmentRepository(MongoRepository, AssessmentRepositoryInterface):
    """MongoDB implementation of AssessmentRepository."""

    collection_name = "assessments"

    @store_operation("append assessment")
    def append_assessment(self, user_id: str, record: Dict[str, Any]) -> Assessment:
        self._require_user(user_id)
        doc = {**record, "user_id": user_id}
        # Validate before writing so a bad record never lands in the history
        assessment = Assessment.model_validate(doc)
        result = self._get_collection().insert_one(doc)
        logger.info(
            f"Appended assessment for user {user_id} (score={assessment.quiz_score:.2f})"
        )
        return assessment.model_copy(update={"id": inserted_id(result)})

    @store_operation("list assessments")
    def list_assessments(self, user_id: str) -> List[Assessment]:
        self._require_user(user_id)
        cursor = self._get_collection().find({"user_id": user_id}).sort(
            [("created_at", ASCENDING), ("_id", ASCENDING)]
        )
        return [Assessment.from_document(doc) for doc in cursor]
