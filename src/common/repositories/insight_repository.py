"""
Industry Insight Repository

Repository interface for the industry_insights collection.
Stores one generated market report per industry label, shared by every user
in that industry. Freshness is decided by the caller from `next_update`;
there is no TTL index, stale rows are replaced in place.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from pymongo import ReturnDocument

from src.common.error_handling import store_operation
from src.common.types import IndustryInsight

from .base import MongoRepository

logger = logging.getLogger(__name__)


class InsightRepositoryInterface(ABC):
    """Abstract interface for the industry_insights collection."""

    @abstractmethod
    def get_insight(self, industry: str) -> Optional[IndustryInsight]:
        """
        Find the cached report for an industry.

        Args:
            industry: Industry label exactly as stored on the user

        Returns:
            IndustryInsight or None
        """
        pass

    @abstractmethod
    def create_insight(self, industry: str, fields: Dict[str, Any]) -> IndustryInsight:
        """
        Write the report for an industry, replacing any existing one.

        Args:
            industry: Industry label
            fields: Report fields including last_updated and next_update

        Returns:
            The stored IndustryInsight
        """
        pass


class MongoInsightRepository(MongoRepository, InsightRepositoryInterface):
    """MongoDB implementation of InsightRepository."""

    collection_name = "industry_insights"

    @store_operation("get insight")
    def get_insight(self, industry: str) -> Optional[IndustryInsight]:
        doc = self._get_collection().find_one({"industry": industry})
        return IndustryInsight.from_document(doc) if doc else None

    @store_operation("create insight")
    def create_insight(self, industry: str, fields: Dict[str, Any]) -> IndustryInsight:
        replacement = {**fields, "industry": industry}
        doc = self._get_collection().find_one_and_replace(
            {"industry": industry},
            replacement,
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        logger.info(f"Stored insight for industry={industry!r} (next_update={fields.get('next_update')})")
        return IndustryInsight.from_document(doc)
