"""
Repository Configuration and Factory

Bundles the four repositories behind one PersistenceGateway and builds it
from a DatabaseClient. The gateway is constructed once at startup and
injected into every workflow.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from src.common.database import DatabaseClient

from .assessment_repository import AssessmentRepositoryInterface, MongoAssessmentRepository
from .insight_repository import InsightRepositoryInterface, MongoInsightRepository
from .resume_repository import MongoResumeRepository, ResumeRepositoryInterface
from .user_repository import MongoUserRepository, UserRepositoryInterface

logger = logging.getLogger(__name__)


@dataclass
class PersistenceGateway:
    """
    Record-level access to the four entity kinds.

    Attributes:
        users: users collection
        resumes: resumes collection
        insights: industry_insights collection
        assessments: assessments collection
    """
    users: UserRepositoryInterface
    resumes: ResumeRepositoryInterface
    insights: InsightRepositoryInterface
    assessments: AssessmentRepositoryInterface


def build_gateway(
    db_client: Optional[DatabaseClient] = None,
    ensure_indexes: bool = False,
) -> PersistenceGateway:
    """
    Build the MongoDB-backed gateway.

    Args:
        db_client: Shared client (defaults to a new DatabaseClient from Config)
        ensure_indexes: Create the unique/listing indexes before returning

    Returns:
        PersistenceGateway over MongoDB repositories

    Raises:
        ValueError: If MONGODB_URI is not configured
        StoreUnavailable: If ensure_indexes is set and the server is unreachable
    """
    client = db_client or DatabaseClient()
    if ensure_indexes:
        client.ensure_indexes()

    gateway = PersistenceGateway(
        users=MongoUserRepository(client),
        resumes=MongoResumeRepository(client),
        insights=MongoInsightRepository(client),
        assessments=MongoAssessmentRepository(client),
    )
    logger.info("Initialized MongoDB persistence gateway")
    return gateway
