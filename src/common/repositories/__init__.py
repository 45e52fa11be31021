"""
Repository Pattern for MongoDB Operations

Provides the persistence gateway the workflows depend on: one repository per
entity kind, all sharing a single injected DatabaseClient.

Public API:
- build_gateway(): Factory for the MongoDB-backed PersistenceGateway
- PersistenceGateway: Bundle of the four repositories
- *RepositoryInterface: Abstract interfaces (swap in fakes for tests)

Usage:
    from src.common.database import DatabaseClient
    from src.common.repositories import build_gateway

    gateway = build_gateway(DatabaseClient(), ensure_indexes=True)
    user = gateway.users.ensure_user(subject_id)
    gateway.resumes.upsert_resume(user.id, "# Jane Doe")
"""

from .assessment_repository import AssessmentRepositoryInterface, MongoAssessmentRepository
from .config import PersistenceGateway, build_gateway
from .insight_repository import InsightRepositoryInterface, MongoInsightRepository
from .resume_repository import MongoResumeRepository, ResumeRepositoryInterface
from .user_repository import MongoUserRepository, UserRepositoryInterface

__all__ = [
    # Gateway
    "build_gateway",
    "PersistenceGateway",
    # Interfaces
    "UserRepositoryInterface",
    "ResumeRepositoryInterface",
    "InsightRepositoryInterface",
    "AssessmentRepositoryInterface",
    # MongoDB implementations
    "MongoUserRepository",
    "MongoResumeRepository",
    "MongoInsightRepository",
    "MongoAssessmentRepository",
]
