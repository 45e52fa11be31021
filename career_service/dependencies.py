"""
Service wiring for the API.

Workflows are built once per process around one PersistenceGateway and one
generative-text client, kept on app.state, and handed to route handlers
through FastAPI dependencies.
"""

from dataclasses import dataclass
from typing import Optional

from fastapi import Request

from src.common.database import DatabaseClient
from src.common.generation import TextGeneratorInterface
from src.common.repositories import PersistenceGateway
from src.common.single_flight import SingleFlight
from src.services import IndustryInsightService, QuizService, ResumeService, UserService


@dataclass
class ServiceContainer:
    """Process-wide workflow instances."""

    users: UserService
    resume: ResumeService
    insights: IndustryInsightService
    quiz: QuizService
    db_client: Optional[DatabaseClient] = None


def build_services(
    gateway: PersistenceGateway,
    generator: TextGeneratorInterface,
    db_client: Optional[DatabaseClient] = None,
) -> ServiceContainer:
    """
    Build every workflow around shared dependencies.

    Args:
        gateway: Persistence gateway
        generator: Generative-text client
        db_client: Underlying client, kept for health checks and shutdown

    Returns:
        ServiceContainer
    """
    insights = IndustryInsightService(gateway, generator, flights=SingleFlight())
    return ServiceContainer(
        users=UserService(gateway, generator, insight_service=insights),
        resume=ResumeService(gateway, generator),
        insights=insights,
        quiz=QuizService(gateway, generator),
        db_client=db_client,
    )


def get_services(request: Request) -> ServiceContainer:
    """Get the container built at startup."""
    return request.app.state.services


def get_user_service(request: Request) -> UserService:
    return get_services(request).users


def get_resume_service(request: Request) -> ResumeService:
    return get_services(request).resume


def get_insight_service(request: Request) -> IndustryInsightService:
    return get_services(request).insights


def get_quiz_service(request: Request) -> QuizService:
    return get_services(request).quiz
