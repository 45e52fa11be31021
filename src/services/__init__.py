"""
Services module for the career coach workflows.

Each service extends OperationService for consistent caller resolution,
strict parsing of generated text and timing.
"""

from src.services.operation_base import OperationService, OperationTimer
from src.services.insight_service import IndustryInsightService
from src.services.quiz_service import QuizService, compute_score, grade_answers
from src.services.resume_service import ResumeService
from src.services.user_service import UserService, normalize_industry

__all__ = [
    # Base classes
    "OperationService",
    "OperationTimer",
    # Services
    "IndustryInsightService",
    "ResumeService",
    "QuizService",
    "UserService",
    # Helpers
    "grade_answers",
    "compute_score",
    "normalize_industry",
]
