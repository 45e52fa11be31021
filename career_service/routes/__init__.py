"""
Career service route modules.

This package contains modular route definitions for the API.
Each module handles one workflow.
"""

from .users import router as users_router
from .resume import router as resume_router
from .insights import router as insights_router
from .quiz import router as quiz_router

__all__ = [
    "users_router",
    "resume_router",
    "insights_router",
    "quiz_router",
]
