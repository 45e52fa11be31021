"""
Quiz and Assessment API Routes.

- POST /api/quiz: generate a new quiz
- POST /api/assessments: store a completed quiz
- GET /api/assessments: the caller's history, oldest first
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, status

from src.common.types import Assessment
from src.services import QuizService

from ..auth import get_current_subject
from ..dependencies import get_quiz_service
from ..models import ERROR_RESPONSES, QuizResponse, SaveResultRequest

router = APIRouter(prefix="/api", tags=["quiz"], responses=ERROR_RESPONSES)


@router.post("/quiz", response_model=QuizResponse)
def generate_quiz(
    subject_id: Optional[str] = Depends(get_current_subject),
    service: QuizService = Depends(get_quiz_service),
) -> QuizResponse:
    """Generate interview questions for the caller's industry."""
    return QuizResponse(questions=service.generate_quiz(subject_id))


@router.post("/assessments", response_model=Assessment, status_code=status.HTTP_201_CREATED)
def save_quiz_result(
    request: SaveResultRequest,
    subject_id: Optional[str] = Depends(get_current_subject),
    service: QuizService = Depends(get_quiz_service),
) -> Assessment:
    """Grade and store a completed quiz."""
    return service.save_result(subject_id, request.questions, request.answers, request.score)


@router.get("/assessments", response_model=List[Assessment])
def list_assessments(
    subject_id: Optional[str] = Depends(get_current_subject),
    service: QuizService = Depends(get_quiz_service),
) -> List[Assessment]:
    """List the caller's assessments, oldest first."""
    return service.list_assessments(subject_id)
