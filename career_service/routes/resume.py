"""
Resume API Routes.

- GET /api/resume: load the caller's resume
- PUT /api/resume: overwrite the caller's resume
- POST /api/resume/improve: AI rewrite of one fragment (not saved)
"""

from typing import Optional

from fastapi import APIRouter, Depends

from src.services import ResumeService

from ..auth import get_current_subject
from ..dependencies import get_resume_service
from ..models import (
    ERROR_RESPONSES,
    ImproveRequest,
    ImproveResponse,
    ResumeResponse,
    ResumeSaveRequest,
)

router = APIRouter(prefix="/api/resume", tags=["resume"], responses=ERROR_RESPONSES)


@router.get("", response_model=ResumeResponse)
def get_resume(
    subject_id: Optional[str] = Depends(get_current_subject),
    service: ResumeService = Depends(get_resume_service),
) -> ResumeResponse:
    """Get the caller's resume; empty content if never saved."""
    resume = service.get(subject_id)
    if resume is None:
        return ResumeResponse()
    return ResumeResponse(content=resume.content, updated_at=resume.updated_at)


@router.put("", response_model=ResumeResponse)
def save_resume(
    request: ResumeSaveRequest,
    subject_id: Optional[str] = Depends(get_current_subject),
    service: ResumeService = Depends(get_resume_service),
) -> ResumeResponse:
    """Replace the caller's resume with the request body."""
    resume = service.save(subject_id, request.content)
    return ResumeResponse(content=resume.content, updated_at=resume.updated_at)


@router.post("/improve", response_model=ImproveResponse)
def improve_text(
    request: ImproveRequest,
    subject_id: Optional[str] = Depends(get_current_subject),
    service: ResumeService = Depends(get_resume_service),
) -> ImproveResponse:
    """Return an improved version of one resume fragment."""
    improved = service.improve(subject_id, request.current_text, request.section_label)
    return ImproveResponse(improved_text=improved)
