"""
User API Routes.

- GET /api/users/me: first-access creation plus onboarding status
- PUT /api/users/me/onboarding: store the onboarding profile
"""

from typing import Optional

from fastapi import APIRouter, Depends

from src.services import UserService

from ..auth import get_current_subject
from ..dependencies import get_user_service
from ..models import ERROR_RESPONSES, OnboardingRequest, UserResponse

router = APIRouter(prefix="/api/users", tags=["users"], responses=ERROR_RESPONSES)


@router.get("/me", response_model=UserResponse)
def get_me(
    subject_id: Optional[str] = Depends(get_current_subject),
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Get the caller's profile, creating the user row on first access."""
    return UserResponse.from_user(service.get_or_create(subject_id))


@router.put("/me/onboarding", response_model=UserResponse)
def complete_onboarding(
    request: OnboardingRequest,
    subject_id: Optional[str] = Depends(get_current_subject),
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Store the caller's industry, experience, skills and bio."""
    user = service.complete_onboarding(
        subject_id,
        industry=request.industry,
        sub_industry=request.sub_industry,
        experience=request.experience,
        skills=request.skills,
        bio=request.bio,
    )
    return UserResponse.from_user(user)
