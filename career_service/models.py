"""
Shared Pydantic models for the career service API.

These models define the structure of API requests and responses. Stored
records (IndustryInsight, Assessment, QuizQuestion) are returned as-is from
src.common.types.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from src.common.types import QuizQuestion, User


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    mongodb: Optional[bool] = None
    timestamp: datetime


class ErrorResponse(BaseModel):
    """Body of every failed request."""

    error: str = Field(..., description="Failure condition name (e.g. DataCorrupt)")
    detail: str


# Documented on every router; the bodies come from the app's exception handlers
ERROR_RESPONSES = {
    code: {"model": ErrorResponse}
    for code in (401, 404, 409, 422, 429, 502, 503)
}


# === Users ===

class UserResponse(BaseModel):
    """The caller's profile and onboarding status."""

    subject_id: str
    industry: Optional[str] = None
    experience: Optional[int] = None
    skills: List[str] = Field(default_factory=list)
    bio: Optional[str] = None
    is_onboarded: bool

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            subject_id=user.subject_id,
            industry=user.industry,
            experience=user.experience,
            skills=user.skills,
            bio=user.bio,
            is_onboarded=user.is_onboarded,
        )


class OnboardingRequest(BaseModel):
    """Request body for completing onboarding."""

    industry: str = Field(..., min_length=1, description="Top-level industry (e.g. 'Tech').")
    sub_industry: Optional[str] = Field(
        None, description="Specialisation (e.g. 'Software Development')."
    )
    experience: Optional[int] = Field(None, ge=0, le=60, description="Years of experience.")
    skills: List[str] = Field(default_factory=list, description="Self-reported skills.")
    bio: Optional[str] = Field(None, max_length=2000, description="Short professional bio.")

    @field_validator("industry")
    @classmethod
    def industry_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("industry must not be blank")
        return v


# === Resume ===

class ResumeSaveRequest(BaseModel):
    """Request body for saving the resume. The body replaces the stored one."""

    content: str = Field(..., description="Full resume body (markdown).")


class ResumeResponse(BaseModel):
    """The caller's resume (empty content if never saved)."""

    content: str = ""
    updated_at: Optional[datetime] = None


class ImproveRequest(BaseModel):
    """Request body for improving one resume fragment."""

    current_text: str = Field(..., min_length=1, description="Text to improve.")
    section_label: str = Field(
        ..., min_length=1, description="Section the text belongs to (e.g. 'work-experience')."
    )


class ImproveResponse(BaseModel):
    """Improved fragment. Nothing has been saved."""

    improved_text: str


# === Quiz ===

class QuizResponse(BaseModel):
    """A freshly generated quiz."""

    questions: List[QuizQuestion]


class SaveResultRequest(BaseModel):
    """Request body for storing a completed quiz."""

    questions: List[QuizQuestion] = Field(..., min_length=1)
    answers: List[Optional[str]] = Field(..., description="One answer per question (null if skipped).")
    score: Optional[float] = Field(
        None, ge=0.0, le=1.0, description="Client-side score; recomputed by the server."
    )

    @model_validator(mode="after")
    def check_answer_count(self) -> "SaveResultRequest":
        if len(self.answers) != len(self.questions):
            raise ValueError(
                f"answers has {len(self.answers)} entries for {len(self.questions)} questions"
            )
        return self
