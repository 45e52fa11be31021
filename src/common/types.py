"""
Canonical Types and Schemas for the Career Coach Service

Defines the four persisted records (User, Resume, IndustryInsight,
Assessment) and the schemas that generated text must satisfy before it is
trusted (IndustryInsightPayload, QuizPayload).

Records are built from MongoDB documents with `from_document`; `_id`
ObjectIds become string ids.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from src.common.config import Config


def utcnow() -> datetime:
    """Timezone-aware current UTC time."""
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes (as returned by pymongo) as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _document_id(doc: Dict[str, Any]) -> Dict[str, Any]:
    """Copy a document, turning `_id` into a string `id`."""
    data = dict(doc)
    if "_id" in data:
        data["id"] = str(data.pop("_id"))
    return data


class _Record(BaseModel):
    """Base for persisted records."""

    model_config = ConfigDict(extra="ignore")

    @classmethod
    def from_document(cls, doc: Dict[str, Any]):
        """Build the record from a MongoDB document."""
        return cls.model_validate(_document_id(doc))


# ===== Persisted records =====


class User(_Record):
    """A signed-in person, keyed by the identity provider's subject id."""

    id: Optional[str] = None
    subject_id: str
    industry: Optional[str] = None
    experience: Optional[int] = None
    skills: List[str] = Field(default_factory=list)
    bio: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_onboarded(self) -> bool:
        """True once the user has chosen an industry."""
        return bool(self.industry)


class Resume(_Record):
    """The single markdown resume body owned by a user."""

    id: Optional[str] = None
    user_id: str
    content: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class SalaryRange(BaseModel):
    """Salary band for one role."""

    role: str
    min: float
    max: float
    median: float
    location: str = ""

    @model_validator(mode="after")
    def check_ordering(self) -> "SalaryRange":
        if not (self.min <= self.median <= self.max):
            raise ValueError(
                f"salary range for {self.role!r} is not ordered min <= median <= max"
            )
        return self


class IndustryInsightPayload(BaseModel):
    """Shape the generator must return for an industry report."""

    model_config = ConfigDict(extra="ignore")

    salary_ranges: List[SalaryRange] = Field(min_length=1)
    growth_rate: float
    demand_level: Literal["High", "Medium", "Low"]
    top_skills: List[str] = Field(min_length=1)
    market_outlook: Literal["Positive", "Neutral", "Negative"]
    key_trends: List[str] = Field(min_length=1)
    recommended_skills: List[str] = Field(min_length=1)

    @field_validator("top_skills", "key_trends", "recommended_skills")
    @classmethod
    def strip_items(cls, v: List[str]) -> List[str]:
        items = [item.strip() for item in v if item and item.strip()]
        if not items:
            raise ValueError("list contains no non-blank entries")
        return items


class IndustryInsight(_Record, IndustryInsightPayload):
    """Cached per-industry report, shared by every user in that industry."""

    id: Optional[str] = None
    industry: str
    last_updated: datetime
    next_update: datetime

    def is_fresh(self, now: datetime) -> bool:
        """True while the due timestamp is still in the future."""
        return as_utc(self.next_update) > as_utc(now)


class QuizQuestion(BaseModel):
    """One multiple-choice interview question."""

    model_config = ConfigDict(extra="ignore")

    question: str = Field(min_length=1)
    options: List[str]
    correct_answer: str
    explanation: str = Field(min_length=1)

    @field_validator("options")
    @classmethod
    def check_options(cls, v: List[str]) -> List[str]:
        if len(v) != Config.QUIZ_OPTION_COUNT:
            raise ValueError(
                f"expected {Config.QUIZ_OPTION_COUNT} options, got {len(v)}"
            )
        if len(set(v)) != len(v):
            raise ValueError("options must be distinct")
        return v

    @model_validator(mode="after")
    def check_correct_answer(self) -> "QuizQuestion":
        if self.options.count(self.correct_answer) != 1:
            raise ValueError(
                f"correct_answer {self.correct_answer!r} is not one of the options"
            )
        return self


class QuizPayload(BaseModel):
    """Shape the generator must return for a quiz."""

    model_config = ConfigDict(extra="ignore")

    questions: List[QuizQuestion]


class QuestionResult(BaseModel):
    """One answered question inside an assessment."""

    question: str
    options: List[str] = Field(default_factory=list)
    correct_answer: str
    user_answer: Optional[str] = None
    is_correct: bool
    explanation: str = ""


class Assessment(_Record):
    """One completed quiz attempt. Immutable once stored."""

    id: Optional[str] = None
    user_id: str
    quiz_score: float = Field(ge=0.0, le=1.0)
    questions: List[QuestionResult]
    category: str = "Technical"
    improvement_tip: Optional[str] = None
    created_at: datetime
