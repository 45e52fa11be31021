"""
Industry Insight API Routes.

- GET /api/insights: the report for the caller's industry
"""

from typing import Optional

from fastapi import APIRouter, Depends

from src.common.types import IndustryInsight
from src.services import IndustryInsightService

from ..auth import get_current_subject
from ..dependencies import get_insight_service
from ..models import ERROR_RESPONSES

router = APIRouter(prefix="/api/insights", tags=["insights"], responses=ERROR_RESPONSES)


@router.get("", response_model=IndustryInsight)
def get_industry_insights(
    subject_id: Optional[str] = Depends(get_current_subject),
    service: IndustryInsightService = Depends(get_insight_service),
) -> IndustryInsight:
    """Get the cached report, regenerating it when stale or absent."""
    return service.get_industry_insights(subject_id)
