"""
User Service.

Creates the user row on first authenticated access and records the
onboarding profile. Onboarding also warms the insight cache for the chosen
industry so the dashboard has a report on first view.
"""

from typing import List, Optional

from src.common.error_handling import InvalidInput, Unauthorized, safe_execute
from src.common.logger import get_logger
from src.common.types import User
from src.services.insight_service import IndustryInsightService
from src.services.operation_base import OperationService

logger = get_logger(__name__, layer="users")


def normalize_industry(industry: str, sub_industry: Optional[str] = None) -> str:
    """
    Build the stored industry label.

    "Tech", "Software Development" -> "tech-software-development"

    Args:
        industry: Top-level industry
        sub_industry: Optional specialisation

    Returns:
        Lowercase, dash-separated label
    """
    parts = [industry] + ([sub_industry] if sub_industry else [])
    label = "-".join(p.strip() for p in parts if p and p.strip())
    return "-".join(label.lower().split())


class UserService(OperationService):
    """First-access user creation and onboarding."""

    operation_name: str = "users"

    def __init__(self, *args, insight_service: Optional[IndustryInsightService] = None, **kwargs):
        """
        Initialize the service.

        Args:
            insight_service: Used to warm the insight cache after onboarding
            *args, **kwargs: Forwarded to OperationService
        """
        super().__init__(*args, **kwargs)
        self._insight_service = insight_service

    def get_or_create(self, subject_id: Optional[str]) -> User:
        """
        Get the caller's user row, creating it on first access.

        Raises:
            Unauthorized: No verified subject
        """
        if not subject_id:
            raise Unauthorized("No verified caller")
        return self._gateway.users.ensure_user(subject_id)

    def complete_onboarding(
        self,
        subject_id: Optional[str],
        industry: str,
        sub_industry: Optional[str] = None,
        experience: Optional[int] = None,
        skills: Optional[List[str]] = None,
        bio: Optional[str] = None,
    ) -> User:
        """
        Store the onboarding profile and warm the industry's insight.

        A failure while warming is logged; the profile stays saved and the
        report is generated on the next insights request instead.

        Raises:
            Unauthorized, UserNotFound: Caller resolution
            InvalidInput: Industry is blank once normalised; nothing is written
            StoreUnavailable: Store unreachable
        """
        self.resolve_user(subject_id)
        label = normalize_industry(industry, sub_industry)
        if not label:
            raise InvalidInput(f"Industry {industry!r} is blank")
        cleaned_skills = [s.strip() for s in (skills or []) if s and s.strip()]

        user = self._gateway.users.update_profile(
            subject_id,
            industry=label,
            experience=experience,
            skills=cleaned_skills,
            bio=bio,
        )
        logger.bind(subject_id).info(f"Onboarding complete (industry={label!r})")

        if self._insight_service is not None:
            safe_execute(
                self._insight_service.get_or_refresh,
                label,
                operation_name="insight warm-up",
                logger=logger.logger,
            )
        return user
