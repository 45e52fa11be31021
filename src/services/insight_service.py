"""
Industry Insight Service.

Serves the per-industry market report shared by every user in an industry.
The report is generated lazily and cached in the industry_insights
collection until its `next_update` timestamp passes.

Cache policy:
    1. Look up the row for the caller's industry.
    2. Row present and next_update in the future -> return it unchanged.
    3. Row stale or absent -> one generation call, strict parse,
       next_update = now + INSIGHT_TTL_DAYS, write (create or replace), return.

Concurrent misses for one industry inside this process share a single
generation call (SingleFlight). Across processes the race is accepted: both
generate and the last write wins.

Usage:
    service = IndustryInsightService(gateway, generator)
    insight = service.get_industry_insights(subject_id)
"""

from datetime import timedelta
from typing import Optional

from src.common.config import Config
from src.common.logger import get_logger
from src.common.single_flight import SingleFlight
from src.common.types import IndustryInsight, IndustryInsightPayload
from src.services.operation_base import OperationService
from src.services.prompts import build_industry_insight_prompt

logger = get_logger(__name__, layer="insights")


class IndustryInsightService(OperationService):
    """Lazy write-through cache of generated industry reports."""

    operation_name: str = "industry-insights"

    def __init__(
        self,
        *args,
        flights: Optional[SingleFlight[IndustryInsight]] = None,
        ttl_days: Optional[int] = None,
        **kwargs,
    ):
        """
        Initialize the service.

        Args:
            flights: Shared in-flight table (one per process)
            ttl_days: Days until a generated report is due for refresh
            *args, **kwargs: Forwarded to OperationService
        """
        super().__init__(*args, **kwargs)
        self._flights = flights or SingleFlight()
        self._ttl = timedelta(days=ttl_days or Config.INSIGHT_TTL_DAYS)

    def get_industry_insights(self, subject_id: Optional[str]) -> IndustryInsight:
        """
        Get the report for the caller's industry.

        Raises:
            Unauthorized, UserNotFound, OnboardingRequired: Caller resolution
            GenerationFailed, RateLimited: Upstream generation error on refresh
            DataCorrupt: Generated report did not match the expected shape
            StoreUnavailable: Store unreachable
        """
        user = self.resolve_user(subject_id)
        industry = self.require_industry(user)
        return self.get_or_refresh(industry)

    def get_or_refresh(self, industry: str) -> IndustryInsight:
        """
        Return the cached report for an industry, regenerating it if stale or absent.

        Args:
            industry: Industry label

        Returns:
            Fresh IndustryInsight
        """
        cached = self._gateway.insights.get_insight(industry)
        if cached is not None:
            if cached.is_fresh(self.now()):
                logger.info(f"Cache HIT for {industry!r}")
                return cached
            logger.info(f"Cache EXPIRED for {industry!r} (next_update={cached.next_update})")
        else:
            logger.info(f"Cache MISS for {industry!r}")

        return self._flights.do(industry, lambda: self._refresh(industry))

    def _refresh(self, industry: str) -> IndustryInsight:
        """Generate, validate and store a new report for an industry."""
        requested_at = self.now()

        with self.timed_execution() as timer:
            text = self.generator.generate(build_industry_insight_prompt(industry))
            payload = self.parse_generated(text, IndustryInsightPayload, "industry insight")

        fields = payload.model_dump()
        fields["last_updated"] = requested_at
        fields["next_update"] = requested_at + self._ttl

        insight = self._gateway.insights.create_insight(industry, fields)
        logger.info(
            f"Refreshed insight for {industry!r} in {timer.duration_ms}ms "
            f"(demand={payload.demand_level}, outlook={payload.market_outlook})"
        )
        return insight
