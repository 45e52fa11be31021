"""
Resume Service.

Two independent operations on the caller's resume:
- save/get: the markdown body is stored verbatim; every save overwrites it.
- improve: rewrite one fragment with the generator. Nothing is persisted;
  the caller decides whether to put the result into the next save.
"""

from typing import Optional

from src.common.logger import get_logger
from src.common.types import Resume
from src.services.operation_base import OperationService
from src.services.prompts import build_resume_improvement_prompt

logger = get_logger(__name__, layer="resume")


class ResumeService(OperationService):
    """Save, load and AI-improve the caller's resume."""

    operation_name: str = "resume"

    def save(self, subject_id: Optional[str], content: str) -> Resume:
        """
        Overwrite the caller's resume with content.

        Raises:
            Unauthorized, UserNotFound: Caller resolution
            StoreUnavailable: Store unreachable
        """
        user = self.resolve_user(subject_id)
        return self._gateway.resumes.upsert_resume(user.id, content)

    def get(self, subject_id: Optional[str]) -> Optional[Resume]:
        """Get the caller's resume, or None if never saved."""
        user = self.resolve_user(subject_id)
        return self._gateway.resumes.get_resume(user.id)

    def improve(self, subject_id: Optional[str], current_text: str, section_label: str) -> str:
        """
        Ask the generator for an improved version of one resume fragment.

        Args:
            subject_id: Verified caller
            current_text: Text to improve
            section_label: Section it belongs to (e.g. "work-experience")

        Returns:
            Improved text with surrounding whitespace trimmed

        Raises:
            Unauthorized, UserNotFound: Caller resolution
            GenerationFailed, RateLimited, MalformedResponse: Upstream errors
        """
        user = self.resolve_user(subject_id)
        prompt = build_resume_improvement_prompt(current_text, section_label, user.industry)

        with self.timed_execution() as timer:
            improved = self.generator.generate(prompt).strip()

        logger.bind(user.subject_id).info(
            f"Improved {section_label!r} fragment in {timer.duration_ms}ms "
            f"({len(current_text)} -> {len(improved)} chars)"
        )
        return improved
