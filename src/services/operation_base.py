"""
Base class for the career coach workflows.

Each workflow (insights, resume, quiz, users) extends this to share caller
resolution, strict parsing of generated text, timing and the clock.
"""

from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Iterator, Optional, Type, TypeVar
import logging
import time

from pydantic import BaseModel, ValidationError

from src.common.error_handling import DataCorrupt, OnboardingRequired, Unauthorized, UserNotFound
from src.common.generation import TextGeneratorInterface
from src.common.json_utils import parse_llm_json
from src.common.repositories import PersistenceGateway
from src.common.types import User, utcnow

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


class OperationService:
    """
    Base class for workflows.

    Workflows are stateless: every call resolves its caller, performs at most
    one read, optionally one generation call, then one write.
    """

    operation_name: str  # Override in subclass

    def __init__(
        self,
        gateway: PersistenceGateway,
        generator: Optional[TextGeneratorInterface] = None,
        clock: Callable[[], datetime] = utcnow,
    ):
        """
        Initialize the workflow.

        Args:
            gateway: Persistence gateway built at startup
            generator: Generative-text client (required by workflows that generate)
            clock: Source of "now" (injected by tests)
        """
        self._gateway = gateway
        self._generator = generator
        self._clock = clock

    @property
    def generator(self) -> TextGeneratorInterface:
        """Get the generative-text client."""
        if self._generator is None:
            raise RuntimeError(f"{type(self).__name__} was built without a text generator")
        return self._generator

    def now(self) -> datetime:
        """Current time from the injected clock."""
        return self._clock()

    def resolve_user(self, subject_id: Optional[str]) -> User:
        """
        Resolve the verified caller to its user row.

        Args:
            subject_id: Subject from the session, or None

        Returns:
            The caller's User

        Raises:
            Unauthorized: No verified subject
            UserNotFound: Subject has no user row
        """
        if not subject_id:
            raise Unauthorized("No verified caller")
        user = self._gateway.users.find_user_by_subject_id(subject_id)
        if user is None:
            raise UserNotFound(subject_id)
        return user

    def require_industry(self, user: User) -> str:
        """
        Get the user's industry label.

        Raises:
            OnboardingRequired: If the user has not chosen an industry
        """
        if not user.is_onboarded:
            raise OnboardingRequired(user.subject_id)
        return user.industry

    def parse_generated(self, text: str, schema: Type[SchemaT], shape: str) -> SchemaT:
        """
        Parse generated text strictly into a schema.

        Args:
            text: Raw completion text
            schema: Pydantic model the JSON must satisfy
            shape: Human-readable shape name for errors (e.g. "industry insight")

        Returns:
            Validated schema instance

        Raises:
            DataCorrupt: If no JSON object is found or it fails validation
        """
        try:
            data = parse_llm_json(text)
        except ValueError as e:
            logger.warning(f"[{self.operation_name}] Unparseable {shape}: {e}")
            raise DataCorrupt(shape, str(e)) from e

        try:
            return schema.model_validate(data)
        except ValidationError as e:
            logger.warning(
                f"[{self.operation_name}] {shape} failed validation "
                f"({e.error_count()} errors)"
            )
            raise DataCorrupt(shape, str(e)) from e

    @contextmanager
    def timed_execution(self) -> Iterator["OperationTimer"]:
        """Time the enclosed block; read `timer.duration_ms` once it exits."""
        timer = OperationTimer()
        try:
            yield timer
        finally:
            timer.stop()


@dataclass
class OperationTimer:
    """Wall-clock duration of one workflow step, in milliseconds."""

    started: float = field(default_factory=time.monotonic)
    stopped: Optional[float] = None

    @property
    def duration_ms(self) -> int:
        # Still running: elapsed so far
        end = time.monotonic() if self.stopped is None else self.stopped
        return round((end - self.started) * 1000)

    def stop(self) -> int:
        if self.stopped is None:
            self.stopped = time.monotonic()
        return self.duration_ms
