"""
Centralized error handling for the career coach workflows.

Defines the named failure conditions every workflow surfaces to its caller,
plus decorators and utilities for consistent logging and for translating
driver-level store errors into those conditions.

None of these conditions are recovered locally: the first failure aborts the
operation and reaches the caller unchanged.
"""

import logging
from functools import wraps
from typing import Any, Callable, Optional, TypeVar

from pymongo.errors import ConnectionFailure, NetworkTimeout, ServerSelectionTimeoutError

# Type variable for generic return types
T = TypeVar("T")


class CareerCoachError(Exception):
    """Base class for every named failure condition."""

    status_code: int = 500

    def __init__(self, message: str = ""):
        self.message = message or self.__class__.__name__
        super().__init__(self.message)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {"error": self.__class__.__name__, "detail": self.message}


class Unauthorized(CareerCoachError):
    """No verified caller for the request."""

    status_code = 401


class UserNotFound(CareerCoachError):
    """Verified caller has no matching user row."""

    status_code = 404

    def __init__(self, subject_id: str, message: str = ""):
        self.subject_id = subject_id
        super().__init__(message or f"No user for subject {subject_id}")


class OnboardingRequired(UserNotFound):
    """User row exists but has not chosen an industry yet."""

    status_code = 409

    def __init__(self, subject_id: str):
        super().__init__(subject_id, f"User {subject_id} has not completed onboarding")


class InvalidInput(CareerCoachError):
    """Caller-supplied value that cannot be stored (e.g. a blank industry)."""

    status_code = 422


class NotFound(CareerCoachError):
    """A referenced owner row does not exist."""

    status_code = 404


class StoreUnavailable(CareerCoachError):
    """Persistence is unreachable or timed out."""

    status_code = 503


class GenerationFailed(CareerCoachError):
    """Upstream text-generation error."""

    status_code = 502


class RateLimited(GenerationFailed):
    """Upstream text-generation rejected the call for quota reasons."""

    status_code = 429


class MalformedResponse(GenerationFailed):
    """Upstream returned no usable completion text."""

    status_code = 502


class DataCorrupt(CareerCoachError):
    """Generated text does not parse into the expected structured shape."""

    status_code = 502

    def __init__(self, shape: str, reason: str):
        self.shape = shape
        self.reason = reason
        super().__init__(f"Generated {shape} could not be parsed: {reason}")


# Driver errors that mean "the store could not be reached"
STORE_CONNECTIVITY_ERRORS = (ConnectionFailure, NetworkTimeout, ServerSelectionTimeoutError)


def store_operation(operation_name: str):
    """
    Decorator for repository methods.

    Translates pymongo connectivity errors into StoreUnavailable and logs the
    failure at ERROR. Every other exception propagates unchanged.

    Usage:
        @store_operation("upsert resume")
        def upsert_resume(self, user_id: str, content: str) -> Resume:
            ...
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args, **kwargs) -> T:
            try:
                return func(*args, **kwargs)
            except STORE_CONNECTIVITY_ERRORS as e:
                logging.getLogger(func.__module__).error(
                    f"[store] [{operation_name}] ✗ Store unreachable: {e}"
                )
                raise StoreUnavailable(f"{operation_name} failed: {e}") from e

        return wrapper

    return decorator


def safe_execute(
    func: Callable[..., T],
    *args,
    operation_name: str = "operation",
    logger: Optional[logging.Logger] = None,
    fallback: Any = None,
    **kwargs,
) -> T:
    """
    Execute a function, logging any CareerCoachError and returning a fallback.

    Only for optional enrichment steps whose failure must not abort the
    enclosing workflow. Programming errors are not caught.

    Args:
        func: Function to execute
        *args: Positional arguments for func
        operation_name: Name for logging
        logger: Logger instance (uses module logger if None)
        fallback: Value to return on failure
        **kwargs: Keyword arguments for func

    Returns:
        Function result or fallback value
    """
    log = logger or logging.getLogger(__name__)
    try:
        return func(*args, **kwargs)
    except CareerCoachError as e:
        log.warning(f"[{operation_name}] ✗ Skipped: {e}")
        return fallback
