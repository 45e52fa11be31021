"""
Workflow configuration: MongoDB, the OpenAI client and quiz/insight tuning.

Values are read from the environment (and a local .env) once, at import.
The HTTP layer has its own settings in career_service.config.
"""

import os
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()


def _env_int(name: str, default: int) -> int:
    return int(os.getenv(name, str(default)))


def _env_float(name: str, default: float) -> float:
    return float(os.getenv(name, str(default)))


class Config:
    """Process-wide workflow settings. No secrets in code; everything comes from env."""

    # MongoDB
    MONGODB_URI: str = os.getenv("MONGODB_URI", "")
    MONGO_DB_NAME: str = os.getenv("MONGO_DB_NAME", "career_coach")
    MONGO_TIMEOUT_MS: int = _env_int("MONGO_TIMEOUT_MS", 5000)

    # OpenAI (LLM_BASE_URL points at an OpenAI-compatible proxy when set)
    OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")
    LLM_BASE_URL: str = os.getenv("LLM_BASE_URL", "")
    DEFAULT_MODEL: str = os.getenv("DEFAULT_MODEL", "gpt-4o-mini")
    LLM_TEMPERATURE: float = _env_float("LLM_TEMPERATURE", 0.3)
    LLM_TIMEOUT_SECONDS: float = _env_float("LLM_TIMEOUT_SECONDS", 60)

    # Workflows
    INSIGHT_TTL_DAYS: int = _env_int("INSIGHT_TTL_DAYS", 7)
    QUIZ_QUESTION_COUNT: int = _env_int("QUIZ_QUESTION_COUNT", 10)
    QUIZ_OPTION_COUNT: int = 4

    @classmethod
    def validate(cls) -> None:
        """
        Raise ValueError listing every problem found.

        Called from the API startup hook rather than at import, so tests and
        scripts can load this module without credentials.
        """
        problems: List[str] = [
            f"{name} is not set"
            for name in ("MONGODB_URI", "OPENAI_API_KEY")
            if not getattr(cls, name)
        ]
        if cls.MONGODB_URI and cls.MONGODB_URI.split("://", 1)[0] not in ("mongodb", "mongodb+srv"):
            problems.append("Invalid MongoDB URI (expected mongodb:// or mongodb+srv://)")
        if cls.QUIZ_QUESTION_COUNT < 1:
            problems.append("QUIZ_QUESTION_COUNT must be at least 1")
        if cls.INSIGHT_TTL_DAYS < 1:
            problems.append("INSIGHT_TTL_DAYS must be at least 1")

        if problems:
            raise ValueError(f"Invalid configuration: {'; '.join(problems)} (check your .env file)")

    @classmethod
    def get_llm_api_key(cls) -> str:
        return cls.OPENAI_API_KEY

    @classmethod
    def get_llm_base_url(cls) -> Optional[str]:
        """None means the default OpenAI endpoint."""
        return cls.LLM_BASE_URL or None

    @classmethod
    def summary(cls) -> str:
        """One block for the startup log; secrets reported as set/missing only."""

        def state(value: str) -> str:
            return "set" if value else "MISSING"

        lines = [
            "Workflow configuration:",
            f"  MongoDB URI: {state(cls.MONGODB_URI)} (db={cls.MONGO_DB_NAME}, timeout={cls.MONGO_TIMEOUT_MS}ms)",
            f"  OpenAI key: {state(cls.OPENAI_API_KEY)} (base_url={cls.get_llm_base_url() or 'default'})",
            f"  Model: {cls.DEFAULT_MODEL} (temperature={cls.LLM_TEMPERATURE}, timeout={cls.LLM_TIMEOUT_SECONDS}s)",
            f"  Insight TTL: {cls.INSIGHT_TTL_DAYS} days",
            f"  Quiz: {cls.QUIZ_QUESTION_COUNT} questions x {cls.QUIZ_OPTION_COUNT} options",
        ]
        return "\n".join(lines)
