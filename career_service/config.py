"""
Settings for the career coach HTTP service.

Read once from the environment (exact variable names, case-insensitive) and
validated before the app is built, so a weak session secret stops the process
instead of failing the first request.
"""

import logging
from functools import lru_cache
from typing import List, Optional

from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.common.config import Config

logger = logging.getLogger(__name__)

ENVIRONMENTS = ("development", "staging", "production")
LOG_FORMATS = ("simple", "json")
_WEAK_SECRETS = {"secret", "password", "changeme", "session-secret"}


class ServiceSettings(BaseSettings):
    """HTTP service settings. MongoDB and workflow tuning live in src.common.config.Config."""

    model_config = SettingsConfigDict(env_prefix="", case_sensitive=False, extra="ignore")

    environment: str = "development"
    session_secret: Optional[str] = Field(default=None, min_length=16)

    host: str = "0.0.0.0"
    port: int = Field(default=8000, ge=1, le=65535)
    # Comma-separated; empty disables CORS
    cors_origins: str = ""

    log_level: str = "INFO"
    log_format: str = "simple"

    @field_validator("environment", "log_format")
    @classmethod
    def one_of_known_values(cls, v: str, info: ValidationInfo) -> str:
        allowed = ENVIRONMENTS if info.field_name == "environment" else LOG_FORMATS
        value = v.lower()
        if value not in allowed:
            raise ValueError(f"{info.field_name} must be one of: {', '.join(allowed)}")
        return value

    @field_validator("session_secret")
    @classmethod
    def secret_not_guessable(cls, v: Optional[str]) -> Optional[str]:
        # Fewer than 4 distinct characters ("abababab...") counts as weak
        if v is not None and (v.lower() in _WEAK_SECRETS or len(set(v)) < 4):
            raise ValueError("Session secret is too weak - use a secure random string")
        return v

    @property
    def cors_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def validate_production_config(self) -> List[str]:
        """
        Deployment problems the field validators cannot see.

        Entries starting with CRITICAL block startup; WARNING entries are logged.
        """
        if not self.is_production:
            if self.session_secret:
                return []
            return ["WARNING: SESSION_SECRET not set - every request will be unauthorized"]

        issues = []
        if not self.session_secret:
            issues.append("CRITICAL: SESSION_SECRET required in production")
        if not self.cors_origins_list:
            issues.append("WARNING: CORS_ORIGINS not configured")
        if "localhost" in Config.MONGODB_URI or "127.0.0.1" in Config.MONGODB_URI:
            issues.append("WARNING: Using a local MongoDB in production")
        return issues


@lru_cache()
def get_settings() -> ServiceSettings:
    return ServiceSettings()


def validate_config_on_startup() -> None:
    """
    Load settings and check them for the current environment.

    Raises:
        ValueError: Settings fail validation or a CRITICAL issue is found
    """
    try:
        loaded = get_settings()
    except ValueError as e:
        raise ValueError(f"Configuration validation failed: {e}") from e

    for issue in loaded.validate_production_config():
        if issue.startswith("CRITICAL"):
            raise ValueError(issue)
        logger.warning(issue)

    logger.info(
        f"Configuration loaded: environment={loaded.environment} "
        f"session_secret={'set' if loaded.session_secret else 'missing'}"
    )


settings = get_settings()
