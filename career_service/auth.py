"""
Authentication Module

Resolves the verified caller of a request from a signed session token.

Token format (Authorization: Bearer <token>):
    <subject_id>.<hex HMAC-SHA256 of subject_id keyed with SESSION_SECRET>

A missing, malformed or badly signed token resolves to no caller; the
workflows then raise Unauthorized.
"""

import hashlib
import hmac
import logging
from typing import Optional

from fastapi import Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .config import settings


logger = logging.getLogger(__name__)
security = HTTPBearer(auto_error=False)


def get_session_secret() -> str:
    """Get the session signing secret from validated config."""
    if not settings.session_secret:
        raise ValueError(
            "SESSION_SECRET environment variable is required for authentication"
        )
    return settings.session_secret


def _signature(subject_id: str, secret: str) -> str:
    return hmac.new(secret.encode(), subject_id.encode(), hashlib.sha256).hexdigest()


def sign_session(subject_id: str, secret: Optional[str] = None) -> str:
    """
    Mint a session token for a subject.

    Args:
        subject_id: Identity-provider subject id (must be non-empty)
        secret: Signing secret (defaults to SESSION_SECRET)

    Returns:
        Token string for the Authorization header
    """
    if not subject_id:
        raise ValueError("subject_id must be non-empty")
    key = secret or get_session_secret()
    return f"{subject_id}.{_signature(subject_id, key)}"


def verify_session(token: str, secret: Optional[str] = None) -> Optional[str]:
    """
    Verify a session token.

    Args:
        token: Token as sent by the client
        secret: Signing secret (defaults to SESSION_SECRET)

    Returns:
        The subject id if the signature is valid, None otherwise
    """
    subject_id, sep, signature = token.rpartition(".")
    if not sep or not subject_id or not signature:
        return None

    try:
        key = secret or get_session_secret()
    except ValueError:
        logger.error("Session token received but SESSION_SECRET is not configured")
        return None

    if not hmac.compare_digest(signature, _signature(subject_id, key)):
        return None
    return subject_id


async def get_current_subject(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(security),
) -> Optional[str]:
    """
    FastAPI dependency: the verified subject id for this request, or None.

    Args:
        credentials: Bearer token from request header (optional)

    Returns:
        Subject id, or None when there is no valid session
    """
    if credentials is None:
        return None

    subject_id = verify_session(credentials.credentials)
    if subject_id is None:
        logger.warning("Rejected session token with invalid signature")
    return subject_id
