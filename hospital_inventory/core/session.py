from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from fastapi import status

from hospital_inventory.config import get_settings
from hospital_inventory.core.exceptions import SessionError


@dataclass(frozen=True)
class SessionIdentity:
    hospital_id: int
    hospital_name: str


def _get_bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    parts = authorization.split()
    if len(parts) == 2 and parts[0].lower() == "bearer":
        return parts[1]
    return None


def _decode_jwt(token: str) -> dict:
    settings = get_settings()
    if not settings.JWT_SECRET:
        raise SessionError(
            "Session validation is not configured",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    options = {"verify_aud": bool(settings.JWT_AUDIENCE), "require": ["sub", "exp"]}
    try:
        return jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[settings.JWT_ALGORITHM],
            audience=settings.JWT_AUDIENCE,
            issuer=settings.JWT_ISSUER,
            options=options,
        )
    except jwt.ExpiredSignatureError as exc:
        raise SessionError("Session expired") from exc
    except jwt.PyJWTError as exc:
        raise SessionError("Invalid session") from exc


def _identity_from_claims(claims: dict) -> SessionIdentity:
    hospital_name = str(claims.get("hospital_name") or "").strip()
    try:
        hospital_id = int(claims["sub"])
    except (KeyError, TypeError, ValueError) as exc:
        raise SessionError("Invalid session") from exc
    if not hospital_name:
        raise SessionError("Invalid session")
    return SessionIdentity(hospital_id=hospital_id, hospital_name=hospital_name)


def validate_session(
    authorization: Optional[str],
    session_cookie: Optional[str] = None,
) -> SessionIdentity:
    """Resolve the caller's hospital identity from request credentials.

    The bearer header wins over the session cookie. Raises ``SessionError``
    carrying the status code the caller should see.
    """
    token = _get_bearer_token(authorization) or (session_cookie or "").strip() or None
    if not token:
        raise SessionError("Unauthorized")
    return _identity_from_claims(_decode_jwt(token))


def issue_session_token(
    hospital_id: int,
    hospital_name: str,
    *,
    ttl: Optional[timedelta] = None,
) -> str:
    settings = get_settings()
    if not settings.JWT_SECRET:
        raise RuntimeError("JWT_SECRET must be set to issue session tokens")
    if ttl is None:
        ttl = timedelta(minutes=settings.SESSION_TOKEN_TTL_MINUTES)
    now = datetime.now(timezone.utc)
    claims = {
        "sub": str(hospital_id),
        "hospital_name": hospital_name,
        "iat": now,
        "exp": now + ttl,
    }
    if settings.JWT_AUDIENCE:
        claims["aud"] = settings.JWT_AUDIENCE
    if settings.JWT_ISSUER:
        claims["iss"] = settings.JWT_ISSUER
    return jwt.encode(claims, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


__all__ = ["SessionIdentity", "issue_session_token", "validate_session"]
