from typing import Optional

from fastapi import Cookie, Header

from hospital_inventory.config import get_settings
from hospital_inventory.core.session import SessionIdentity, validate_session
from hospital_inventory.database.session import get_db

_SESSION_COOKIE = get_settings().SESSION_COOKIE


def require_session(
    authorization: Optional[str] = Header(None),
    session_cookie: Optional[str] = Cookie(None, alias=_SESSION_COOKIE),
) -> SessionIdentity:
    return validate_session(authorization, session_cookie)


__all__ = ["get_db", "require_session"]
