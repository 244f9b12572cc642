"""
Admin capability checks for the API.

Public visitors browse content, submit the contact form and report
analytics events without credentials.  Managing content, reading
contact submissions and seeding the store require the admin
capability, granted by presenting one of ``settings.admin_tokens`` as
a bearer token in the ``Authorization`` header.
"""

import hmac
from typing import Dict, List, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .config import settings


security = HTTPBearer(auto_error=False)


def _configured_tokens() -> List[str]:
    return [t.strip() for t in settings.admin_tokens.split(",") if t.strip()]


def token_is_admin(token: str) -> bool:
    """Return ``True`` when ``token`` matches a configured admin token.

    Comparison is constant-time for every candidate.
    """
    matched = False
    for candidate in _configured_tokens():
        if hmac.compare_digest(candidate.encode("utf-8"), token.encode("utf-8")):
            matched = True
    return matched


def is_admin(credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)) -> bool:
    """Non-raising dependency reporting whether the caller holds the admin capability."""
    if credentials is None:
        return False
    return token_is_admin(credentials.credentials)


def require_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Dict[str, str]:
    """Dependency that rejects callers without the admin capability.

    Missing credentials yield HTTP 401, an unknown token HTTP 403.
    Returns a small principal dictionary on success.
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    if not token_is_admin(credentials.credentials):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Insufficient permissions",
        )
    return {"sub": "admin", "role": "admin"}
