"""
Publish key check for the publish API.

The only caller is the CI workflow that computes the changed posts, so auth is a
shared secret sent as a bearer token:

    Authorization: Bearer <publish key>

PUBLISH_API_KEYS holds a comma-separated list so a key can be rotated without
downtime: add the new key, update the workflow secret, then remove the old one.
"""

import hmac

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from shared.config import PUBLISH_API_KEYS

# auto_error=False: a missing header gets the same 401 as a wrong key
_security = HTTPBearer(auto_error=False)


def _matching_key_index(token: str, keys: list[str]) -> int | None:
    """Index of the configured key equal to ``token``, compared in constant time."""
    match = None
    for i, key in enumerate(keys):
        if hmac.compare_digest(token.encode("utf-8"), key.encode("utf-8")):
            match = i
    return match


def verify_publish_key(
    credentials: HTTPAuthorizationCredentials | None = Depends(_security),
) -> str:
    """Dependency for every publish route. Returns the caller identity, e.g. "publish-key-0"."""
    if not PUBLISH_API_KEYS:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="PUBLISH_API_KEYS not configured",
        )

    index = None if credentials is None else _matching_key_index(credentials.credentials, PUBLISH_API_KEYS)
    if index is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or missing publish key",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return f"publish-key-{index}"
