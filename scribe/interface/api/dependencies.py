"""Shared request dependencies."""

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Missing credentials are left to the credential verifier, which reports them
# in the API's own error shape
bearer_scheme = HTTPBearer(auto_error=False)


def bearer_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> str | None:
    """Token from an ``Authorization: Bearer <token>`` header, if any.

    Returns None when the header is absent or uses another scheme.
    """
    return credentials.credentials if credentials else None
