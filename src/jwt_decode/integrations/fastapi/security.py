from __future__ import annotations

from typing import Optional

from fastapi import HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Plug into routes for the OpenAPI security scheme; never errors by itself
bearer_scheme = HTTPBearer(auto_error=False)

DEFAULT_COOKIE_NAME = "access_token"


def _bearer_from_header(value: Optional[str]) -> Optional[str]:
    # auth scheme names are case-insensitive (RFC 7235)
    scheme, _, credentials = (value or "").partition(" ")
    if scheme.lower() != "bearer":
        return None
    return credentials.strip() or None


def extract_token_from_request(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = None,
    cookie_name: str = DEFAULT_COOKIE_NAME,
) -> str:
    """
    Find the raw token for a request, in order of preference:

      1. credentials resolved by `bearer_scheme`
      2. the `Authorization: Bearer ...` header
      3. the `cookie_name` cookie

    Raises HTTPException(401) when none carries a token.
    """
    token = (credentials.credentials or "").strip() if credentials is not None else ""
    token = token or _bearer_from_header(request.headers.get("Authorization"))
    token = token or request.cookies.get(cookie_name)
    if token:
        return token

    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Not authenticated",
    )
