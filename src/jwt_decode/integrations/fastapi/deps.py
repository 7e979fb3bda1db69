from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials

from .security import DEFAULT_COOKIE_NAME, bearer_scheme, extract_token_from_request
from ...application.use_cases.decode import DecodeTokenUseCase
from ...domain.entities import DecodedToken
from ...domain.exceptions import TokenDecodeError

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class FastAPITokenDecoding:
    """
    FastAPI dependencies that hand route handlers a DecodedToken.

    The token is only decoded, never verified. Put these behind real
    verification (gateway, middleware) before trusting any claim.
    """

    use_case: DecodeTokenUseCase
    cookie_name: str = DEFAULT_COOKIE_NAME

    async def get_decoded_token(
            self,
            request: Request,
            credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    ) -> DecodedToken:
        """Dependency: require a decodable token."""
        token = extract_token_from_request(request, credentials, self.cookie_name)
        try:
            return self.use_case.execute(token)
        except TokenDecodeError as exc:
            logger.info("Rejected undecodable token: %s", exc)
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=str(exc),
            ) from exc

    async def get_optional_decoded_token(
            self,
            request: Request,
            credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    ) -> DecodedToken | None:
        """Dependency: decoded token, or None when absent or undecodable."""
        try:
            token = extract_token_from_request(request, credentials, self.cookie_name)
        except HTTPException:
            return None

        try:
            return self.use_case.execute(token)
        except TokenDecodeError as exc:
            logger.info("Ignoring undecodable token: %s", exc)
            return None
