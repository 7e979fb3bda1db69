from __future__ import annotations

from typing import Optional

from .deps import FastAPITokenDecoding
from .security import bearer_scheme, extract_token_from_request
from ..common.factory import create_decode_use_case
from ...config.settings import DecodeSettings
from ...domain.ports import Clock


def create_fastapi_decoding(
    *,
    settings: Optional[DecodeSettings] = None,
    clock: Optional[Clock] = None,
) -> FastAPITokenDecoding:
    """
    High-level helper for FastAPI apps:

    - Creates a DecodeTokenUseCase with the default adapters
    - Wraps it in FastAPITokenDecoding, exposing dependencies like:

        decoding.get_decoded_token
        decoding.get_optional_decoded_token
    """
    settings = settings or DecodeSettings()
    return FastAPITokenDecoding(
        use_case=create_decode_use_case(clock=clock),
        cookie_name=settings.cookie_name,
    )


__all__ = [
    "FastAPITokenDecoding",
    "bearer_scheme",
    "create_fastapi_decoding",
    "extract_token_from_request",
]
