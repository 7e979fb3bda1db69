from __future__ import annotations

from typing import Optional

from ...adapters.pyjwt.base64url import PyJWTBase64UrlDecoder
from ...adapters.stdlib.clock import SystemClock
from ...adapters.stdlib.json_parser import StdlibJSONParser
from ...application.use_cases.decode import DecodeTokenUseCase
from ...domain.entities import DecodedToken
from ...domain.ports import Clock


def create_decode_use_case(*, clock: Optional[Clock] = None) -> DecodeTokenUseCase:
    """
    High-level factory: default adapters -> DecodeTokenUseCase.

    - PyJWT base64url codec
    - stdlib JSON parser
    - system clock unless `clock` is given
    """
    return DecodeTokenUseCase(
        base64_decoder=PyJWTBase64UrlDecoder(),
        json_parser=StdlibJSONParser(),
        clock=clock or SystemClock(),
    )


def decode(token: str, *, clock: Optional[Clock] = None) -> DecodedToken:
    """
    Decode a compact JWT without verifying it.

    Raises:
        MalformedTokenError
        InvalidBase64SegmentError
        InvalidJSONSegmentError
    """
    return create_decode_use_case(clock=clock).execute(token)
