"""
jwt_decode

Decode compact JSON Web Tokens into header, payload and signature, with
typed accessors over the registered claims. No signature verification.
"""

__version__ = "0.1.0"

from .domain.constants import HeaderParameter, RegisteredClaim
from .domain.entities import DecodedToken
from .domain.exceptions import (
    TokenDecodeError,
    MalformedTokenError,
    InvalidBase64SegmentError,
    InvalidJSONSegmentError,
)
from .domain.json_value import (
    JSONValue,
    JSONString,
    JSONNumber,
    JSONBool,
    JSONNull,
    JSONArray,
    JSONObject,
    from_python,
    to_python,
)
from .domain.ports import Base64Decoder, JSONParser, Clock

from .application.use_cases.decode import DecodeTokenUseCase

from .adapters.pyjwt.base64url import PyJWTBase64UrlDecoder
from .adapters.stdlib.json_parser import StdlibJSONParser
from .adapters.stdlib.clock import SystemClock, FixedClock

from .integrations.common.factory import create_decode_use_case, decode

__all__ = [
    "__version__",
    # entry point
    "decode",
    "create_decode_use_case",
    # domain core
    "DecodedToken",
    "RegisteredClaim",
    "HeaderParameter",
    "JSONValue",
    "JSONString",
    "JSONNumber",
    "JSONBool",
    "JSONNull",
    "JSONArray",
    "JSONObject",
    "from_python",
    "to_python",
    "Base64Decoder",
    "JSONParser",
    "Clock",
    # exceptions
    "TokenDecodeError",
    "MalformedTokenError",
    "InvalidBase64SegmentError",
    "InvalidJSONSegmentError",
    # use cases
    "DecodeTokenUseCase",
    # adapters
    "PyJWTBase64UrlDecoder",
    "StdlibJSONParser",
    "SystemClock",
    "FixedClock",
]
