from __future__ import annotations

from datetime import datetime
from typing import Protocol

from .json_value import JSONObject


class Base64Decoder(Protocol):
    """
    Port for turning a base64url token segment into raw bytes.

    Implementations live in the adapters layer (e.g. the PyJWT codec).
    """

    def decode(self, segment: str) -> bytes:
        """
        Decode one unpadded base64url segment.

        An empty segment decodes to b"".
        Raises:
          - ValueError when the segment has no valid base64 structure
        """
        ...


class JSONParser(Protocol):
    """
    Port for parsing decoded segment bytes into a JSON object.
    """

    def parse_object(self, data: bytes) -> JSONObject:
        """
        Raises:
          - ValueError when data is not JSON or the top level is not an object
        """
        ...


class Clock(Protocol):
    """Source of "now" for expiry checks. Should return an aware datetime."""

    def now(self) -> datetime:
        ...
