from __future__ import annotations

import logging
from dataclasses import dataclass

from ...domain.constants import SEGMENT_COUNT, SEGMENT_SEPARATOR
from ...domain.entities import DecodedToken
from ...domain.exceptions import (
    InvalidBase64SegmentError,
    InvalidJSONSegmentError,
    MalformedTokenError,
)
from ...domain.json_value import JSONObject
from ...domain.ports import Base64Decoder, Clock, JSONParser

logger = logging.getLogger(__name__)

_SEGMENT_NAMES = ("header", "payload")


@dataclass(slots=True)
class DecodeTokenUseCase:
    """
    Application use case:
    - Split a compact JWT into its three segments
    - Decode header and payload via the Base64Decoder / JSONParser ports
    - Wrap everything in a DecodedToken bound to `clock`

    No signature verification happens here; the signature segment is kept
    verbatim.
    """

    base64_decoder: Base64Decoder
    json_parser: JSONParser
    clock: Clock

    def execute(self, token: str) -> DecodedToken:
        """
        Decode a token string.

        Raises:
            MalformedTokenError
            InvalidBase64SegmentError
            InvalidJSONSegmentError
        """
        parts = token.split(SEGMENT_SEPARATOR)
        if len(parts) != SEGMENT_COUNT:
            logger.debug("Rejecting token with %d parts", len(parts))
            raise MalformedTokenError(len(parts), token)

        header = self._decode_segment(parts[0], 0)
        payload = self._decode_segment(parts[1], 1)

        return DecodedToken(
            header=header,
            payload=payload,
            signature=parts[2],
            raw_token=token,
            clock=self.clock,
        )

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #

    def _decode_segment(self, segment: str, index: int) -> JSONObject:
        name = _SEGMENT_NAMES[index]
        try:
            data = self.base64_decoder.decode(segment)
        except ValueError as exc:
            logger.debug("Token %s is not base64url: %s", name, exc)
            raise InvalidBase64SegmentError(segment) from exc

        try:
            return self.json_parser.parse_object(data)
        except ValueError as exc:
            logger.debug("Token %s is not a JSON object: %s", name, exc)
            raise InvalidJSONSegmentError(segment) from exc
