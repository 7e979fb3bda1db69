from __future__ import annotations

import binascii
import string

from jwt.utils import base64url_decode

from ...domain.ports import Base64Decoder

# Standard and url-safe alphabets; anything else is skipped by the decoder.
_ALPHABET = frozenset(string.ascii_letters + string.digits + "+/-_")


class PyJWTBase64UrlDecoder(Base64Decoder):
    """
    Adapter implementing the Base64Decoder port with PyJWT's codec.

    `base64url_decode` pads the segment to a multiple of four and decodes
    with the url-safe alphabet. Characters outside the alphabet are
    discarded rather than rejected, so slightly mangled real-world tokens
    still decode. This is leniency, not validation.

    A single dangling character at the end (fewer than eight bits of data)
    contributes no bytes instead of failing the whole segment, so
    "aGVsbG8hZ" decodes to b"hello!". That is more permissive than a
    plain skip-unknown-characters base64 decoder, which need not accept it.
    """

    def decode(self, segment: str) -> bytes:
        try:
            return base64url_decode(segment)
        except binascii.Error as exc:
            data = [ch for ch in segment if ch in _ALPHABET]
            if len(data) % 4 != 1:
                raise ValueError(f"Invalid base64url data: {exc}") from exc
            try:
                return base64url_decode("".join(data[:-1]))
            except binascii.Error as retry_exc:
                raise ValueError(f"Invalid base64url data: {retry_exc}") from retry_exc
        except UnicodeEncodeError as exc:
            raise ValueError(f"Segment is not encodable text: {exc}") from exc
