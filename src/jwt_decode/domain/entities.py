from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from .constants import HeaderParameter, RegisteredClaim
from .json_value import (
    JSONObject,
    JSONValue,
    as_bool,
    as_date,
    as_integer,
    as_number,
    as_object,
    as_string,
    as_string_list,
)
from .ports import Clock


_COERCERS: Dict[type, Callable[[Optional[JSONValue]], Any]] = {
    str: as_string,
    float: as_number,
    int: as_integer,
    bool: as_bool,
    list: as_string_list,
    datetime: as_date,
    dict: as_object,
}


def _coerce(value: Optional[JSONValue], kind: type) -> Any:
    try:
        coerce = _COERCERS[kind]
    except KeyError:
        supported = ", ".join(t.__name__ for t in _COERCERS)
        raise TypeError(
            f"Unsupported claim type {kind!r}; expected one of: {supported}"
        ) from None
    return coerce(value)


@dataclass(frozen=True, slots=True)
class DecodedToken:
    """
    Result of decoding a compact JWT.

    Owns the parsed header and payload, the signature segment as-is and the
    original token string. Nothing here is verified: claims are read back
    exactly as the token carries them.

    Claim reads never raise. A missing claim, or one whose JSON shape does
    not match the requested type, reads as None.
    """
    header: JSONObject
    payload: JSONObject
    signature: str
    raw_token: str = field(repr=False)
    clock: Clock = field(compare=False, repr=False)

    def __hash__(self) -> int:
        # equal tokens share raw_token; header and payload are unhashable mappings
        return hash(self.raw_token)

    # ---- generic accessors ------------------------------------------------

    def raw_claim(self, name: str) -> Optional[JSONValue]:
        return self.payload.get(name)

    def claim(self, name: str, kind: type = str) -> Any:
        """
        Read payload claim `name` as `kind`.

        `kind` is one of str, float, int, bool, list (of strings), datetime
        (from Unix seconds) or dict. Raises TypeError for any other kind.
        """
        return _coerce(self.payload.get(name), kind)

    def header_claim(self, name: str, kind: type = str) -> Any:
        return _coerce(self.header.get(name), kind)

    # ---- registered claims ------------------------------------------------

    @property
    def expires_at(self) -> Optional[datetime]:
        return self.claim(RegisteredClaim.EXPIRES_AT.value, datetime)

    @property
    def issued_at(self) -> Optional[datetime]:
        return self.claim(RegisteredClaim.ISSUED_AT.value, datetime)

    @property
    def not_before(self) -> Optional[datetime]:
        return self.claim(RegisteredClaim.NOT_BEFORE.value, datetime)

    @property
    def issuer(self) -> Optional[str]:
        return self.claim(RegisteredClaim.ISSUER.value)

    @property
    def subject(self) -> Optional[str]:
        return self.claim(RegisteredClaim.SUBJECT.value)

    @property
    def identifier(self) -> Optional[str]:
        return self.claim(RegisteredClaim.IDENTIFIER.value)

    @property
    def audience(self) -> Optional[List[str]]:
        # `aud` may be a single string or an array of strings
        name = RegisteredClaim.AUDIENCE.value
        single = self.claim(name)
        if single is not None:
            return [single]
        return self.claim(name, list)

    @property
    def expired(self) -> bool:
        """
        True when `exp` is at or before the clock's current time.

        A token without `exp` never expires.
        """
        expires_at = self.expires_at
        if expires_at is None:
            return False
        now = self.clock.now()
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        return not expires_at > now

    # ---- header shortcuts -------------------------------------------------

    @property
    def algorithm(self) -> Optional[str]:
        return self.header_claim(HeaderParameter.ALGORITHM.value)

    @property
    def token_type(self) -> Optional[str]:
        return self.header_claim(HeaderParameter.TOKEN_TYPE.value)

    @property
    def key_id(self) -> Optional[str]:
        return self.header_claim(HeaderParameter.KEY_ID.value)
