# src/jwt_decode/domain/json_value.py

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union


# --- JSON value variants -------------------------------------------------


@dataclass(frozen=True, slots=True)
class JSONString:
    value: str


@dataclass(frozen=True, slots=True)
class JSONNumber:
    """
    Integer or floating point JSON number.

    Booleans are never stored here, see `JSONBool`.
    """
    value: Union[int, float]


@dataclass(frozen=True, slots=True)
class JSONBool:
    value: bool


@dataclass(frozen=True, slots=True)
class JSONNull:
    pass


@dataclass(frozen=True, slots=True)
class JSONArray(Sequence):
    items: Tuple["JSONValue", ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))

    def __getitem__(self, index):
        return self.items[index]

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True, slots=True, eq=False)
class JSONObject(Mapping):
    """
    Read-only JSON object.

    Behaves as a `Mapping[str, JSONValue]`; equality is mapping equality.
    """
    members: Mapping[str, "JSONValue"]

    def __post_init__(self) -> None:
        object.__setattr__(self, "members", MappingProxyType(dict(self.members)))

    def __getitem__(self, key: str) -> "JSONValue":
        return self.members[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.members)

    def __len__(self) -> int:
        return len(self.members)

    def __repr__(self) -> str:
        return f"JSONObject({dict(self.members)!r})"


JSONValue = Union[JSONString, JSONNumber, JSONBool, JSONNull, JSONArray, JSONObject]

JSON_NULL = JSONNull()


# --- Conversion to / from plain Python -----------------------------------


def from_python(value: Any) -> JSONValue:
    """
    Build a JSON value tree from the output of `json.loads`.

    Raises:
        TypeError: value (or something nested in it) is not JSON data.
    """
    if value is None:
        return JSON_NULL
    if isinstance(value, bool):
        return JSONBool(value)
    if isinstance(value, (int, float)):
        return JSONNumber(value)
    if isinstance(value, str):
        return JSONString(value)
    if isinstance(value, Mapping):
        members: Dict[str, JSONValue] = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeError(f"JSON object keys must be strings, got {type(key).__name__}")
            members[key] = from_python(item)
        return JSONObject(members)
    if isinstance(value, (list, tuple)):
        return JSONArray(tuple(from_python(item) for item in value))
    raise TypeError(f"Not a JSON value: {type(value).__name__}")


def to_python(value: JSONValue) -> Any:
    """Inverse of `from_python`: dicts, lists and scalars."""
    if isinstance(value, JSONObject):
        return {key: to_python(item) for key, item in value.items()}
    if isinstance(value, JSONArray):
        return [to_python(item) for item in value]
    if isinstance(value, JSONNull):
        return None
    return value.value


# --- Fallible coercions --------------------------------------------------
#
# Each takes a value that may be missing and returns None when the JSON
# shape does not match. None of them raise.


def as_string(value: Optional[JSONValue]) -> Optional[str]:
    if isinstance(value, JSONString):
        return value.value
    return None


def as_number(value: Optional[JSONValue]) -> Optional[float]:
    if not isinstance(value, JSONNumber):
        return None
    try:
        return float(value.value)
    except OverflowError:
        # integers beyond float range
        return None


def as_integer(value: Optional[JSONValue]) -> Optional[int]:
    if not isinstance(value, JSONNumber):
        return None
    number = value.value
    if isinstance(number, int):
        return number
    if math.isfinite(number) and number.is_integer():
        return int(number)
    return None


def as_bool(value: Optional[JSONValue]) -> Optional[bool]:
    if isinstance(value, JSONBool):
        return value.value
    return None


def as_string_list(value: Optional[JSONValue]) -> Optional[List[str]]:
    if not isinstance(value, JSONArray):
        return None
    if not all(isinstance(item, JSONString) for item in value):
        return None
    return [item.value for item in value]


def as_date(value: Optional[JSONValue]) -> Optional[datetime]:
    """Unix seconds (int or float) -> aware UTC datetime."""
    seconds = as_number(value)
    if seconds is None:
        return None
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None


def as_object(value: Optional[JSONValue]) -> Optional[Dict[str, Any]]:
    if isinstance(value, JSONObject):
        return to_python(value)
    return None
