from __future__ import annotations

import json
from typing import Any

from ...domain.json_value import JSONObject, from_python
from ...domain.ports import JSONParser


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


class StdlibJSONParser(JSONParser):
    """
    Adapter implementing the JSONParser port with the standard `json` module.

    Stricter than `json.loads` defaults: NaN and Infinity literals are
    rejected, and the top-level value must be an object.
    """

    def parse_object(self, data: bytes) -> JSONObject:
        try:
            document = json.loads(data, parse_constant=_reject_constant)
            value = from_python(document)
        except RecursionError as exc:
            raise ValueError("JSON nesting too deep") from exc
        except TypeError as exc:
            raise ValueError(str(exc)) from exc

        # json.JSONDecodeError and UnicodeDecodeError are ValueErrors already
        if not isinstance(value, JSONObject):
            raise ValueError(
                f"Expected a JSON object, got {type(document).__name__}"
            )
        return value
