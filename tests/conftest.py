# tests/conftest.py
import json
from datetime import datetime, timezone

import pytest
from jwt.utils import base64url_encode

from jwt_decode import FixedClock

SECRET = "a-string-secret-at-least-256-bits-long"
NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)


def encode_segment(obj) -> str:
    raw = obj if isinstance(obj, bytes) else json.dumps(obj).encode("utf-8")
    return base64url_encode(raw).decode("ascii")


def make_token(header, payload, signature: str = "sig") -> str:
    return f"{encode_segment(header)}.{encode_segment(payload)}.{signature}"


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(NOW)
