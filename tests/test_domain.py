# tests/test_domain.py
from datetime import datetime, timedelta, timezone

import pytest

from conftest import NOW
from jwt_decode import (
    DecodedToken,
    FixedClock,
    JSONArray,
    JSONBool,
    JSONNull,
    JSONNumber,
    JSONObject,
    JSONString,
    RegisteredClaim,
    from_python,
    to_python,
)
from jwt_decode.domain.json_value import (
    as_bool,
    as_date,
    as_integer,
    as_number,
    as_object,
    as_string,
    as_string_list,
)


def make_decoded(payload, header=None, clock=None) -> DecodedToken:
    return DecodedToken(
        header=from_python(header or {"alg": "HS256", "typ": "JWT"}),
        payload=from_python(payload),
        signature="sig",
        raw_token="h.p.sig",
        clock=clock or FixedClock(NOW),
    )


# --- JSON values ---------------------------------------------------------


def test_from_python_builds_tagged_values():
    value = from_python({"s": "x", "n": 1, "f": 1.5, "b": False, "z": None, "a": ["y"]})

    assert isinstance(value, JSONObject)
    assert value["s"] == JSONString("x")
    assert value["n"] == JSONNumber(1)
    assert value["f"] == JSONNumber(1.5)
    assert value["b"] == JSONBool(False)
    assert value["z"] == JSONNull()
    assert value["a"] == JSONArray((JSONString("y"),))
    assert len(value) == 6
    assert "missing" not in value


def test_booleans_are_not_numbers():
    assert from_python(True) == JSONBool(True)
    assert as_number(from_python(True)) is None
    assert as_integer(from_python(False)) is None


def test_from_python_rejects_non_json():
    with pytest.raises(TypeError):
        from_python({"when": datetime.now()})
    with pytest.raises(TypeError):
        from_python({1: "int key"})


def test_to_python_round_trip():
    doc = {"a": [1, {"b": None}], "c": "d", "e": True}
    assert to_python(from_python(doc)) == doc


def test_json_object_is_read_only():
    obj = from_python({"a": 1})
    with pytest.raises(TypeError):
        obj.members["a"] = JSONNumber(2)
    with pytest.raises(AttributeError):
        obj.members = {}


def test_json_object_equality():
    assert from_python({"a": 1, "b": "x"}) == from_python({"b": "x", "a": 1})
    assert from_python({"a": 1}) != from_python({"a": 2})


def test_coercions():
    assert as_string(JSONString("x")) == "x"
    assert as_string(JSONNumber(1)) is None
    assert as_string(None) is None

    assert as_number(JSONNumber(3)) == 3.0
    assert as_number(JSONString("3")) is None

    assert as_integer(JSONNumber(3)) == 3
    assert as_integer(JSONNumber(3.0)) == 3
    assert as_integer(JSONNumber(3.5)) is None

    assert as_bool(JSONBool(True)) is True
    assert as_bool(JSONNumber(1)) is None

    assert as_string_list(from_python(["a", "b"])) == ["a", "b"]
    assert as_string_list(from_python([])) == []
    assert as_string_list(from_python(["a", 1])) is None
    assert as_string_list(JSONString("a")) is None

    assert as_object(from_python({"k": [1]})) == {"k": [1]}
    assert as_object(from_python([1])) is None


def test_as_date():
    assert as_date(JSONNumber(0)) == datetime(1970, 1, 1, tzinfo=timezone.utc)
    assert as_date(JSONNumber(1.5)) == datetime(1970, 1, 1, 0, 0, 1, 500000, tzinfo=timezone.utc)
    assert as_date(JSONString("1516239022")) is None
    assert as_date(JSONNumber(1e300)) is None


def test_integers_beyond_float_range():
    huge = JSONNumber(10**400)
    assert as_number(huge) is None
    assert as_date(huge) is None
    assert as_integer(huge) == 10**400


# --- generic claim access ------------------------------------------------


def test_claim_missing_is_none():
    decoded = make_decoded({"sub": "x"})
    for kind in (str, float, int, bool, list, datetime, dict):
        assert decoded.claim("missing", kind) is None
    assert decoded.raw_claim("missing") is None


def test_claim_wrong_shape_is_none():
    decoded = make_decoded({"name": "Jane", "count": 3, "roles": ["a", 2]})

    assert decoded.claim("name", int) is None
    assert decoded.claim("count") is None
    assert decoded.claim("roles", list) is None


def test_claim_typed_reads():
    decoded = make_decoded(
        {"name": "Jane", "count": 3, "ratio": 0.5, "admin": True,
         "roles": ["a", "b"], "address": {"city": "X"}, "ts": 60}
    )

    assert decoded.claim("name") == "Jane"
    assert decoded.claim("count", int) == 3
    assert decoded.claim("ratio", float) == 0.5
    assert decoded.claim("admin", bool) is True
    assert decoded.claim("roles", list) == ["a", "b"]
    assert decoded.claim("address", dict) == {"city": "X"}
    assert decoded.claim("ts", datetime) == datetime(1970, 1, 1, 0, 1, tzinfo=timezone.utc)
    assert decoded.raw_claim("count") == JSONNumber(3)


def test_claim_unsupported_kind():
    decoded = make_decoded({"a": 1})
    with pytest.raises(TypeError):
        decoded.claim("a", bytes)


# --- registered claims ---------------------------------------------------


def test_registered_claims():
    decoded = make_decoded(
        {"iss": "https://issuer", "sub": "user-1", "jti": "id-1",
         "iat": 1516239022, "nbf": 1516239000, "exp": 1516242622.5}
    )

    assert decoded.issuer == "https://issuer"
    assert decoded.subject == "user-1"
    assert decoded.identifier == "id-1"
    assert decoded.issued_at == datetime.fromtimestamp(1516239022, tz=timezone.utc)
    assert decoded.not_before == datetime.fromtimestamp(1516239000, tz=timezone.utc)
    assert decoded.expires_at == datetime.fromtimestamp(1516242622.5, tz=timezone.utc)


def test_registered_claims_absent_or_mistyped():
    decoded = make_decoded({"iss": 1, "sub": None, "exp": "tomorrow"})

    assert decoded.issuer is None
    assert decoded.subject is None
    assert decoded.identifier is None
    assert decoded.expires_at is None
    assert decoded.issued_at is None
    assert decoded.not_before is None


def test_registered_claim_names():
    assert [c.value for c in RegisteredClaim] == ["exp", "iat", "nbf", "iss", "sub", "aud", "jti"]


@pytest.mark.parametrize(
    "payload, expected",
    [
        ({"aud": "a"}, ["a"]),
        ({"aud": ["a", "b"]}, ["a", "b"]),
        ({"aud": []}, []),
        ({}, None),
        ({"aud": 42}, None),
        ({"aud": ["a", 1]}, None),
        ({"aud": None}, None),
    ],
)
def test_audience(payload, expected):
    assert make_decoded(payload).audience == expected


# --- expiry --------------------------------------------------------------


def test_not_expired_without_exp():
    assert make_decoded({"sub": "x"}).expired is False
    assert make_decoded({"exp": "soon"}).expired is False


def test_expired_relative_to_clock():
    past = (NOW - timedelta(seconds=1)).timestamp()
    future = (NOW + timedelta(seconds=1)).timestamp()

    assert make_decoded({"exp": past}).expired is True
    assert make_decoded({"exp": future}).expired is False


def test_expired_at_exact_instant():
    assert make_decoded({"exp": NOW.timestamp()}).expired is True


def test_naive_clock_is_treated_as_utc():
    clock = FixedClock(NOW.replace(tzinfo=None))
    assert make_decoded({"exp": NOW.timestamp() + 10}, clock=clock).expired is False
    assert make_decoded({"exp": NOW.timestamp() - 10}, clock=clock).expired is True


# --- header --------------------------------------------------------------


def test_header_shortcuts():
    decoded = make_decoded({}, header={"alg": "RS256", "typ": "at+jwt", "kid": "k1", "x": 1})

    assert decoded.algorithm == "RS256"
    assert decoded.token_type == "at+jwt"
    assert decoded.key_id == "k1"
    assert decoded.header_claim("x", int) == 1
    assert decoded.header_claim("x") is None


def test_decoded_token_is_immutable():
    decoded = make_decoded({"sub": "x"})
    with pytest.raises(AttributeError):
        decoded.signature = "other"


def test_huge_integer_claims_read_as_absent():
    decoded = make_decoded({"exp": 10**400, "n": 10**400})

    assert decoded.claim("n", float) is None
    assert decoded.claim("n", int) == 10**400
    assert decoded.expires_at is None
    assert decoded.expired is False


def test_decoded_token_is_hashable():
    first = make_decoded({"sub": "x"})
    second = make_decoded({"sub": "x"}, clock=FixedClock(NOW + timedelta(days=1)))

    assert hash(first) == hash(second)
    assert {first, second} == {first}
