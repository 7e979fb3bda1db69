from enum import Enum


class RegisteredClaim(Enum):
    EXPIRES_AT = "exp"
    ISSUED_AT = "iat"
    NOT_BEFORE = "nbf"
    ISSUER = "iss"
    SUBJECT = "sub"
    AUDIENCE = "aud"
    IDENTIFIER = "jti"


class HeaderParameter(Enum):
    ALGORITHM = "alg"
    TOKEN_TYPE = "typ"
    KEY_ID = "kid"


SEGMENT_SEPARATOR = "."
SEGMENT_COUNT = 3
