class TokenDecodeError(ValueError):
    """Raised when a token cannot be decoded. Base of all decode failures."""
    pass


class MalformedTokenError(TokenDecodeError):
    """Raised when the token does not split into exactly three segments."""

    def __init__(self, actual_part_count: int, raw_token: str) -> None:
        self.actual_part_count = actual_part_count
        self.raw_token = raw_token
        super().__init__(
            f"Malformed token: expected 3 dot-separated parts, got {actual_part_count}"
        )


class InvalidBase64SegmentError(TokenDecodeError):
    """Raised when a header or payload segment is not base64url."""

    def __init__(self, segment_value: str) -> None:
        self.segment_value = segment_value
        super().__init__("Invalid base64url segment")


class InvalidJSONSegmentError(TokenDecodeError):
    """Raised when a decoded segment is not a JSON object."""

    def __init__(self, segment_value: str) -> None:
        self.segment_value = segment_value
        super().__init__("Segment is not a valid JSON object")
