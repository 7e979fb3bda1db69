from __future__ import annotations

import logging
import os

from .settings import DecodeSettings


def settings_from_env() -> DecodeSettings:
    def _int(key: str, default: int) -> int:
        raw = os.getenv(key)
        if raw is None or not raw.strip():
            return default
        try:
            value = int(raw.strip())
        except ValueError:
            raise RuntimeError(f"{key} must be an integer, got {raw!r}") from None
        if value < 0:
            raise RuntimeError(f"{key} must not be negative, got {value}")
        return value

    def _level(key: str, default: str) -> str:
        raw = (os.getenv(key) or "").strip().upper()
        if not raw:
            return default
        if not isinstance(logging.getLevelName(raw), int):
            raise RuntimeError(f"{key} is not a logging level: {raw!r}")
        return raw

    defaults = DecodeSettings()
    return DecodeSettings(
        cookie_name=(os.getenv("JWT_DECODE_COOKIE_NAME") or "").strip() or defaults.cookie_name,
        log_level=_level("JWT_DECODE_LOG_LEVEL", defaults.log_level),
        indent=_int("JWT_DECODE_INDENT", defaults.indent),
    )
