"""
jwt_decode.config

- DecodeSettings: settings for the CLI and web integrations.
- settings_from_env: build DecodeSettings from JWT_DECODE_* variables.
"""

from __future__ import annotations

from .env import settings_from_env
from .settings import DecodeSettings

__all__ = ["DecodeSettings", "settings_from_env"]
