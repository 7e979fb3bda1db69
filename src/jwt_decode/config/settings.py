from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class DecodeSettings:
    """
    Settings for the outer surfaces (CLI, FastAPI integration).

    Host code decides how to construct this (env, config file, etc.).
    Decoding itself has no knobs.
    """
    cookie_name: str = "access_token"
    log_level: str = "WARNING"
    indent: int = 2
