from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from ...domain.ports import Clock


class SystemClock(Clock):
    """Wall-clock time in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


@dataclass(frozen=True, slots=True)
class FixedClock(Clock):
    """
    Clock pinned to a single instant.

    Used for deterministic expiry checks (tests, `jwt-decode --now`).
    """
    instant: datetime

    @classmethod
    def at_timestamp(cls, seconds: float) -> "FixedClock":
        return cls(datetime.fromtimestamp(seconds, tz=timezone.utc))

    def now(self) -> datetime:
        return self.instant
