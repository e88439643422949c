from datetime import datetime, timezone
from typing import Protocol


class Clock(Protocol):
    """Source of the current instant. Swapped for a fake in tests."""

    def now(self) -> datetime: ...


class SystemClock:
    def now(self) -> datetime:
        return datetime.now(timezone.utc)
