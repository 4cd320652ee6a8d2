"""System clock - implements the Clock port."""

from datetime import datetime, timezone

from taskboard.domain.ports.clock import Clock


class SystemClock(Clock):
    def now(self) -> datetime:
        return datetime.now(timezone.utc)
