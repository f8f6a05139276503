"""Sources of the current time."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime, timezone


class SystemClock(ABC):
    """Supplies the current moment as an aware UTC datetime."""

    @abstractmethod
    def now(self) -> datetime:
        """The current time in UTC."""


class RealSystemClock(SystemClock):
    """Reads the wall clock."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)