"""Trailing time windows selected by short period tokens."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta

WINDOW_DAYS: dict[str, int] = {
    "1W": 7,
    "1M": 30,
    "6M": 180,
    "1Y": 365,
    "5Y": 1825,
}
DEFAULT_TOKEN = "1M"


@dataclass(frozen=True)
class TimeWindow:
    """Inclusive ``[start, end]`` range; ``end`` is the resolution moment."""

    start: datetime
    end: datetime

    @property
    def start_date(self) -> date:
        return self.start.date()

    @property
    def end_date(self) -> date:
        return self.end.date()

    @property
    def days(self) -> int:
        return (self.end_date - self.start_date).days

    def contains(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date


def effective_token(token: str | None) -> str:
    """Normalise ``token``; anything unrecognised resolves to the 1M default."""

    normalized = (token or "").strip().upper()
    return normalized if normalized in WINDOW_DAYS else DEFAULT_TOKEN


def window_days(token: str | None) -> int:
    return WINDOW_DAYS[effective_token(token)]


def resolve_window(token: str | None, now: datetime | None = None) -> TimeWindow:
    """Map a period token to a trailing window ending at ``now``.

    Every token subtracts a fixed number of calendar days (``6M`` is 180 days,
    ``5Y`` is 1825 days) so that windows are comparable across tokens.
    """

    end = now or datetime.now()
    return TimeWindow(start=end - timedelta(days=window_days(token)), end=end)


__all__ = ["TimeWindow", "WINDOW_DAYS", "DEFAULT_TOKEN", "effective_token", "window_days", "resolve_window"]
