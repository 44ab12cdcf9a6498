from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

from ..core.constants import DEFAULT_TIMEZONE
from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid date {value!r}, expected YYYY-MM-DD") from None


def now_utc() -> datetime:
    """Current time as an aware UTC datetime.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """MySQL DATETIME columns come back naive; they are always written in UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass(frozen=True)
class CalendarDayPolicy:
    """Single source of truth for which calendar day a moment belongs to.

    The scan path, the manual decrement path and the daily sweep all ask this
    policy for "today" so their records land on the same key.
    """

    timezone_name: str = DEFAULT_TIMEZONE
    _zone: ZoneInfo = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_zone", ZoneInfo(self.timezone_name))

    @property
    def zone(self) -> ZoneInfo:
        return self._zone

    def day_of(self, moment: datetime) -> str:
        return as_utc(moment).astimezone(self._zone).strftime("%Y-%m-%d")

    def today(self, now: datetime | None = None) -> str:
        return self.day_of(now or now_utc())
