"""Calendar-day arithmetic in the configured meal timezone."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, date, datetime, time, timedelta
from zoneinfo import ZoneInfo

# Sweeps fire one second past midnight so the new day is unambiguous.
ARCHIVE_RUN_TIME = time(0, 0, 1)


def utc_now() -> datetime:
    """Return the current time in UTC."""
    return datetime.now(tz=UTC)


@dataclass(frozen=True)
class MealCalendar:
    """Resolves "today" and "yesterday" for meal records."""

    timezone_name: str = "UTC"
    clock: Callable[[], datetime] = utc_now

    @property
    def tz(self) -> ZoneInfo:
        return ZoneInfo(self.timezone_name)

    def now(self) -> datetime:
        """Return the current time in the meal timezone."""
        return self.clock().astimezone(self.tz)

    def today(self, moment: datetime | None = None) -> date:
        """Return the local calendar day for a moment (default: now)."""
        return (moment or self.now()).astimezone(self.tz).date()

    def yesterday(self, moment: datetime | None = None) -> date:
        return self.today(moment) - timedelta(days=1)

    def seconds_until_next_run(self, moment: datetime | None = None) -> float:
        """Return the delay until the next local midnight archive run."""
        local = (moment or self.now()).astimezone(self.tz)
        next_run = datetime.combine(
            local.date() + timedelta(days=1), ARCHIVE_RUN_TIME, tzinfo=self.tz
        )
        return (next_run.astimezone(UTC) - local.astimezone(UTC)).total_seconds()
