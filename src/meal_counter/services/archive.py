"""Daily archive sweep moving past meal records into history."""

import logging
import threading
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Protocol

from meal_counter.domain.archive import ArchiveResult
from meal_counter.errors import MealStoreError
from meal_counter.services.calendar import MealCalendar

logger = logging.getLogger(__name__)

ARCHIVE_FAILED = "Archive failed"


class ArchiveRepository(Protocol):
    """Persistence interface for the archive sweep."""

    def get_last_archive_date(self) -> date | None:
        """Return the day the last sweep completed, if any."""

    def archive_before(
        self, before: date, archived_on: date, archived_at: datetime
    ) -> int:
        """Move active records dated before `before` into the archive.

        The move and the `last_archive` update must commit together.
        Returns the number of records moved.
        """


@dataclass
class ArchiveService:
    """Runs the archive sweep at most once per calendar day."""

    repository: ArchiveRepository
    calendar: MealCalendar
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False
    )

    def last_archive_date(self) -> date | None:
        """Return the last sweep date; store errors propagate."""
        return self.repository.get_last_archive_date()

    def is_due(self, last: date | None) -> bool:
        """Return True when a sweep last completed on `last` is stale today."""
        return last != self.calendar.today()

    def should_archive(self) -> bool:
        """Return True when no sweep has completed today."""
        try:
            last = self.repository.get_last_archive_date()
        except MealStoreError:
            logger.exception("Failed to read last archive date")
            return False
        if self.is_due(last):
            logger.info(
                "Archive needed (last: %s, today: %s)", last, self.calendar.today()
            )
            return True
        return False

    def run_sweep(self, force: bool = False) -> ArchiveResult:
        """Archive earlier days' records unless today's sweep already ran."""
        if not self._lock.acquire(blocking=False):
            logger.warning("Archive sweep already in progress; skipping")
            return ArchiveResult(success=True, archived=0, skipped=True)
        try:
            return self._sweep(force)
        finally:
            self._lock.release()

    def _sweep(self, force: bool) -> ArchiveResult:
        now = self.calendar.now()
        today = self.calendar.today(now)
        yesterday = self.calendar.yesterday(now)
        if not force and not self.should_archive():
            return ArchiveResult(
                success=True, archived=0, archive_date=yesterday, skipped=True
            )

        logger.info("Starting archive for records before %s", today)
        try:
            archived = self.repository.archive_before(
                before=today, archived_on=today, archived_at=now
            )
        except MealStoreError:
            logger.exception("Archive sweep failed", extra={"before": today.isoformat()})
            return ArchiveResult(
                success=False,
                archived=0,
                archive_date=yesterday,
                error=ARCHIVE_FAILED,
            )
        logger.info("Archived %s records", archived)
        return ArchiveResult(success=True, archived=archived, archive_date=yesterday)
