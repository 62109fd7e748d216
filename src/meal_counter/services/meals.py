"""Meal eligibility and registration service."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Protocol

from meal_counter.domain.meals import (
    Eligibility,
    MealListing,
    MealRecord,
    MealSaveResult,
    MealType,
)
from meal_counter.errors import DuplicateMealError, MealStoreError
from meal_counter.services.calendar import MealCalendar

logger = logging.getLogger(__name__)

CHECK_FAILED = "Failed to check status"
SAVE_FAILED = "Failed to save meal record"
TODAY_FAILED = "Failed to load today's meals"


class ActiveMealRepository(Protocol):
    """Persistence interface for the current day's meal records."""

    def find_for_day(self, employee_id: str, day: date) -> MealRecord | None:
        """Return the employee's record for the day, if any."""

    def create(self, record: MealRecord) -> MealRecord:
        """Insert a record; raise DuplicateMealError if one exists for the day."""

    def list_for_day(self, day: date) -> list[MealRecord]:
        """Return all records for the day."""


@dataclass
class MealService:
    """Service enforcing one meal per employee per calendar day."""

    repository: ActiveMealRepository
    calendar: MealCalendar

    def check_eligibility(self, employee_id: str) -> Eligibility:
        """Return whether the employee already received a meal today."""
        today = self.calendar.today()
        try:
            existing = self.repository.find_for_day(employee_id, today)
        except MealStoreError:
            logger.exception(
                "Failed to check eligibility", extra={"employee_id": employee_id}
            )
            return Eligibility(exists=False, error=CHECK_FAILED)
        if existing is None:
            return Eligibility(exists=False)
        return Eligibility(
            exists=True,
            meal_type=existing.meal_type,
            counter_id=existing.counter_id,
        )

    def save_meal(
        self, employee_id: str, meal_type: MealType, counter_id: int
    ) -> MealSaveResult:
        """Register a meal unless the employee already has one today."""
        check = self.check_eligibility(employee_id)
        if check.error:
            return MealSaveResult(success=False, error=check.error)
        if check.exists:
            return _conflict(employee_id, check)

        now = self.calendar.now()
        record = MealRecord(
            employee_id=employee_id,
            date=self.calendar.today(now),
            meal_type=meal_type,
            counter_id=counter_id,
            timestamp=now,
        )
        try:
            saved = self.repository.create(record)
        except DuplicateMealError:
            # Lost a race with a concurrent submission; report the winner.
            check = self.check_eligibility(employee_id)
            if check.exists:
                return _conflict(employee_id, check)
            logger.exception(
                "Duplicate rejected but no record found",
                extra={"employee_id": employee_id},
            )
            return MealSaveResult(success=False, error=SAVE_FAILED)
        except MealStoreError:
            logger.exception("Failed to save meal", extra={"employee_id": employee_id})
            return MealSaveResult(success=False, error=SAVE_FAILED)

        logger.info(
            "Saved %s meal for %s at counter %s",
            meal_type,
            employee_id,
            counter_id,
        )
        return MealSaveResult(success=True, record=saved)

    def list_today(self) -> MealListing:
        """Return today's served meals, newest first."""
        today = self.calendar.today()
        try:
            records = self.repository.list_for_day(today)
        except MealStoreError:
            logger.exception("Failed to load today's meals")
            return MealListing(error=TODAY_FAILED)
        return MealListing(
            records=sorted(records, key=lambda record: record.timestamp, reverse=True)
        )


def conflict_message(employee_id: str, check: Eligibility) -> str:
    """Format the duplicate-meal message shown to the counter operator."""
    return (
        f"Employee {employee_id} already has {check.meal_type} meal today "
        f"(Counter {check.counter_id})"
    )


def _conflict(employee_id: str, check: Eligibility) -> MealSaveResult:
    logger.info(
        "Blocked duplicate meal for %s",
        employee_id,
        extra={"meal_type": str(check.meal_type), "counter_id": check.counter_id},
    )
    return MealSaveResult(
        success=False,
        conflict=check,
        error=conflict_message(employee_id, check),
    )
