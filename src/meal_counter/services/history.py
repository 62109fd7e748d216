"""Archived meal history service."""

import logging
from dataclasses import dataclass
from typing import Protocol

from meal_counter.domain.meals import ArchivedMealRecord, MealListing
from meal_counter.errors import MealStoreError

logger = logging.getLogger(__name__)

HISTORY_FAILED = "Failed to load history"


class MealHistoryRepository(Protocol):
    """Read interface for archived meal records."""

    def list_for_employee(self, employee_id: str) -> list[ArchivedMealRecord]:
        """Return every archived record for an employee."""


@dataclass
class HistoryService:
    """Service for looking up an employee's past meals."""

    repository: MealHistoryRepository

    def get_history(self, employee_id: str) -> MealListing:
        """Return archived records for the employee, newest first."""
        try:
            records = self.repository.list_for_employee(employee_id)
        except MealStoreError:
            logger.exception(
                "Failed to load history", extra={"employee_id": employee_id}
            )
            return MealListing(error=HISTORY_FAILED)
        return MealListing(
            records=sorted(records, key=lambda record: record.timestamp, reverse=True)
        )
