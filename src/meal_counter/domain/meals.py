"""Domain models for meal records."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import StrEnum
from uuid import UUID


class MealType(StrEnum):
    """Shift a meal was served for."""

    MORNING = "MORNING"
    EVENING = "EVENING"


@dataclass(frozen=True)
class MealRecord:
    """A meal served to an employee on a given day."""

    employee_id: str
    date: date
    meal_type: MealType
    counter_id: int
    timestamp: datetime
    id: UUID | None = None


@dataclass(frozen=True)
class ArchivedMealRecord:
    """A meal record moved to long-term history by the archive sweep."""

    employee_id: str
    date: date
    meal_type: MealType
    counter_id: int
    timestamp: datetime
    archived_at: datetime
    id: UUID | None = None


@dataclass(frozen=True)
class Eligibility:
    """Outcome of checking whether an employee may receive a meal today."""

    exists: bool
    meal_type: MealType | None = None
    counter_id: int | None = None
    error: str | None = None

    @property
    def eligible(self) -> bool:
        return not self.exists and self.error is None


@dataclass(frozen=True)
class MealSaveResult:
    """Outcome of registering a meal."""

    success: bool
    record: MealRecord | None = None
    conflict: Eligibility | None = None
    error: str | None = None


@dataclass(frozen=True)
class MealListing:
    """A list of records, or the error that prevented loading them."""

    records: list[MealRecord] | list[ArchivedMealRecord] = field(
        default_factory=list
    )
    error: str | None = None
