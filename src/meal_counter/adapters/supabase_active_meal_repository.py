"""Supabase repository for the active (current-day) meal records."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from supabase import Client

from meal_counter.adapters.supabase_errors import execute
from meal_counter.domain.meals import MealRecord, MealType
from meal_counter.errors import MealStoreError
from meal_counter.services.meals import ActiveMealRepository

ACTIVE_TABLE = "active_meals"
_COLUMNS = "id, employee_id, meal_date, meal_type, counter_id, served_at"


@dataclass
class SupabaseActiveMealRepository(ActiveMealRepository):
    """Supabase implementation for active meal records."""

    client: Client

    def find_for_day(self, employee_id: str, day: date) -> MealRecord | None:
        """Return the employee's record for the day, if any."""
        response = execute(
            self.client.table(ACTIVE_TABLE)
            .select(_COLUMNS)
            .eq("employee_id", employee_id)
            .eq("meal_date", day.isoformat())
            .limit(1),
            "find active meal",
        )
        if not response.data:
            return None
        return parse_meal_row(response.data[0])

    def create(self, record: MealRecord) -> MealRecord:
        """Insert a meal record; the unique key rejects a second one per day."""
        response = execute(
            self.client.table(ACTIVE_TABLE).insert(
                {
                    "employee_id": record.employee_id,
                    "meal_date": record.date.isoformat(),
                    "meal_type": str(record.meal_type),
                    "counter_id": record.counter_id,
                    "served_at": record.timestamp.isoformat(),
                }
            ),
            "create active meal",
        )
        if not response.data:
            raise MealStoreError("Failed to create meal record")
        return parse_meal_row(response.data[0])

    def list_for_day(self, day: date) -> list[MealRecord]:
        """Return all records for the day, newest first."""
        response = execute(
            self.client.table(ACTIVE_TABLE)
            .select(_COLUMNS)
            .eq("meal_date", day.isoformat())
            .order("served_at", desc=True),
            "list active meals",
        )
        return [parse_meal_row(row) for row in response.data or []]


def parse_meal_row(row: dict[str, object]) -> MealRecord:
    """Build a MealRecord from a store row."""
    raw_id = row.get("id")
    return MealRecord(
        id=UUID(str(raw_id)) if raw_id else None,
        employee_id=str(row["employee_id"]),
        date=date.fromisoformat(str(row["meal_date"])),
        meal_type=MealType(str(row["meal_type"])),
        counter_id=int(row["counter_id"]),
        timestamp=datetime.fromisoformat(str(row["served_at"])),
    )
