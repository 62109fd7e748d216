"""Supabase repository for archived meal history."""

from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from meal_counter.adapters.supabase_active_meal_repository import parse_meal_row
from meal_counter.adapters.supabase_errors import execute
from meal_counter.domain.meals import ArchivedMealRecord
from meal_counter.services.history import MealHistoryRepository

ARCHIVE_TABLE = "meal_archive"


@dataclass
class SupabaseHistoryRepository(MealHistoryRepository):
    """Supabase implementation for history lookups."""

    client: Client

    def list_for_employee(self, employee_id: str) -> list[ArchivedMealRecord]:
        """Return archived records for an employee, newest first."""
        response = execute(
            self.client.table(ARCHIVE_TABLE)
            .select(
                "id, employee_id, meal_date, meal_type, counter_id, served_at, "
                "archived_at"
            )
            .eq("employee_id", employee_id)
            .order("served_at", desc=True),
            "list meal history",
        )
        return [_parse_row(row) for row in response.data or []]


def _parse_row(row: dict[str, object]) -> ArchivedMealRecord:
    record = parse_meal_row(row)
    return ArchivedMealRecord(
        id=record.id,
        employee_id=record.employee_id,
        date=record.date,
        meal_type=record.meal_type,
        counter_id=record.counter_id,
        timestamp=record.timestamp,
        archived_at=datetime.fromisoformat(str(row["archived_at"])),
    )
