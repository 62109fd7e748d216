"""Supabase repository for the archive sweep and its config row."""

from dataclasses import dataclass
from datetime import date, datetime

from supabase import Client

from meal_counter.adapters.supabase_errors import execute
from meal_counter.errors import MealStoreError
from meal_counter.services.archive import ArchiveRepository

CONFIG_TABLE = "app_config"
LAST_ARCHIVE_KEY = "last_archive"
ARCHIVE_FUNCTION = "archive_meal_records"


@dataclass
class SupabaseArchiveRepository(ArchiveRepository):
    """Supabase implementation backed by the archive_meal_records function."""

    client: Client

    def get_last_archive_date(self) -> date | None:
        """Return the date stored by the last completed sweep."""
        response = execute(
            self.client.table(CONFIG_TABLE)
            .select("date")
            .eq("key", LAST_ARCHIVE_KEY)
            .limit(1),
            "read last archive date",
        )
        if not response.data:
            return None
        raw = response.data[0].get("date")
        return date.fromisoformat(raw) if isinstance(raw, str) and raw else None

    def archive_before(
        self, before: date, archived_on: date, archived_at: datetime
    ) -> int:
        """Move records in one database transaction and return the count."""
        response = execute(
            self.client.rpc(
                ARCHIVE_FUNCTION,
                {
                    "p_before": before.isoformat(),
                    "p_archived_on": archived_on.isoformat(),
                    "p_archived_at": archived_at.isoformat(),
                },
            ),
            "archive meal records",
        )
        return _parse_count(response.data)


def _parse_count(data: object) -> int:
    if isinstance(data, int):
        return data
    if isinstance(data, list) and data:
        first = data[0]
        if isinstance(first, int):
            return first
        if isinstance(first, dict) and ARCHIVE_FUNCTION in first:
            return int(first[ARCHIVE_FUNCTION])
    raise MealStoreError(f"Unexpected archive response: {data!r}")
