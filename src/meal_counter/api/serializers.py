"""JSON serialization for domain results."""

from meal_counter.domain.archive import ArchiveResult
from meal_counter.domain.meals import ArchivedMealRecord, MealRecord


def serialize_record(record: MealRecord | ArchivedMealRecord) -> dict[str, object]:
    payload: dict[str, object] = {
        "id": str(record.id) if record.id else None,
        "employee_id": record.employee_id,
        "date": record.date.isoformat(),
        "meal_type": str(record.meal_type),
        "counter_id": record.counter_id,
        "timestamp": record.timestamp.isoformat(),
    }
    if isinstance(record, ArchivedMealRecord):
        payload["archived_at"] = record.archived_at.isoformat()
    return payload


def serialize_archive_result(result: ArchiveResult) -> dict[str, object]:
    return {
        "success": result.success,
        "archived": result.archived,
        "archive_date": result.archive_date.isoformat()
        if result.archive_date
        else None,
        "skipped": result.skipped,
        "error": result.error,
    }
