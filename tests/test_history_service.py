"""Tests for archived meal history."""

from meal_counter.domain.meals import MealType
from meal_counter.services.archive import ArchiveService
from meal_counter.services.history import HISTORY_FAILED, HistoryService
from meal_counter.services.meals import MealService
from tests.fakes import FixedClock, InMemoryHistoryRepository, InMemoryMealStore


def test_history_without_records_is_empty(store: InMemoryMealStore) -> None:
    listing = HistoryService(InMemoryHistoryRepository(store)).get_history("EMP404")

    assert listing.records == []
    assert listing.error is None


def test_history_is_newest_first(
    meal_service: MealService,
    archive_service: ArchiveService,
    clock: FixedClock,
    store: InMemoryMealStore,
) -> None:
    for meal_type in (MealType.MORNING, MealType.EVENING, MealType.MORNING):
        meal_service.save_meal("EMP001", meal_type, 1)
        meal_service.save_meal("EMP002", meal_type, 2)
        clock.advance(days=1)
    archive_service.run_sweep()

    listing = HistoryService(InMemoryHistoryRepository(store)).get_history("EMP001")

    assert [record.meal_type for record in listing.records] == [
        MealType.MORNING,
        MealType.EVENING,
        MealType.MORNING,
    ]
    dates = [record.date for record in listing.records]
    assert dates == sorted(dates, reverse=True)
    assert all(record.employee_id == "EMP001" for record in listing.records)


def test_history_failure_returns_error(store: InMemoryMealStore) -> None:
    store.fail_reads = True

    listing = HistoryService(InMemoryHistoryRepository(store)).get_history("EMP001")

    assert listing.records == []
    assert listing.error == HISTORY_FAILED
