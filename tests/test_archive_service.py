"""Tests for the daily archive sweep."""

from datetime import date

from meal_counter.domain.meals import MealType
from meal_counter.services.archive import ARCHIVE_FAILED, ArchiveService
from meal_counter.services.meals import MealService
from tests.fakes import FixedClock, InMemoryArchiveRepository, InMemoryMealStore

YESTERDAY = date(2026, 10, 19)


def _serve_yesterday_then_advance(
    meal_service: MealService, clock: FixedClock
) -> None:
    meal_service.save_meal("EMP001", MealType.MORNING, 1)
    meal_service.save_meal("EMP002", MealType.EVENING, 2)
    meal_service.save_meal("EMP003", MealType.MORNING, 1)
    clock.advance(days=1)


def test_should_archive_when_never_archived(archive_service: ArchiveService) -> None:
    assert archive_service.should_archive() is True


def test_sweep_moves_yesterdays_records(
    meal_service: MealService,
    archive_service: ArchiveService,
    clock: FixedClock,
    store: InMemoryMealStore,
) -> None:
    _serve_yesterday_then_advance(meal_service, clock)
    meal_service.save_meal("EMP001", MealType.MORNING, 1)

    result = archive_service.run_sweep()

    assert result.success is True
    assert result.archived == 3
    assert result.archive_date == YESTERDAY
    assert not [record for record in store.active if record.date == YESTERDAY]
    archived = [record for record in store.archive if record.date == YESTERDAY]
    assert len(archived) == 3
    assert all(record.archived_at == clock.moment for record in archived)
    assert [record.date for record in store.active] == [date(2026, 10, 20)]
    assert store.last_archive == date(2026, 10, 20)
    assert archive_service.should_archive() is False


def test_second_sweep_same_day_moves_nothing(
    meal_service: MealService,
    archive_service: ArchiveService,
    clock: FixedClock,
    store: InMemoryMealStore,
) -> None:
    _serve_yesterday_then_advance(meal_service, clock)

    first = archive_service.run_sweep()
    second = archive_service.run_sweep()
    forced = archive_service.run_sweep(force=True)

    assert first.archived == 3
    assert second.skipped is True
    assert second.archived == 0
    assert forced.skipped is False
    assert forced.archived == 0
    assert len(store.archive) == 3


def test_sweep_picks_up_records_from_missed_days(
    meal_service: MealService,
    archive_service: ArchiveService,
    clock: FixedClock,
    store: InMemoryMealStore,
) -> None:
    meal_service.save_meal("EMP001", MealType.MORNING, 1)
    clock.advance(days=3)

    result = archive_service.run_sweep()

    assert result.archived == 1
    assert store.active == []


def test_failed_sweep_keeps_active_records(
    meal_service: MealService,
    archive_service: ArchiveService,
    clock: FixedClock,
    store: InMemoryMealStore,
) -> None:
    _serve_yesterday_then_advance(meal_service, clock)
    store.fail_writes = True

    result = archive_service.run_sweep()

    assert result.success is False
    assert result.archived == 0
    assert result.error == ARCHIVE_FAILED
    assert len(store.active) == 3
    assert store.last_archive is None


def test_unreadable_config_skips_sweep(
    archive_service: ArchiveService, store: InMemoryMealStore
) -> None:
    store.fail_reads = True

    assert archive_service.should_archive() is False
    result = archive_service.run_sweep()

    assert result.skipped is True
    repository = archive_service.repository
    assert isinstance(repository, InMemoryArchiveRepository)
    assert repository.calls == 0


def test_overlapping_sweep_is_skipped(archive_service: ArchiveService) -> None:
    archive_service._lock.acquire()
    try:
        result = archive_service.run_sweep(force=True)
    finally:
        archive_service._lock.release()

    assert result.skipped is True
    repository = archive_service.repository
    assert isinstance(repository, InMemoryArchiveRepository)
    assert repository.calls == 0


def test_is_due_compares_against_today(archive_service: ArchiveService) -> None:
    assert archive_service.is_due(None) is True
    assert archive_service.is_due(date(2026, 10, 18)) is True
    assert archive_service.is_due(date(2026, 10, 19)) is False
