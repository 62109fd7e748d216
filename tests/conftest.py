"""Shared test fixtures."""

from datetime import UTC, datetime

import pytest

from meal_counter.config import Settings
from meal_counter.containers import AppContainer
from meal_counter.services.archive import ArchiveService
from meal_counter.services.calendar import MealCalendar
from meal_counter.services.history import HistoryService
from meal_counter.services.meals import MealService
from tests.fakes import (
    FixedClock,
    InMemoryActiveMealRepository,
    InMemoryArchiveRepository,
    InMemoryHistoryRepository,
    InMemoryMealStore,
)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        admin_token="admin-token",
    )


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(datetime(2026, 10, 19, 8, 30, tzinfo=UTC))


@pytest.fixture
def calendar(clock: FixedClock) -> MealCalendar:
    return MealCalendar(timezone_name="UTC", clock=clock)


@pytest.fixture
def store() -> InMemoryMealStore:
    return InMemoryMealStore()


@pytest.fixture
def meal_service(store: InMemoryMealStore, calendar: MealCalendar) -> MealService:
    return MealService(
        repository=InMemoryActiveMealRepository(store), calendar=calendar
    )


@pytest.fixture
def archive_service(
    store: InMemoryMealStore, calendar: MealCalendar
) -> ArchiveService:
    return ArchiveService(
        repository=InMemoryArchiveRepository(store), calendar=calendar
    )


@pytest.fixture
def container(
    settings: Settings,
    calendar: MealCalendar,
    store: InMemoryMealStore,
    meal_service: MealService,
    archive_service: ArchiveService,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        calendar=calendar,
        meal_service=meal_service,
        history_service=HistoryService(InMemoryHistoryRepository(store)),
        archive_service=archive_service,
    )
