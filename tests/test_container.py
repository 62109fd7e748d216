"""Tests for container wiring."""

from meal_counter.adapters.supabase_active_meal_repository import (
    SupabaseActiveMealRepository,
)
from meal_counter.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert isinstance(
        container.meal_service.repository, SupabaseActiveMealRepository
    )
    assert container.archive_service.calendar is container.calendar
    assert container.calendar.timezone_name == "UTC"
