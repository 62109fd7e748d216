"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from meal_counter.adapters.supabase_active_meal_repository import (
    SupabaseActiveMealRepository,
)
from meal_counter.adapters.supabase_archive_repository import (
    SupabaseArchiveRepository,
)
from meal_counter.adapters.supabase_history_repository import (
    SupabaseHistoryRepository,
)
from meal_counter.config import Settings
from meal_counter.services.archive import ArchiveService
from meal_counter.services.calendar import MealCalendar
from meal_counter.services.history import HistoryService
from meal_counter.services.meals import MealService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    calendar: MealCalendar
    meal_service: MealService
    history_service: HistoryService
    archive_service: ArchiveService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    calendar = MealCalendar(timezone_name=resolved_settings.meal_timezone)
    meal_service = MealService(
        repository=SupabaseActiveMealRepository(supabase_client),
        calendar=calendar,
    )
    history_service = HistoryService(SupabaseHistoryRepository(supabase_client))
    archive_service = ArchiveService(
        repository=SupabaseArchiveRepository(supabase_client),
        calendar=calendar,
    )
    return AppContainer(
        settings=resolved_settings,
        calendar=calendar,
        meal_service=meal_service,
        history_service=history_service,
        archive_service=archive_service,
    )
