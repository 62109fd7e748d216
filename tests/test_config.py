"""Tests for settings validation."""

import pytest
from pydantic import ValidationError

from meal_counter.config import Settings


def test_settings_defaults(settings: Settings) -> None:
    assert settings.meal_timezone == "UTC"
    assert settings.archive_on_startup is True


def test_settings_reject_unknown_timezone() -> None:
    with pytest.raises(ValidationError):
        Settings(
            supabase_url="https://example.supabase.co",
            supabase_service_key="header.payload.signature",
            admin_token="admin-token",
            meal_timezone="Mars/Olympus_Mons",
        )
