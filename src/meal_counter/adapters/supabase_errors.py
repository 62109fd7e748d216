"""Translate Supabase client failures into store errors."""

from typing import Any, Protocol

import httpx
from postgrest.exceptions import APIError

from meal_counter.errors import DuplicateMealError, MealStoreError

UNIQUE_VIOLATION = "23505"


class Executable(Protocol):
    def execute(self) -> Any: ...


def execute(request: Executable, action: str) -> Any:
    """Run a PostgREST request, raising MealStoreError on failure."""
    try:
        return request.execute()
    except APIError as exc:
        if exc.code == UNIQUE_VIOLATION:
            raise DuplicateMealError(f"{action}: {exc.message}") from exc
        raise MealStoreError(f"{action}: {exc.message}") from exc
    except httpx.HTTPError as exc:
        raise MealStoreError(f"{action}: {exc}") from exc
