"""ASGI entrypoint for the meal counter API."""

from meal_counter.api.app import create_app
from meal_counter.containers import build_container

app = create_app(build_container())
