"""Pydantic models for the meal counter API."""

from pydantic import BaseModel, Field, field_validator

from meal_counter.domain.meals import MealType


class MealRequest(BaseModel):
    """Payload for registering a served meal."""

    employee_id: str = Field(min_length=1, max_length=64)
    meal_type: MealType
    counter_id: int = Field(gt=0)

    @field_validator("employee_id", mode="before")
    @classmethod
    def _strip_employee_id(cls, value: object) -> object:
        return value.strip() if isinstance(value, str) else value
