"""Counter endpoints for eligibility, registration and history."""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated

from fastapi import APIRouter, HTTPException, Path, Request, status
from fastapi.responses import JSONResponse

from meal_counter.api.models import MealRequest  # noqa: TC001
from meal_counter.api.serializers import serialize_record

if TYPE_CHECKING:
    from meal_counter.containers import AppContainer

router = APIRouter(tags=["meals"])

EmployeeId = Annotated[str, Path(min_length=1, max_length=64)]


@router.get("/meals/eligibility/{employee_id}")
async def check_eligibility(
    request: Request, employee_id: EmployeeId
) -> JSONResponse:
    """Report whether the employee may receive a meal today."""
    container: AppContainer = request.app.state.container
    employee_id = _clean_employee_id(employee_id)
    check = container.meal_service.check_eligibility(employee_id)
    if check.error:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"error": check.error},
        )
    return JSONResponse(
        content={
            "employee_id": employee_id,
            "eligible": check.eligible,
            "meal_type": str(check.meal_type) if check.meal_type else None,
            "counter_id": check.counter_id,
        }
    )


@router.post("/meals")
async def provide_meal(payload: MealRequest, request: Request) -> JSONResponse:
    """Register a meal for an employee."""
    container: AppContainer = request.app.state.container
    result = container.meal_service.save_meal(
        employee_id=payload.employee_id,
        meal_type=payload.meal_type,
        counter_id=payload.counter_id,
    )
    if result.conflict:
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={
                "error": result.error,
                "meal_type": str(result.conflict.meal_type),
                "counter_id": result.conflict.counter_id,
            },
        )
    if not result.success or result.record is None:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"error": result.error},
        )
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=serialize_record(result.record),
    )


@router.get("/meals/today")
async def today_meals(request: Request) -> JSONResponse:
    """Return meals served today, newest first."""
    container: AppContainer = request.app.state.container
    listing = container.meal_service.list_today()
    if listing.error:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"error": listing.error},
        )
    return JSONResponse(
        content={
            "date": container.calendar.today().isoformat(),
            "count": len(listing.records),
            "meals": [serialize_record(record) for record in listing.records],
        }
    )


@router.get("/employees/{employee_id}/history")
async def employee_history(
    request: Request, employee_id: EmployeeId
) -> JSONResponse:
    """Return archived meals for an employee."""
    container: AppContainer = request.app.state.container
    employee_id = _clean_employee_id(employee_id)
    listing = container.history_service.get_history(employee_id)
    if listing.error:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"error": listing.error},
        )
    return JSONResponse(
        content={
            "employee_id": employee_id,
            "count": len(listing.records),
            "records": [serialize_record(record) for record in listing.records],
        }
    )


def _clean_employee_id(employee_id: str) -> str:
    cleaned = employee_id.strip()
    if not cleaned:
        raise HTTPException(
            status_code=422,
            detail="Please enter employee ID",
        )
    return cleaned
