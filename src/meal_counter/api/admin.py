"""Admin API endpoints with simple token auth."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status
from fastapi.responses import JSONResponse

from meal_counter.api.serializers import serialize_archive_result
from meal_counter.errors import MealStoreError

if TYPE_CHECKING:
    from meal_counter.containers import AppContainer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"])


def _get_admin_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.admin_token


def _bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token:
        return None
    return token.strip()


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    authorization: str | None = Header(default=None),
    admin_token: str = Depends(_get_admin_token),
) -> None:
    """Ensure requests carry the admin token (header or bearer for cron)."""
    supplied = x_admin_token or _bearer_token(authorization)
    if not supplied or supplied != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.get("/health", dependencies=[Depends(require_admin)])
async def admin_health() -> dict[str, str]:
    """Admin health check endpoint."""
    return {"status": "ok"}


@router.get("/archive/status", dependencies=[Depends(require_admin)])
async def archive_status(request: Request) -> JSONResponse:
    """Report the last sweep date and when the next one is due."""
    container: AppContainer = request.app.state.container
    try:
        last = container.archive_service.last_archive_date()
    except MealStoreError:
        logger.exception("Failed to read archive status")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"error": "Failed to read archive status"},
        )
    today = container.calendar.today()
    return JSONResponse(
        content={
            "last_archive_date": last.isoformat() if last else None,
            "today": today.isoformat(),
            "should_archive": container.archive_service.is_due(last),
            "seconds_until_next_run": round(
                container.calendar.seconds_until_next_run()
            ),
        }
    )


@router.api_route(
    "/archive/run",
    methods=["GET", "POST"],
    dependencies=[Depends(require_admin)],
)
async def run_archive(request: Request, force: bool = False) -> JSONResponse:
    """Run the archive sweep; called by the scheduled cron job."""
    container: AppContainer = request.app.state.container
    result = container.archive_service.run_sweep(force=force)
    return JSONResponse(
        status_code=status.HTTP_200_OK
        if result.success
        else status.HTTP_503_SERVICE_UNAVAILABLE,
        content=serialize_archive_result(result),
    )
