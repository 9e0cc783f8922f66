"""Health check endpoint with user store connectivity."""

from fastapi import APIRouter

from app.api.deps import SettingsDep, StoreDep
from app.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def get_health(store: StoreDep, settings: SettingsDep) -> HealthResponse:
    """
    Return service health status and store connectivity.
    Used by load balancers and monitoring.
    """
    return HealthResponse(
        status="ok",
        environment=settings.APP_ENV,
        store=settings.USER_STORE_BACKEND,
        database="connected" if store.ping() else "disconnected",
    )
