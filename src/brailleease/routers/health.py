"""Health check router."""

from fastapi import APIRouter

from brailleease.dependencies import BrailleServiceDep, HistoryLedgerDep, SettingsDep
from brailleease.models.health import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/", response_model=HealthResponse)
async def health_check(
    settings: SettingsDep,
    braille_service: BrailleServiceDep,
    ledger: HistoryLedgerDep,
) -> HealthResponse:
    """Health check endpoint with alphabet and history status."""
    return HealthResponse(
        status="ok",
        message="BrailleEase API is running",
        version=settings.app_version,
        alphabet_size=braille_service.alphabet_size,
        history_entries=len(ledger),
        storage_path=str(settings.history.resolved_storage_path),
    )
