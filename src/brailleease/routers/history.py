"""Translation history router."""

from fastapi import APIRouter, HTTPException

from brailleease.dependencies import HistoryLedgerDep
from brailleease.models.history import HistoryResponse
from brailleease.services.history_service import HistoryStorageError

router = APIRouter(prefix="/api", tags=["history"])


@router.get("/history", response_model=HistoryResponse)
async def get_history(ledger: HistoryLedgerDep) -> HistoryResponse:
    """Past translations, newest first."""
    return HistoryResponse(entries=list(ledger.records), max_entries=ledger.max_entries)


@router.delete("/history", response_model=HistoryResponse)
async def clear_history(ledger: HistoryLedgerDep) -> HistoryResponse:
    """Remove every past translation."""
    try:
        ledger.clear()
    except HistoryStorageError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return HistoryResponse(entries=[], max_entries=ledger.max_entries)
