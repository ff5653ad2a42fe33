"""Transliteration router."""

from fastapi import APIRouter, HTTPException

from brailleease.dependencies import SessionServiceDep
from brailleease.models.braille import TranslationRequest, TranslationResponse
from brailleease.services.history_service import HistoryStorageError

router = APIRouter(prefix="/api", tags=["translation"])


@router.post("/translate", response_model=TranslationResponse)
async def translate_text(session_service: SessionServiceDep, body: TranslationRequest) -> TranslationResponse:
    """Transliterate text in either direction.

    Characters outside the alphabet are returned unchanged. The session
    input and output are left alone.
    """
    try:
        output, record = session_service.translate_text(body.text, body.direction, record=body.record)
    except HistoryStorageError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return TranslationResponse(
        original_text=body.text,
        output_text=output,
        direction=body.direction,
        record=record,
    )
