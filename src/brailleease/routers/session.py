"""Translator session router."""

from fastapi import APIRouter, File, HTTPException, UploadFile
from fastapi.responses import HTMLResponse

from brailleease.dependencies import PrintServiceDep, SessionServiceDep
from brailleease.models.history import TranslationRecord
from brailleease.models.session import DirectionToggle, InputUpdate, KeyPress, SessionState
from brailleease.services.history_service import HistoryStorageError
from brailleease.services.session_service import ImageTooLargeError, InvalidImageError, InvalidKeyError

router = APIRouter(prefix="/api/session", tags=["session"])


@router.get("", response_model=SessionState)
async def get_session(session_service: SessionServiceDep) -> SessionState:
    """Current direction, input and output."""
    return session_service.get_state()


@router.put("/input", response_model=SessionState)
async def set_input(session_service: SessionServiceDep, body: InputUpdate) -> SessionState:
    """Replace the input text."""
    session_service.set_input(body.text)
    return session_service.get_state()


@router.post("/keys", response_model=SessionState)
async def press_key(session_service: SessionServiceDep, body: KeyPress) -> SessionState:
    """Append a keypad key to the input."""
    try:
        session_service.press_key(body.key)
    except InvalidKeyError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return session_service.get_state()


@router.post("/backspace", response_model=SessionState)
async def backspace(session_service: SessionServiceDep) -> SessionState:
    """Delete the last input character."""
    session_service.backspace()
    return session_service.get_state()


@router.post("/toggle", response_model=DirectionToggle)
async def toggle_direction(session_service: SessionServiceDep) -> DirectionToggle:
    """Switch direction. Input and output are cleared; history is kept."""
    return session_service.toggle_direction()


@router.post("/translate", response_model=TranslationRecord)
async def translate_session(session_service: SessionServiceDep) -> TranslationRecord:
    """Translate the input, store the output and record it in the history."""
    try:
        return session_service.translate()
    except HistoryStorageError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/image", response_model=SessionState)
async def attach_image(
    session_service: SessionServiceDep,
    image: UploadFile = File(..., description="Uploaded or captured image"),
) -> SessionState:
    """Attach an image to include in the printed translation."""
    content = await image.read()
    try:
        session_service.attach_image(content, image.content_type)
    except ImageTooLargeError as e:
        raise HTTPException(status_code=413, detail=str(e))
    except InvalidImageError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return session_service.get_state()


@router.delete("/image", response_model=SessionState)
async def clear_image(session_service: SessionServiceDep) -> SessionState:
    """Remove the attached image."""
    session_service.clear_image()
    return session_service.get_state()


@router.get("/print", response_class=HTMLResponse)
async def print_translation(session_service: SessionServiceDep, print_service: PrintServiceDep) -> HTMLResponse:
    """Printable page with the input, its translation and the attached image."""
    return HTMLResponse(print_service.render(session_service.session))
