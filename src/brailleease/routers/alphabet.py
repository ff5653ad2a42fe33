"""Alphabet and keypad router."""

from fastapi import APIRouter

from brailleease.dependencies import BrailleServiceDep, SessionServiceDep
from brailleease.models.braille import AlphabetResponse, KeypadResponse
from brailleease.models.direction import Direction

router = APIRouter(prefix="/api", tags=["alphabet"])


@router.get("/alphabet", response_model=AlphabetResponse)
async def get_alphabet(braille_service: BrailleServiceDep) -> AlphabetResponse:
    """List every letter of the Spanish table with its braille cell."""
    entries = braille_service.alphabet.entries()
    return AlphabetResponse(size=len(entries), entries=entries)


@router.get("/alphabet/keypad", response_model=KeypadResponse)
async def get_keypad(session_service: SessionServiceDep, direction: Direction | None = None) -> KeypadResponse:
    """Keys for the on-screen keypad.

    Defaults to the keypad of the session's current direction.
    """
    direction = direction or session_service.session.direction
    return KeypadResponse(direction=direction, keys=session_service.keypad_keys(direction))
