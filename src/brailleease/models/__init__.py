"""Pydantic models for API requests and responses."""

from brailleease.models.braille import (
    AlphabetEntry,
    AlphabetResponse,
    KeypadResponse,
    TranslationRequest,
    TranslationResponse,
)
from brailleease.models.direction import Direction
from brailleease.models.health import HealthResponse
from brailleease.models.history import HistoryResponse, TranslationRecord
from brailleease.models.session import DirectionToggle, InputUpdate, KeyPress, SessionState

__all__ = [
    "AlphabetEntry",
    "AlphabetResponse",
    "Direction",
    "DirectionToggle",
    "HealthResponse",
    "HistoryResponse",
    "InputUpdate",
    "KeyPress",
    "KeypadResponse",
    "SessionState",
    "TranslationRecord",
    "TranslationRequest",
    "TranslationResponse",
]
