"""Service layer for business logic."""

from brailleease.services.alphabet import SPANISH_ALPHABET, AlphabetTable
from brailleease.services.braille_service import BrailleService, toggle_direction, translate
from brailleease.services.history_service import HistoryLedger, HistoryStorageError
from brailleease.services.print_service import PrintService
from brailleease.services.session_service import SessionService, TranslatorSession

__all__ = [
    "SPANISH_ALPHABET",
    "AlphabetTable",
    "BrailleService",
    "HistoryLedger",
    "HistoryStorageError",
    "PrintService",
    "SessionService",
    "TranslatorSession",
    "toggle_direction",
    "translate",
]
