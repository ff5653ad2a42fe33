"""FastAPI dependency injection functions."""

from typing import Annotated

from fastapi import Depends, Request

from brailleease.config import Settings
from brailleease.services.braille_service import BrailleService
from brailleease.services.history_service import HistoryLedger
from brailleease.services.print_service import PrintService
from brailleease.services.session_service import SessionService


# Singletons are created by create_app() and stored on app.state


def get_settings(request: Request) -> Settings:
    """Get the settings the application was created with."""
    return request.app.state.settings


def get_braille_service(request: Request) -> BrailleService:
    """Get the transliteration service instance."""
    return request.app.state.braille_service


def get_session_service(request: Request) -> SessionService:
    """Get the translator session service instance."""
    return request.app.state.session_service


def get_history_ledger(request: Request) -> HistoryLedger:
    """Get the translation history ledger."""
    return request.app.state.history_ledger


def get_print_service(request: Request) -> PrintService:
    """Get the print rendering service instance."""
    return request.app.state.print_service


# Type aliases for use in route dependencies
SettingsDep = Annotated[Settings, Depends(get_settings)]
BrailleServiceDep = Annotated[BrailleService, Depends(get_braille_service)]
SessionServiceDep = Annotated[SessionService, Depends(get_session_service)]
HistoryLedgerDep = Annotated[HistoryLedger, Depends(get_history_ledger)]
PrintServiceDep = Annotated[PrintService, Depends(get_print_service)]
