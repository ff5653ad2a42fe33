"""API routers."""

from brailleease.routers.alphabet import router as alphabet_router
from brailleease.routers.health import router as health_router
from brailleease.routers.history import router as history_router
from brailleease.routers.session import router as session_router
from brailleease.routers.translation import router as translation_router

__all__ = [
    "alphabet_router",
    "health_router",
    "history_router",
    "session_router",
    "translation_router",
]
