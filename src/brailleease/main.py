"""FastAPI application factory and entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from brailleease.config import Settings
from brailleease.routers import alphabet_router, health_router, history_router, session_router, translation_router
from brailleease.services.braille_service import BrailleService
from brailleease.services.history_service import HistoryLedger
from brailleease.services.print_service import PrintService
from brailleease.services.session_service import SessionService

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Application settings. If None, loads from environment.

    Returns:
        Configured FastAPI application.
    """
    if settings is None:
        settings = Settings()

    logging.getLogger().setLevel(settings.log_level.upper())

    # Create services
    braille_service = BrailleService()
    history_ledger = HistoryLedger(settings.history)
    session_service = SessionService(settings.session, braille_service, history_ledger)
    print_service = PrintService()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger.info("Starting BrailleEase API...")

        # Store services in app state for access in routes
        app.state.settings = settings
        app.state.braille_service = braille_service
        app.state.history_ledger = history_ledger
        app.state.session_service = session_service
        app.state.print_service = print_service

        # Restore history persisted by a previous run
        history_ledger.load()

        yield

        logger.info("Shutting down BrailleEase API...")

    app = FastAPI(
        title=settings.app_title,
        description=settings.app_description,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allow_origins,
        allow_credentials=settings.cors.allow_credentials,
        allow_methods=settings.cors.allow_methods,
        allow_headers=settings.cors.allow_headers,
    )

    # Include routers
    app.include_router(health_router)
    app.include_router(alphabet_router)
    app.include_router(translation_router)
    app.include_router(history_router)
    app.include_router(session_router)

    return app


# Create default app instance for uvicorn
app = create_app()
