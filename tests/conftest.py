import pytest
from fastapi.testclient import TestClient

from brailleease.config import HistoryConfig, SessionConfig, Settings
from brailleease.main import create_app
from brailleease.services.braille_service import BrailleService
from brailleease.services.history_service import HistoryLedger
from brailleease.services.session_service import SessionService


@pytest.fixture
def history_config(tmp_path):
    return HistoryConfig(storage_path=str(tmp_path / "storage.json"))


@pytest.fixture
def ledger(history_config):
    ledger = HistoryLedger(history_config)
    ledger.load()
    return ledger


@pytest.fixture
def session_service(ledger):
    return SessionService(SessionConfig(), BrailleService(), ledger)


@pytest.fixture
def settings(history_config):
    return Settings(history=history_config, session=SessionConfig(image_max_bytes=1024))


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as client:
        yield client
