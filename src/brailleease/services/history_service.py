"""Bounded, persisted translation history."""

import logging
import threading
from datetime import datetime

from pydantic import TypeAdapter, ValidationError

from brailleease.config import HistoryConfig
from brailleease.models.direction import Direction
from brailleease.models.history import TranslationRecord
from brailleease.storage import LocalStore

logger = logging.getLogger(__name__)

_records_adapter = TypeAdapter(list[TranslationRecord])


class HistoryStorageError(RuntimeError):
    """Raised when the history cannot be written to storage."""


class HistoryLedger:
    """Newest-first record of past translations, capped at ``max_entries``.

    ``record`` and ``clear`` are the only operations that write to storage,
    and the stored slot always matches ``records`` once either returns.
    """

    def __init__(self, config: HistoryConfig, store: LocalStore | None = None) -> None:
        self.config = config
        self.store = store or LocalStore(config.resolved_storage_path)
        self._records: tuple[TranslationRecord, ...] = ()
        self._lock = threading.Lock()

    @property
    def records(self) -> tuple[TranslationRecord, ...]:
        return self._records

    @property
    def max_entries(self) -> int:
        return self.config.max_entries

    def __len__(self) -> int:
        return len(self._records)

    def load(self) -> list[TranslationRecord]:
        """Replace the in-memory ledger with the persisted one.

        Missing or malformed data yields an empty ledger; this never raises.
        """
        raw = self.store.get(self.config.slot)
        records: list[TranslationRecord] = []

        if raw is not None:
            try:
                records = _records_adapter.validate_json(raw)
            except ValidationError as e:
                logger.warning(f"Discarding malformed history in slot {self.config.slot!r}: {e.error_count()} errors")
                records = []

        with self._lock:
            self._records = tuple(records[: self.max_entries])

        logger.info(f"Loaded {len(self._records)} history entries")
        return list(self._records)

    def record(self, input_text: str, output_text: str, direction: Direction) -> TranslationRecord:
        """Prepend a new translation, evict the oldest past the cap, and persist.

        Raises:
            HistoryStorageError: If storage could not be written; the ledger is unchanged.
        """
        entry = TranslationRecord(
            input_text=input_text,
            output_text=output_text,
            timestamp=datetime.now().strftime(self.config.timestamp_format),
            direction=direction,
        )

        with self._lock:
            updated = (entry, *self._records)[: self.max_entries]
            self._persist(updated)
            self._records = updated

        return entry

    def clear(self) -> None:
        """Empty the ledger and remove its persisted copy."""
        with self._lock:
            try:
                self.store.remove(self.config.slot)
            except OSError as e:
                raise HistoryStorageError(f"Could not clear history: {e}") from e
            self._records = ()

        logger.info("History cleared")

    def _persist(self, records: tuple[TranslationRecord, ...]) -> None:
        payload = _records_adapter.dump_json(list(records)).decode("utf-8")
        try:
            self.store.set(self.config.slot, payload)
        except OSError as e:
            raise HistoryStorageError(f"Could not save history: {e}") from e
