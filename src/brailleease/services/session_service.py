"""Translator session state and the operations that mutate it."""

import base64
import logging
from dataclasses import dataclass

from brailleease.config import SessionConfig
from brailleease.models.direction import Direction
from brailleease.models.history import TranslationRecord
from brailleease.models.session import DirectionToggle, SessionState
from brailleease.services.braille_service import BrailleService, toggle_direction
from brailleease.services.history_service import HistoryLedger

logger = logging.getLogger(__name__)


class InvalidKeyError(ValueError):
    """Raised when a key is not on the keypad of the current direction."""


class InvalidImageError(ValueError):
    """Raised when an attached file is not an acceptable image."""


class ImageTooLargeError(InvalidImageError):
    """Raised when an attached image exceeds the configured size limit."""


@dataclass
class TranslatorSession:
    """Text and settings of the one translator in use."""

    direction: Direction = Direction.SPANISH_TO_BRAILLE
    input_text: str = ""
    output_text: str = ""
    image: str | None = None  # data: URL


class SessionService:
    """Owns the session, the transliteration service and the history ledger."""

    def __init__(self, config: SessionConfig, braille_service: BrailleService, ledger: HistoryLedger) -> None:
        self.config = config
        self.braille_service = braille_service
        self.ledger = ledger
        self.session = TranslatorSession(direction=config.default_direction)

    def get_state(self) -> SessionState:
        return SessionState(
            direction=self.session.direction,
            input_text=self.session.input_text,
            output_text=self.session.output_text,
            has_image=self.session.image is not None,
        )

    def keypad_keys(self, direction: Direction | None = None) -> list[str]:
        return self.braille_service.keypad_keys(direction or self.session.direction)

    def set_input(self, text: str) -> None:
        self.session.input_text = text

    def press_key(self, key: str) -> None:
        """Append a keypad key to the input.

        Raises:
            InvalidKeyError: If the key is not on the current keypad.
        """
        if key not in self.keypad_keys():
            raise InvalidKeyError(f"{key!r} is not a {self.session.direction.value} keypad key")
        self.session.input_text += key

    def backspace(self) -> None:
        self.session.input_text = self.session.input_text[:-1]

    def toggle_direction(self) -> DirectionToggle:
        """Switch direction and discard the current input and output."""
        result = toggle_direction(self.session.direction)
        self.session.direction = result.new_direction
        self.session.input_text = result.cleared_input
        self.session.output_text = result.cleared_output
        logger.info(f"Direction switched to {result.new_direction.value}")
        return result

    def translate(self) -> TranslationRecord:
        """Translate the session input, show it as output and record it."""
        session = self.session
        output = self.braille_service.translate(session.input_text, session.direction)
        record = self.ledger.record(session.input_text, output, session.direction)
        session.output_text = output
        return record

    def translate_text(
        self,
        text: str,
        direction: Direction,
        record: bool = True,
    ) -> tuple[str, TranslationRecord | None]:
        """Translate text outside the session input, optionally recording it."""
        output = self.braille_service.translate(text, direction)
        entry = self.ledger.record(text, output, direction) if record else None
        return output, entry

    def attach_image(self, data: bytes, media_type: str | None) -> None:
        """Attach an image for the print document.

        Raises:
            InvalidImageError: If the media type is not an image or the data is empty.
            ImageTooLargeError: If the image is larger than the configured limit.
        """
        if not media_type or not media_type.startswith("image/"):
            raise InvalidImageError(f"Expected an image, got {media_type or 'unknown type'}")
        if not data:
            raise InvalidImageError("Image is empty")
        if len(data) > self.config.image_max_bytes:
            raise ImageTooLargeError(f"Image exceeds {self.config.image_max_bytes} bytes")

        encoded = base64.b64encode(data).decode("ascii")
        self.session.image = f"data:{media_type};base64,{encoded}"
        logger.info(f"Attached {media_type} image ({len(data)} bytes)")

    def clear_image(self) -> None:
        self.session.image = None
