"""Spanish <-> braille transliteration."""

import logging

from brailleease.models.direction import Direction
from brailleease.models.session import DirectionToggle
from brailleease.services.alphabet import SPANISH_ALPHABET, AlphabetTable

logger = logging.getLogger(__name__)


def translate(text: str, direction: Direction, alphabet: AlphabetTable = SPANISH_ALPHABET) -> str:
    """Transliterate text one character at a time.

    Characters missing from the alphabet (punctuation, digits, accented
    vowels, line breaks) are copied to the output unchanged.

    Args:
        text: Text to transliterate
        direction: Which way to transliterate
        alphabet: Letter table to look characters up in

    Returns:
        Transliterated string, same length as the input
    """
    if direction is Direction.SPANISH_TO_BRAILLE:
        # Braille cells carry no case, so only this direction folds it
        return "".join(alphabet.cell_for(char.lower()) or char for char in text)
    return "".join(alphabet.letter_for(char) or char for char in text)


def toggle_direction(current: Direction) -> DirectionToggle:
    """Flip the direction; in-progress input and output must be discarded."""
    return DirectionToggle(new_direction=current.flipped)


class BrailleService:
    """Service for transliteration against a fixed alphabet table."""

    def __init__(self, alphabet: AlphabetTable = SPANISH_ALPHABET) -> None:
        self.alphabet = alphabet

    @property
    def alphabet_size(self) -> int:
        return len(self.alphabet)

    def translate(self, text: str, direction: Direction = Direction.SPANISH_TO_BRAILLE) -> str:
        """Transliterate text in the given direction."""
        result = translate(text, direction, self.alphabet)
        logger.debug(f"Translated {len(text)} characters ({direction.value})")
        return result

    def keypad_keys(self, direction: Direction) -> list[str]:
        return self.alphabet.keypad_keys(direction)
