"""Translation direction enum."""

from enum import Enum


class Direction(str, Enum):
    """Which way text is transliterated."""

    SPANISH_TO_BRAILLE = "spanish_to_braille"
    BRAILLE_TO_SPANISH = "braille_to_spanish"

    @property
    def flipped(self) -> "Direction":
        if self is Direction.SPANISH_TO_BRAILLE:
            return Direction.BRAILLE_TO_SPANISH
        return Direction.SPANISH_TO_BRAILLE
