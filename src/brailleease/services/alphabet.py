"""Spanish braille alphabet table."""

import logging
from collections.abc import Mapping
from types import MappingProxyType

from brailleease.models.braille import AlphabetEntry
from brailleease.models.direction import Direction

logger = logging.getLogger(__name__)

# Source of truth. The reverse direction is always derived from this table.
SPANISH_LETTER_TO_CELL: Mapping[str, str] = MappingProxyType({
    "a": "⠁", "b": "⠃", "c": "⠉", "d": "⠙", "e": "⠑",
    "f": "⠋", "g": "⠛", "h": "⠓", "i": "⠊", "j": "⠚",
    "k": "⠅", "l": "⠇", "m": "⠍", "n": "⠝", "ñ": "⠻",
    "o": "⠕", "p": "⠏", "q": "⠟", "r": "⠗", "s": "⠎",
    "t": "⠞", "u": "⠥", "v": "⠧", "w": "⠺", "x": "⠭",
    "y": "⠽", "z": "⠵", " ": "⠀",
})


class AlphabetError(ValueError):
    """Raised when a letter table cannot be inverted losslessly."""


class AlphabetTable:
    """Immutable bidirectional mapping between letters and braille cells."""

    def __init__(self, letter_to_cell: Mapping[str, str] = SPANISH_LETTER_TO_CELL) -> None:
        self._letter_to_cell = MappingProxyType(dict(letter_to_cell))
        self._cell_to_letter = MappingProxyType({cell: letter for letter, cell in self._letter_to_cell.items()})
        self.verify()

    @property
    def letter_to_cell(self) -> Mapping[str, str]:
        return self._letter_to_cell

    @property
    def cell_to_letter(self) -> Mapping[str, str]:
        return self._cell_to_letter

    def __len__(self) -> int:
        return len(self._letter_to_cell)

    def verify(self) -> None:
        """Check that the derived cell table is the exact inverse of the letter table.

        Raises:
            AlphabetError: If two letters share a cell, or a round trip fails.
        """
        if len(self._cell_to_letter) != len(self._letter_to_cell):
            raise AlphabetError("letter table maps two letters to the same braille cell")

        for letter, cell in self._letter_to_cell.items():
            if self._cell_to_letter[cell] != letter:
                raise AlphabetError(f"round trip failed for {letter!r}")
        for cell, letter in self._cell_to_letter.items():
            if self._letter_to_cell[letter] != cell:
                raise AlphabetError(f"round trip failed for {cell!r}")

    def cell_for(self, letter: str) -> str | None:
        return self._letter_to_cell.get(letter)

    def letter_for(self, cell: str) -> str | None:
        return self._cell_to_letter.get(cell)

    def entries(self) -> list[AlphabetEntry]:
        """List the table in keypad order."""
        return [AlphabetEntry(letter=letter, cell=cell) for letter, cell in self._letter_to_cell.items()]

    def keypad_keys(self, direction: Direction) -> list[str]:
        """Keys offered by the on-screen keypad for a direction.

        The Spanish keypad has no space key; the braille keypad offers every
        cell, blank cell included.
        """
        if direction is Direction.SPANISH_TO_BRAILLE:
            return [letter for letter in self._letter_to_cell if not letter.isspace()]
        return list(self._cell_to_letter)


# Process-wide table, built once at import
SPANISH_ALPHABET = AlphabetTable()
