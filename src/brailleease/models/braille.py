"""Braille-related Pydantic models."""

from pydantic import BaseModel, Field

from brailleease.models.direction import Direction
from brailleease.models.history import TranslationRecord


class AlphabetEntry(BaseModel):
    """One letter of the alphabet table and its braille cell."""

    letter: str = Field(..., description="Spanish symbol (lowercase letter or space)")
    cell: str = Field(..., description="Unicode braille cell")


class AlphabetResponse(BaseModel):
    """Response model listing the alphabet table."""

    size: int = Field(..., description="Number of symbols in the table")
    entries: list[AlphabetEntry] = Field(..., description="Table entries in keypad order")


class KeypadResponse(BaseModel):
    """Keys shown on the on-screen keypad for a direction."""

    direction: Direction = Field(..., description="Direction the keypad belongs to")
    keys: list[str] = Field(..., description="Keys in display order")


class TranslationRequest(BaseModel):
    """Request model for a one-off transliteration."""

    text: str = Field(..., description="Text to transliterate", min_length=1)
    direction: Direction = Field(Direction.SPANISH_TO_BRAILLE, description="Translation direction")
    record: bool = Field(True, description="Add the translation to the history")


class TranslationResponse(BaseModel):
    """Response model for a transliteration."""

    original_text: str = Field(..., description="Original input text")
    output_text: str = Field(..., description="Transliterated text")
    direction: Direction = Field(..., description="Direction used")
    record: TranslationRecord | None = Field(None, description="History entry, if one was recorded")
