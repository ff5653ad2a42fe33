"""Translation history Pydantic models."""

from pydantic import BaseModel, ConfigDict, Field

from brailleease.models.direction import Direction


class TranslationRecord(BaseModel):
    """A past translation. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    input_text: str = Field(..., description="Text as entered")
    output_text: str = Field(..., description="Transliterated text")
    timestamp: str = Field(..., description="When the translation was made")
    direction: Direction = Field(..., description="Direction used")


class HistoryResponse(BaseModel):
    """Ledger contents, newest first."""

    entries: list[TranslationRecord]
    max_entries: int
