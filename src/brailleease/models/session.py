"""Translator session Pydantic models."""

from pydantic import BaseModel, Field

from brailleease.models.direction import Direction


class SessionState(BaseModel):
    """Current state of the translator session."""

    direction: Direction = Field(..., description="Current translation direction")
    input_text: str = Field(..., description="Text being edited")
    output_text: str = Field(..., description="Result of the last translation")
    has_image: bool = Field(..., description="Whether an image is attached for printing")


class InputUpdate(BaseModel):
    """Request model replacing the session input."""

    text: str = Field(..., description="New input text")


class KeyPress(BaseModel):
    """Request model for a keypad key press."""

    key: str = Field(..., description="Keypad key to append", min_length=1, max_length=1)


class DirectionToggle(BaseModel):
    """Outcome of flipping the translation direction.

    The cleared fields tell the caller which text it must discard.
    """

    new_direction: Direction
    cleared_input: str = ""
    cleared_output: str = ""
