"""Health check Pydantic models."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    message: str
    version: str
    alphabet_size: int
    history_entries: int
    storage_path: str
