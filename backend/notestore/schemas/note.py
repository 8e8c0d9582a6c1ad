"""
Note Store: Pydantic Response Schemas
=====================================

What:  Pydantic models defining the JSON parts of the API contract.
How:   FastAPI uses them to serialize responses and to generate the
       OpenAPI document served at /docs.

Most endpoints answer in plain text; only the listing and the health
check return JSON, so those are the only models here.
"""

from pydantic import BaseModel, Field


class NoteItem(BaseModel):
    """
    What:  One note as it appears in GET /notes.
    Who:   Built by NoteStore.list_notes().
    """
    name: str = Field(description="Note name (the file name inside the cache directory)")
    text: str = Field(description="Full note content")


class HealthResponse(BaseModel):
    """Health check response showing service and storage status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    storage: str = Field(description="Cache directory status: available, unavailable")
    note_count: int = Field(description="Number of notes currently stored")
    uptime_seconds: float = Field(description="Seconds since service started")
