"""
Deciservice — Pydantic Note Schemas
=====================================

What:  The Note value object plus the request/response models of the REST API.
How:   FastAPI uses these models to validate request bodies, serialize responses,
       and generate OpenAPI documentation.
Who:   Shared by the notes resource, both controllers, and the templates.

Note is the single entity of the service. It is immutable: handlers build a
new Note from submitted fields instead of modifying one in place.
"""

from typing import Optional

from pydantic import BaseModel, Field

# Placeholder id for a note that has not been created yet
UNSAVED_ID = 0

# Column limits of the notes table: BIGINT id, VARCHAR title
NOTE_ID_MAX = 2**63 - 1
TITLE_MAX_LENGTH = 1024


def note_uri(note_id: int) -> str:
    """REST location of a stored note, relative to the API root."""
    return f"notes/{note_id}"


# ══════════════════════════════════════════════════════════════════════════
# Entity
# ══════════════════════════════════════════════════════════════════════════


class Note(BaseModel):
    """
    What:  A note: id, uri, title, body.
    When:  Returned by every notes resource read; submitted to create_all/update_all.

    Fields:
        - id: 0 for a note the client wants created, the stored id otherwise
        - uri: REST location; None for client-submitted notes
        - title: single line, at most TITLE_MAX_LENGTH characters
        - body: free text
    """
    id: int = Field(
        default=UNSAVED_ID, ge=0, le=NOTE_ID_MAX, description="Note id (0 = not yet created)"
    )
    uri: Optional[str] = Field(default=None, description="REST location of the note")
    title: str = Field(default="", max_length=TITLE_MAX_LENGTH, description="Note title")
    body: str = Field(default="", description="Note body")

    model_config = {"frozen": True, "from_attributes": True}

    @property
    def is_new(self) -> bool:
        return self.id == UNSAVED_ID


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class NoteContent(BaseModel):
    """Title and body sent to create a note or replace one addressed by URL."""
    title: str = Field(default="", max_length=TITLE_MAX_LENGTH, description="Note title")
    body: str = Field(default="", description="Note body")


class NoteChange(NoteContent):
    """A full replacement for an existing note, addressed by id."""
    id: int = Field(gt=0, le=NOTE_ID_MAX, description="Id of the note to update")


# ══════════════════════════════════════════════════════════════════════════
# Error / Health Response Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    What:  Standardized error response format for all API errors.

    Example:
        {
            "error": "not_found",
            "message": "note with ID '42' was not found",
            "request_id": "1f0c2a9b"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")

