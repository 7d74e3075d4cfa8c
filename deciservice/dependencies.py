"""
Dependency injection for FastAPI routes.

Controllers receive their collaborators through these providers instead of
holding them as instance state. Tests swap them with app.dependency_overrides.
"""

from typing import Annotated

from fastapi import Depends, Path, Request
from sqlalchemy.ext.asyncio import AsyncSession

from deciservice.database import get_db_session
from deciservice.schemas.note import NOTE_ID_MAX
from deciservice.services.notes_resource import NotesResource
from deciservice.services.sql_notes_resource import SqlNotesResource
from deciservice.services.templater import Templater


def get_notes_resource(
    db: AsyncSession = Depends(get_db_session),
) -> NotesResource:
    return SqlNotesResource(db)


def get_templater(request: Request) -> Templater:
    return request.app.state.templater


NotesResourceDep = Annotated[NotesResource, Depends(get_notes_resource)]
TemplaterDep = Annotated[Templater, Depends(get_templater)]

# Ids outside the BIGINT column range are rejected with 422 before any lookup
NoteIdPath = Annotated[int, Path(ge=0, le=NOTE_ID_MAX)]
