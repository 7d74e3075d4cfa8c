"""
Deciservice — REST Notes Route Handlers
=========================================

What:  JSON API over the notes resource, under /api.
How:   Validates request bodies with Pydantic, delegates to the notes resource,
       answers with the vendor media types from deciservice.media_types.
Who:   Called by scripts and non-browser clients.

Route Inventory:
    GET    /api/notes          all notes                     (notes+json)
    POST   /api/notes          create notes from a list      (notes+json, 201)
    PUT    /api/notes          update notes from a list      (notes+json)
    GET    /api/notes/{id}     one note, 404 if unknown      (note+json)
    PUT    /api/notes/{id}     replace title/body            (note+json)
    DELETE /api/notes/{id}     delete                        (204)

Request bodies are accepted as application/json or any +json media type,
including the vendor types.
"""

import logging
from typing import List

from fastapi import APIRouter, Response, status
from fastapi.responses import JSONResponse

from deciservice.dependencies import NoteIdPath, NotesResourceDep
from deciservice.exceptions import NotFoundError
from deciservice.media_types import NOTE_V1_JSON, NOTES_V1_JSON
from deciservice.schemas.note import ErrorResponse, Note, NoteChange, NoteContent

logger = logging.getLogger(__name__)


class NotesJSONResponse(JSONResponse):
    media_type = NOTES_V1_JSON


class NoteJSONResponse(JSONResponse):
    media_type = NOTE_V1_JSON


router = APIRouter(prefix="/api", tags=["Notes"])


@router.get(
    "/notes",
    response_model=List[Note],
    response_class=NotesJSONResponse,
    summary="List all notes",
)
async def list_notes(notes_resource: NotesResourceDep) -> List[Note]:
    return await notes_resource.get_notes()


@router.post(
    "/notes",
    response_model=List[Note],
    response_class=NotesJSONResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create notes",
    description="Creates one note per list item. Returns the created notes with their new ids.",
)
async def create_notes(
    notes: List[NoteContent],
    notes_resource: NotesResourceDep,
) -> List[Note]:
    created = await notes_resource.create_all(
        [Note(title=n.title, body=n.body) for n in notes]
    )
    logger.info("REST create: %d note(s)", len(created))
    return created


@router.put(
    "/notes",
    response_model=List[Note],
    response_class=NotesJSONResponse,
    responses={404: {"description": "Some note id is unknown", "model": ErrorResponse}},
    summary="Update notes",
    description="Overwrites title and body of every listed note. Nothing is written if any id is unknown.",
)
async def update_notes(
    notes: List[NoteChange],
    notes_resource: NotesResourceDep,
) -> List[Note]:
    return await notes_resource.update_all(
        [Note(id=n.id, title=n.title, body=n.body) for n in notes]
    )


@router.get(
    "/notes/{note_id}",
    response_model=Note,
    response_class=NoteJSONResponse,
    responses={404: {"description": "Note not found", "model": ErrorResponse}},
    summary="Get a single note by id",
)
async def get_note(note_id: NoteIdPath, notes_resource: NotesResourceDep) -> Note:
    note = await notes_resource.get_note(note_id)
    if note is None:
        raise NotFoundError(resource="note", resource_id=str(note_id))
    return note


@router.put(
    "/notes/{note_id}",
    response_model=Note,
    response_class=NoteJSONResponse,
    responses={404: {"description": "Note not found", "model": ErrorResponse}},
    summary="Replace a note's title and body",
)
async def update_note(
    note_id: NoteIdPath,
    content: NoteContent,
    notes_resource: NotesResourceDep,
) -> Note:
    updated = await notes_resource.update_all(
        [Note(id=note_id, title=content.title, body=content.body)]
    )
    return updated[0]


@router.delete(
    "/notes/{note_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a note",
)
async def delete_note(note_id: NoteIdPath, notes_resource: NotesResourceDep) -> Response:
    await notes_resource.delete_note(note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
