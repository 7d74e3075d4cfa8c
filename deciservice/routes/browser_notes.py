"""
Deciservice — Browser Notes Route Handlers
============================================

What:  Server-rendered HTML pages for listing, creating, editing and deleting notes.
How:   Each handler calls the notes resource, builds the page variable mapping
       and renders the shared page shell, or answers with a 303 redirect back
       to the list after a form submission.
Who:   Called by web browsers; forms post application/x-www-form-urlencoded.

Page variables (every rendered page):
    note | notes   the note being edited, or all notes (list page)
    base           application root path (empty unless mounted under a prefix)
    dist           static asset root, base + "/dist"
    title          page title
    content        name of the content partial page.html includes

Route Inventory:
    GET  /notes              list page
    GET  /notes/create       create form
    GET  /notes/{id}/edit    edit form, 404 without body for an unknown id
    POST /notes              create (id == 0) or update, then 303 → /notes
    POST /notes/delete       delete, then 303 → /notes

Ids are limited to 0..NOTE_ID_MAX and titles to TITLE_MAX_LENGTH characters;
anything outside answers 422.
"""

import logging
from typing import Any

from fastapi import APIRouter, Form, Request, Response, status
from fastapi.responses import HTMLResponse, RedirectResponse

from deciservice.dependencies import NoteIdPath, NotesResourceDep, TemplaterDep
from deciservice.schemas.note import NOTE_ID_MAX, TITLE_MAX_LENGTH, Note
from deciservice.services.templater import PAGE_TEMPLATE, Templater

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/notes", tags=["Browser"], include_in_schema=False)

LIST_CONTENT = "notes-list.html"
EDIT_CONTENT = "note-edit.html"
CREATE_CONTENT = "note-create.html"


def base_path(request: Request) -> str:
    """Root path the application is mounted under, without trailing slash."""
    return request.scope.get("root_path", "").rstrip("/")


def render_page(
    templater: Templater,
    request: Request,
    title: str,
    content: str,
    **values: Any,
) -> HTMLResponse:
    """Renders page.html around the named content partial."""
    base = base_path(request)
    variables = {
        **values,
        "base": base,
        "dist": base + "/dist",
        "title": title,
        "content": content,
    }
    return HTMLResponse(templater.render(PAGE_TEMPLATE, variables))


def redirect_to_list(request: Request) -> RedirectResponse:
    return RedirectResponse(
        url=base_path(request) + "/notes",
        status_code=status.HTTP_303_SEE_OTHER,
    )


@router.get("", response_class=HTMLResponse)
async def list_notes_page(
    request: Request,
    notes_resource: NotesResourceDep,
    templater: TemplaterDep,
) -> HTMLResponse:
    """Presents a web page of notes."""
    notes = await notes_resource.get_notes()
    return render_page(templater, request, "Notes", LIST_CONTENT, notes=notes)


@router.get("/create", response_class=HTMLResponse)
async def create_note_page(request: Request, templater: TemplaterDep) -> HTMLResponse:
    """Presents an empty form for creating a note."""
    return render_page(templater, request, "Create Note", CREATE_CONTENT)


@router.get("/{note_id}/edit", response_class=HTMLResponse)
async def edit_note_page(
    note_id: NoteIdPath,
    request: Request,
    notes_resource: NotesResourceDep,
    templater: TemplaterDep,
) -> Response:
    """
    Presents a form for editing one note.

    An unknown id answers 404 with an empty body, not an error page. An id
    outside the storable range is rejected with 422.
    """
    note = await notes_resource.get_note(note_id)
    if note is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return render_page(templater, request, "Edit Note", EDIT_CONTENT, note=note)


@router.post("")
async def save_note(
    request: Request,
    notes_resource: NotesResourceDep,
    id: int = Form(ge=0, le=NOTE_ID_MAX),
    title: str = Form(default="", max_length=TITLE_MAX_LENGTH),
    body: str = Form(default=""),
) -> RedirectResponse:
    """
    Finishes the create or edit form.

    id 0 creates a new note; any other id updates that note. Updating an id
    that is not stored raises NotFoundError (404) from the resource.
    """
    note = Note(id=id, uri=None, title=title, body=body)
    if note.is_new:
        await notes_resource.create_all([note])
    else:
        await notes_resource.update_all([note])
    return redirect_to_list(request)


@router.post("/delete")
async def delete_note(
    request: Request,
    notes_resource: NotesResourceDep,
    id: int = Form(ge=0, le=NOTE_ID_MAX),
) -> RedirectResponse:
    """Deletes a note; redirects to the list whether or not it existed."""
    await notes_resource.delete_note(id)
    return redirect_to_list(request)
