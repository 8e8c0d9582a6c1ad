"""
Note Store: Notes Route Handlers
================================

What:  CRUD endpoints over notes:
           GET    /notes/{name}   read one note (plain text)
           PUT    /notes/{name}   replace a note's text (plain text body)
           DELETE /notes/{name}   remove a note
           GET    /notes          list every note (JSON)
           POST   /write          create a note from form fields
How:   Each handler pulls NoteStore from the app via Depends and makes a
       single call. Failures are NoteStoreError subclasses, turned into
       plain-text 400/404 responses by the handlers in main.py.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import PlainTextResponse

from notestore.dependencies import get_note_store
from notestore.schemas.note import NoteItem
from notestore.services.note_store import NoteStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Notes"])

_NOT_FOUND = {404: {"description": "Note not found", "content": {"text/plain": {}}}}
_INVALID_NAME = {400: {"description": "Invalid note name", "content": {"text/plain": {}}}}


@router.get(
    "/notes/{name}",
    response_class=PlainTextResponse,
    responses={
        200: {"description": "Note content", "content": {"text/plain": {}}},
        **_NOT_FOUND,
        **_INVALID_NAME,
    },
    summary="Get the content of a note",
)
async def get_note(name: str, store: NoteStore = Depends(get_note_store)) -> PlainTextResponse:
    text = await store.get_note(name)
    return PlainTextResponse(text)


@router.put(
    "/notes/{name}",
    response_class=PlainTextResponse,
    responses={
        200: {"description": "Note updated", "content": {"text/plain": {}}},
        **_NOT_FOUND,
        **_INVALID_NAME,
    },
    summary="Replace the content of an existing note",
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"text/plain": {"schema": {"type": "string"}}},
        }
    },
)
async def update_note(
    name: str,
    request: Request,
    store: NoteStore = Depends(get_note_store),
) -> PlainTextResponse:
    """
    Overwrite a note with the raw request body.

    The body is read as-is rather than through a Body() parameter so that
    any content type is accepted as plain text, including a missing one.
    """
    body = await request.body()
    await store.update_note(name, body.decode("utf-8", errors="replace"))
    return PlainTextResponse("Note updated")


@router.delete(
    "/notes/{name}",
    response_class=PlainTextResponse,
    responses={
        200: {"description": "Note deleted", "content": {"text/plain": {}}},
        **_NOT_FOUND,
        **_INVALID_NAME,
    },
    summary="Delete a note",
)
async def delete_note(name: str, store: NoteStore = Depends(get_note_store)) -> PlainTextResponse:
    await store.delete_note(name)
    return PlainTextResponse("Note deleted")


@router.get(
    "/notes",
    response_model=List[NoteItem],
    summary="List all notes",
    description=(
        "Returns every note in the cache directory with its full text, sorted by name. "
        "Each call reads all note files; there is no pagination."
    ),
)
async def list_notes(store: NoteStore = Depends(get_note_store)) -> List[NoteItem]:
    notes = await store.list_notes()
    logger.debug("Listed %d notes", len(notes))
    return notes


@router.post(
    "/write",
    status_code=201,
    response_class=PlainTextResponse,
    responses={
        201: {"description": "Note created", "content": {"text/plain": {}}},
        400: {"description": "Note already exists or invalid name", "content": {"text/plain": {}}},
    },
    summary="Create a new note",
    description=(
        "Accepts application/x-www-form-urlencoded or multipart/form-data with the "
        "fields `note_name` and `note`."
    ),
)
async def write_note(
    note_name: str = Form(..., description="Name of the new note"),
    note: str = Form(default="", description="Note content"),
    store: NoteStore = Depends(get_note_store),
) -> PlainTextResponse:
    await store.create_note(note_name, note)
    return PlainTextResponse("Note created", status_code=201)
