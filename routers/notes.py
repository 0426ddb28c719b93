"""Notes endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from app_state import get_note_store
from tutor.models.schemas import SavedNote, SaveNoteRequest
from tutor.storage.note_store import NoteStore

router = APIRouter(prefix="/notes", tags=["Notes"])
logger = logging.getLogger(__name__)


@router.get("", response_model=list[SavedNote])
async def list_notes(notes: NoteStore = Depends(get_note_store)):
    """List saved notes."""
    return await notes.list_notes()


@router.post("", response_model=SavedNote, status_code=201)
async def save_note(request: SaveNoteRequest, notes: NoteStore = Depends(get_note_store)):
    """Save a note. Titles are unique regardless of case."""
    note = await notes.save_note(request.title, request.content)
    if note is None:
        raise HTTPException(
            status_code=409, detail=f"A note titled '{request.title}' already exists"
        )
    return note


@router.delete("/{note_id}")
async def delete_note(note_id: str, notes: NoteStore = Depends(get_note_store)):
    """Delete a note."""
    if not await notes.delete_note(note_id):
        raise HTTPException(status_code=404, detail=f"Note {note_id} not found")
    return {"deleted": note_id}
