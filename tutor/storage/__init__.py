"""Tutor Storage - Notas salvas e sessões."""

from .note_store import NoteStore
from .session_store import SessionStore

__all__ = ["NoteStore", "SessionStore"]
