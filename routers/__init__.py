"""Routers module for Study Assistant."""

from .notes import router as notes_router

# Router do ciclo de vida do quiz (modulo tutor/)
from tutor.router import router as tutor_router

__all__ = [
    "notes_router",
    "tutor_router",
]
