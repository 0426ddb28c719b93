"""Note Store - Abstração sobre AgentFS para as notas salvas."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from agentfs_sdk import AgentFS

from ..models.schemas import SavedNote

logger = logging.getLogger(__name__)


class NoteStore:
    """Persistência das notas de estudo no KV store do AgentFS.

    As notas ficam em uma única lista, com título único sem diferenciar
    maiúsculas de minúsculas.

    Estrutura de chaves:
        - notes:list -> Lista de notas ({id, title, content})

    Example:
        >>> store = NoteStore(agentfs)
        >>> note = await store.save_note("Photosynthesis", "Plants convert...")
        >>> await store.save_note("PHOTOSYNTHESIS", "...")  # duplicada
        None
    """

    KEY_PREFIX = "notes"

    def __init__(self, agentfs: AgentFS):
        """Inicializa store com instância do AgentFS.

        Args:
            agentfs: Instância configurada do AgentFS
        """
        self.agentfs = agentfs

    def _list_key(self) -> str:
        """Gera chave da lista de notas."""
        return f"{self.KEY_PREFIX}:list"

    async def list_notes(self) -> list[SavedNote]:
        """Carrega todas as notas, na ordem em que foram salvas."""
        data = await self.agentfs.kv.get(self._list_key())

        if not data:
            return []

        return [SavedNote.model_validate(item) for item in data]

    async def _save_all(self, notes: list[SavedNote]) -> None:
        await self.agentfs.kv.set(self._list_key(), [n.model_dump() for n in notes])

    async def get_note(self, note_id: str) -> SavedNote | None:
        """Busca nota pelo ID."""
        for note in await self.list_notes():
            if note.id == note_id:
                return note
        return None

    async def save_note(self, title: str, content: str) -> SavedNote | None:
        """Salva nova nota.

        Args:
            title: Título (único, sem diferenciar maiúsculas)
            content: Conteúdo da nota

        Returns:
            Nota criada, ou None se já existir nota com o mesmo título
        """
        notes = await self.list_notes()

        if any(note.title.lower() == title.lower() for note in notes):
            logger.debug(f"Nota duplicada ignorada: '{title}'")
            return None

        note = SavedNote(title=title, content=content)
        notes.append(note)
        await self._save_all(notes)

        logger.info(f"Nota salva: {note.id} ('{title}')")
        return note

    async def delete_note(self, note_id: str) -> bool:
        """Remove nota.

        Returns:
            True se a nota existia e foi removida
        """
        notes = await self.list_notes()
        remaining = [note for note in notes if note.id != note_id]

        if len(remaining) == len(notes):
            return False

        await self._save_all(remaining)
        logger.info(f"Nota removida: {note_id}")
        return True
