"""Session Store - Cache em memória das sessões de estudo."""

import logging

from ..models.schemas import Student
from ..models.state import QuizSession

logger = logging.getLogger(__name__)


class SessionStore:
    """Registro das sessões ativas (session_id -> QuizSession).

    Sessões vivem apenas em memória; não há persistência no servidor.
    """

    def __init__(self):
        self._sessions: dict[str, QuizSession] = {}

    def create(self, name: str) -> QuizSession:
        """Cria aluno e sessão.

        Raises:
            ValueError: Se o nome estiver vazio
        """
        name = name.strip()
        if not name:
            raise ValueError("Nome do aluno vazio")

        session = QuizSession(student=Student(name=name))
        self._sessions[session.session_id] = session

        logger.info(f"Sessão criada: {session.session_id} ({name})")
        return session

    def get(self, session_id: str) -> QuizSession | None:
        return self._sessions.get(session_id)

    def remove(self, session_id: str) -> None:
        self._sessions.pop(session_id, None)

    def all(self) -> list[QuizSession]:
        return list(self._sessions.values())

    def clear(self) -> None:
        self._sessions.clear()

    def __len__(self) -> int:
        return len(self._sessions)
