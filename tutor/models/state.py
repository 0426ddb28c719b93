"""Tutor State - Respostas em andamento e contexto da sessao de estudo."""

from __future__ import annotations

import asyncio
import uuid
from dataclasses import dataclass, field
from typing import Any, Protocol

from ..exceptions import SubmissionInProgressError
from .schemas import Quiz, QuizResult, Student


class ResultListener(Protocol):
    """Consumidor das duas entregas do resultado."""

    def on_result_ready(self, result: QuizResult) -> None: ...

    def on_feedback_ready(self, result: QuizResult) -> None: ...


class AnswerSheet:
    """Respostas em andamento, indexadas pela posicao da questao (0-based).

    Entradas ausentes significam questao nao respondida. A submissao so e
    liberada quando o numero de entradas iguala o numero de questoes; o
    conteudo das respostas nao e validado.
    """

    def __init__(self, total: int = 0):
        self.total = total
        self._answers: dict[int, str] = {}

    def set_answer(self, index: int, value: str) -> None:
        """Insere ou sobrescreve a resposta de uma questao."""
        if index < 0 or index >= self.total:
            raise IndexError(f"Questao {index} fora do intervalo (0-{self.total - 1})")
        self._answers[index] = value

    def get(self, index: int, default: str = "") -> str:
        return self._answers.get(index, default)

    def is_complete(self) -> bool:
        """Verifica se todas as questoes tem resposta."""
        return self.total > 0 and len(self._answers) == self.total

    @property
    def answered_count(self) -> int:
        return len(self._answers)

    def reset(self, total: int) -> None:
        """Descarta todas as respostas (novo quiz)."""
        self.total = total
        self._answers.clear()

    def as_dict(self) -> dict[int, str]:
        return dict(self._answers)


@dataclass
class QuizSession:
    """Contexto de uma sessao de estudo.

    A sessao e dona do quiz e das respostas em andamento. Tambem e o canal
    de entrega do resultado: `on_result_ready` recebe o resultado preliminar
    e `on_feedback_ready` a versao com feedback, sempre prevalecendo a
    ultima entrega.

    Attributes:
        student: Aluno dono da sessao
        session_id: ID unico da sessao
        topic_content: Conteudo base para geracao do quiz
        quiz: Quiz atual (substituido inteiro a cada geracao)
        answers: Respostas em andamento
        result: Ultimo resultado entregue
        feedback_pending: Se o feedback narrativo ainda esta sendo gerado
        status: Rotulo de progresso da submissao
        submitting: Guarda de submissao unica
        generating: Geracao de novo quiz em andamento
        feedback_task: Tarefa de geracao do feedback em andamento
        listeners: Consumidores adicionais das entregas
    """

    student: Student
    session_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    topic_content: str = ""
    quiz: Quiz | None = None
    answers: AnswerSheet = field(default_factory=AnswerSheet)
    result: QuizResult | None = None
    feedback_pending: bool = False
    status: str = ""
    submitting: bool = False
    generating: bool = False
    feedback_task: asyncio.Task | None = None
    listeners: list[ResultListener] = field(default_factory=list)

    def install_quiz(self, quiz: Quiz) -> None:
        """Substitui o quiz e invalida respostas e resultado anteriores.

        Raises:
            SubmissionInProgressError: Se houver submissao em andamento
        """
        if self.submitting:
            raise SubmissionInProgressError("A submission is already in progress.")
        self.quiz = quiz
        self.answers.reset(len(quiz.questions))
        self.result = None
        self.feedback_pending = False

    def on_result_ready(self, result: QuizResult) -> None:
        """Recebe o resultado preliminar."""
        self.result = result
        self.feedback_pending = True
        for listener in self.listeners:
            listener.on_result_ready(result)

    def on_feedback_ready(self, result: QuizResult) -> None:
        """Recebe o resultado final, com feedback real ou fallback."""
        self.result = result
        self.feedback_pending = False
        for listener in self.listeners:
            listener.on_feedback_ready(result)

    def to_dict(self) -> dict[str, Any]:
        """Converte para dicionario (snapshot da API)."""
        return {
            "session_id": self.session_id,
            "student": self.student,
            "topic_content": self.topic_content,
            "quiz": self.quiz,
            "answered_count": self.answers.answered_count,
            "complete": self.answers.is_complete(),
            "status": self.status,
            "submitting": self.submitting,
            "generating": self.generating,
        }
