"""Grading Orchestrator - Submissao, correcao e entrega do resultado em duas etapas."""

from __future__ import annotations

import asyncio
import logging

from ..exceptions import (
    QuizGenerationInProgressError,
    QuizNotReadyError,
    ServiceError,
    SubmissionInProgressError,
)
from ..llm.client import ReasoningClient
from ..models.enums import GradingStage
from ..models.schemas import QuizResult
from ..models.state import QuizSession
from .scoring_engine import QuizScoringEngine

logger = logging.getLogger(__name__)


class GradingOrchestrator:
    """Orquestra a correcao de uma submissao de quiz.

    Etapas (estritamente sequenciais):
        1. Correcao local da multipla escolha e fila das teoricas
        2. Correcao das teoricas em lote pelo servico (falha aborta tudo)
        3. Entrega imediata do resultado preliminar
        4. Geracao do feedback narrativo em background (falha vira fallback)

    A nota fica fixa depois da etapa 2. A sessao so aceita uma submissao
    por vez; a guarda e liberada quando o feedback termina ou quando a
    correcao teorica falha.

    Example:
        >>> orchestrator = GradingOrchestrator(ReasoningClient())
        >>> preliminary = await orchestrator.submit(session)
        >>> final = await orchestrator.wait_for_feedback(session)
    """

    PRELIMINARY_FEEDBACK = "Generating feedback..."
    FALLBACK_FEEDBACK = "Could not load AI feedback."

    def __init__(self, client: ReasoningClient, scoring: QuizScoringEngine | None = None):
        self.client = client
        self.scoring = scoring or QuizScoringEngine()

    async def submit(self, session: QuizSession) -> QuizResult:
        """Corrige a submissao e entrega o resultado preliminar.

        O feedback narrativo e anexado depois, via `session.on_feedback_ready`.

        Args:
            session: Sessao com quiz, respostas completas e aluno

        Returns:
            Resultado preliminar (feedback placeholder)

        Raises:
            SubmissionInProgressError: Se ja houver submissao em andamento
            QuizGenerationInProgressError: Se um novo quiz estiver sendo gerado
            QuizNotReadyError: Se a sessao nao tiver quiz
            ServiceError: Se a correcao teorica falhar (nada e entregue)
        """
        if session.submitting:
            raise SubmissionInProgressError("A submission is already in progress.")
        if session.generating:
            raise QuizGenerationInProgressError("A new quiz is being generated.")
        if session.quiz is None:
            raise QuizNotReadyError("No quiz has been generated yet.")

        session.submitting = True
        try:
            preliminary = await self._grade(session)
        except BaseException:
            self._release(session)
            raise

        session.on_result_ready(preliminary)
        logger.info(
            f"[Sessao {session.session_id}] Resultado preliminar: "
            f"{preliminary.score}/{preliminary.total_questions}"
        )

        session.feedback_task = asyncio.create_task(self._attach_feedback(session, preliminary))
        return preliminary

    async def wait_for_feedback(self, session: QuizSession) -> QuizResult | None:
        """Aguarda a geracao do feedback e retorna o ultimo resultado."""
        if session.feedback_task is not None:
            await session.feedback_task
        return session.result

    async def _grade(self, session: QuizSession) -> QuizResult:
        quiz = session.quiz

        session.status = GradingStage.MULTIPLE_CHOICE.label()
        grading = self.scoring.grade_local(quiz.questions, session.answers.as_dict())
        score = grading.score

        if grading.pending:
            session.status = GradingStage.THEORY.label(count=len(grading.pending))
            grades = await self.client.grade_theory_answers([p.item for p in grading.pending])
            try:
                score += self.scoring.apply_theory_grades(grading.answers, grading.pending, grades)
            except ValueError as e:
                logger.error(f"[Sessao {session.session_id}] Notas teoricas inconsistentes: {e}")
                raise ServiceError(ReasoningClient.GRADING_ERROR) from e

        session.status = GradingStage.FEEDBACK.label()

        return QuizResult(
            student=session.student,
            quiz_title=quiz.title,
            score=score,
            total_questions=len(quiz.questions),
            answers=grading.answers,
            feedback=self.PRELIMINARY_FEEDBACK,
        )

    async def _attach_feedback(self, session: QuizSession, preliminary: QuizResult) -> None:
        try:
            try:
                feedback = await self.client.generate_feedback(preliminary)
            except Exception as e:
                logger.warning(f"[Sessao {session.session_id}] Feedback indisponivel: {e}")
                feedback = self.FALLBACK_FEEDBACK

            session.on_feedback_ready(preliminary.model_copy(update={"feedback": feedback}))
        finally:
            self._release(session)

    @staticmethod
    def _release(session: QuizSession) -> None:
        session.submitting = False
        session.status = ""
