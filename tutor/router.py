"""Tutor Router - Endpoints FastAPI do ciclo de vida do quiz."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from app_state import (
    get_grading_orchestrator,
    get_note_store,
    get_reasoning_client,
    get_session_store,
)

from .engine.grading import GradingOrchestrator
from .engine.presenter import ResultPresenter
from .engine.quiz_builder import QuizBuilder
from .exceptions import (
    QuizGenerationInProgressError,
    QuizNotReadyError,
    ServiceError,
    SubmissionInProgressError,
)
from .llm.client import ReasoningClient
from .models.schemas import (
    AnswerRequest,
    CreateSessionRequest,
    ExplainTopicRequest,
    Quiz,
    ResultView,
    SessionResponse,
    TopicContentRequest,
)
from .models.state import QuizSession
from .storage.note_store import NoteStore
from .storage.session_store import SessionStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tutor", tags=["Tutor"])

presenter = ResultPresenter()


# =============================================================================
# DEPENDENCY INJECTION
# =============================================================================


def get_session(
    session_id: str,
    store: SessionStore = Depends(get_session_store),
) -> QuizSession:
    """Dependency para obter sessao existente."""
    session = store.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail=f"Sessao {session_id} nao encontrada")
    return session


def _ensure_idle(session: QuizSession) -> None:
    if session.submitting:
        raise HTTPException(status_code=409, detail="A submission is already in progress.")
    if session.generating:
        raise HTTPException(status_code=409, detail="A new quiz is being generated.")


def _snapshot(session: QuizSession) -> SessionResponse:
    return SessionResponse.model_validate(session.to_dict())


# =============================================================================
# SESSAO E TOPICO
# =============================================================================


@router.post("/sessions", response_model=SessionResponse, status_code=201)
async def create_session(
    request: CreateSessionRequest,
    store: SessionStore = Depends(get_session_store),
):
    """Inicia sessao de estudo para um aluno."""
    try:
        session = store.create(request.name)
    except ValueError:
        raise HTTPException(status_code=400, detail="Please enter your name to begin.")

    return _snapshot(session)


@router.get("/sessions/{session_id}", response_model=SessionResponse)
async def get_session_snapshot(session: QuizSession = Depends(get_session)):
    """Retorna estado atual da sessao."""
    return _snapshot(session)


@router.post("/sessions/{session_id}/explain")
async def explain_topic(
    request: ExplainTopicRequest,
    session: QuizSession = Depends(get_session),
    client: ReasoningClient = Depends(get_reasoning_client),
):
    """Gera explicacao do topico e a usa como conteudo do quiz.

    Em caso de falha o conteudo anterior da sessao e mantido.
    """
    topic = request.topic.strip()
    if not topic:
        raise HTTPException(status_code=400, detail="Please enter a topic to search for.")

    try:
        explanation = await client.explain_topic(topic)
    except ServiceError as e:
        raise HTTPException(status_code=502, detail=e.message)

    session.topic_content = explanation
    logger.info(f"[Sessao {session.session_id}] Explicacao gerada: '{topic}'")

    return {"topic": topic, "content": explanation}


@router.put("/sessions/{session_id}/topic", response_model=SessionResponse)
async def set_topic_content(
    request: TopicContentRequest,
    session: QuizSession = Depends(get_session),
):
    """Define o conteudo base do quiz manualmente."""
    session.topic_content = request.content
    return _snapshot(session)


@router.post("/sessions/{session_id}/notes/{note_id}/load", response_model=SessionResponse)
async def load_note(
    note_id: str,
    session: QuizSession = Depends(get_session),
    notes: NoteStore = Depends(get_note_store),
):
    """Carrega nota salva como conteudo do quiz."""
    note = await notes.get_note(note_id)
    if note is None:
        raise HTTPException(status_code=404, detail=f"Nota {note_id} nao encontrada")

    session.topic_content = note.content
    return _snapshot(session)


# =============================================================================
# QUIZ E RESPOSTAS
# =============================================================================


@router.post("/sessions/{session_id}/quiz", response_model=Quiz)
async def generate_quiz(
    session: QuizSession = Depends(get_session),
    client: ReasoningClient = Depends(get_reasoning_client),
):
    """Gera novo quiz e descarta respostas anteriores.

    - Conteudo vazio e rejeitado antes de qualquer chamada ao servico
    - Em caso de falha nenhum quiz parcial e instalado
    """
    _ensure_idle(session)

    if not session.topic_content.strip():
        raise HTTPException(
            status_code=400, detail="Topic content is empty. Search or load a topic first."
        )

    session.generating = True
    try:
        quiz = await QuizBuilder(client).generate_quiz(session.topic_content, session.student)
    except ServiceError as e:
        raise HTTPException(status_code=502, detail=e.message)
    finally:
        session.generating = False

    session.install_quiz(quiz)
    return quiz


@router.put("/sessions/{session_id}/answers/{index}")
async def set_answer(
    index: int,
    request: AnswerRequest,
    session: QuizSession = Depends(get_session),
):
    """Registra (ou sobrescreve) a resposta de uma questao."""
    if session.quiz is None:
        raise HTTPException(status_code=400, detail="No quiz has been generated yet.")
    _ensure_idle(session)

    try:
        session.answers.set_answer(index, request.value)
    except IndexError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {
        "index": index,
        "answeredCount": session.answers.answered_count,
        "complete": session.answers.is_complete(),
    }


# =============================================================================
# SUBMISSAO E RESULTADO
# =============================================================================


@router.post("/sessions/{session_id}/submit", response_model=ResultView)
async def submit_quiz(
    session: QuizSession = Depends(get_session),
    orchestrator: GradingOrchestrator = Depends(get_grading_orchestrator),
):
    """Corrige o quiz e retorna o resultado preliminar.

    - Multipla escolha corrigida localmente
    - Teoricas corrigidas pelo servico (falha aborta a submissao)
    - Feedback narrativo gerado em background (ver /result)
    """
    if session.quiz is None:
        raise HTTPException(status_code=400, detail="No quiz has been generated yet.")

    if not session.answers.is_complete():
        raise HTTPException(
            status_code=400, detail="Please answer all questions before submitting."
        )

    try:
        preliminary = await orchestrator.submit(session)
    except (SubmissionInProgressError, QuizGenerationInProgressError) as e:
        raise HTTPException(status_code=409, detail=e.message)
    except QuizNotReadyError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except ServiceError as e:
        raise HTTPException(status_code=502, detail=e.message)

    return presenter.build(preliminary, feedback_pending=True)


@router.get("/sessions/{session_id}/result", response_model=ResultView)
async def get_result(
    wait: bool = False,
    session: QuizSession = Depends(get_session),
    orchestrator: GradingOrchestrator = Depends(get_grading_orchestrator),
):
    """Retorna o ultimo resultado entregue.

    Args:
        wait: Aguarda o feedback narrativo antes de responder
    """
    if wait:
        await orchestrator.wait_for_feedback(session)

    if session.result is None:
        raise HTTPException(status_code=404, detail="No result available yet.")

    return presenter.build(session.result, feedback_pending=session.feedback_pending)


@router.get("/sessions/{session_id}/status")
async def get_status(session: QuizSession = Depends(get_session)):
    """Rotulo de progresso da submissao."""
    return {"status": session.status, "submitting": session.submitting}
