"""Tutor Module - Assistente de estudo com quiz gerado e corrigido por IA.

Arquitetura:
- models/: Enums, Schemas Pydantic, AnswerSheet e QuizSession
- engine/: QuizBuilder, QuizScoringEngine, GradingOrchestrator, ResultPresenter
- llm/: ReasoningClient, LLMClientFactory
- storage/: NoteStore (AgentFS integration), SessionStore
- prompts/: Templates de prompts
- router.py: FastAPI endpoints
"""

from .engine import GradingOrchestrator, QuizBuilder, QuizScoringEngine, ResultPresenter
from .exceptions import (
    QuizGenerationInProgressError,
    QuizNotReadyError,
    QuizValidationError,
    ServiceError,
    SubmissionInProgressError,
)
from .llm import LLMClientFactory, ReasoningClient
from .models import AnswerSheet, Question, QuestionType, Quiz, QuizResult, QuizSession, Student
from .storage import NoteStore, SessionStore

__all__ = [
    # Models
    "QuestionType",
    "Student",
    "Question",
    "Quiz",
    "QuizResult",
    "AnswerSheet",
    "QuizSession",
    # Engines
    "QuizBuilder",
    "QuizScoringEngine",
    "GradingOrchestrator",
    "ResultPresenter",
    # LLM
    "LLMClientFactory",
    "ReasoningClient",
    # Storage
    "NoteStore",
    "SessionStore",
    # Errors
    "ServiceError",
    "QuizValidationError",
    "SubmissionInProgressError",
    "QuizGenerationInProgressError",
    "QuizNotReadyError",
]
