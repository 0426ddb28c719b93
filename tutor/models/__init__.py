"""Tutor Models - Enums, Schemas e State."""

from .enums import GradingStage, PerformanceBand, QuestionType
from .schemas import (
    Answer,
    AnswerRequest,
    CreateSessionRequest,
    ExplainTopicRequest,
    PendingTheoryAnswer,
    Question,
    Quiz,
    QuizResult,
    ResultRow,
    ResultView,
    SavedNote,
    SaveNoteRequest,
    SessionResponse,
    Student,
    TheoryGrade,
    TheoryGradingItem,
    TheoryGradingResponse,
    TopicContentRequest,
)
from .state import AnswerSheet, QuizSession, ResultListener

__all__ = [
    # Enums
    "QuestionType",
    "GradingStage",
    "PerformanceBand",
    # Schemas
    "Student",
    "Question",
    "Quiz",
    "Answer",
    "QuizResult",
    "TheoryGradingItem",
    "PendingTheoryAnswer",
    "TheoryGrade",
    "TheoryGradingResponse",
    "SavedNote",
    "CreateSessionRequest",
    "ExplainTopicRequest",
    "TopicContentRequest",
    "AnswerRequest",
    "SaveNoteRequest",
    "SessionResponse",
    "ResultRow",
    "ResultView",
    # State
    "AnswerSheet",
    "QuizSession",
    "ResultListener",
]
