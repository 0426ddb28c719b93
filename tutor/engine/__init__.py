"""Tutor Engines - Logica de negocios."""

from .grading import GradingOrchestrator
from .presenter import ResultPresenter
from .quiz_builder import QuizBuilder
from .scoring_engine import LocalGrading, QuizScoringEngine

__all__ = [
    "GradingOrchestrator",
    "LocalGrading",
    "QuizBuilder",
    "QuizScoringEngine",
    "ResultPresenter",
]
