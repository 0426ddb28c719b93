"""Tutor Prompts - Templates e schemas."""

from .templates import (
    EXPLAIN_TOPIC_PROMPT,
    FEEDBACK_ANSWER_LINE,
    FEEDBACK_PROMPT,
    JSON_SYSTEM_PROMPT,
    QUIZ_GENERATION_PROMPT,
    QUIZ_RESPONSE_SCHEMA,
    THEORY_GRADING_PROMPT,
    THEORY_GRADING_SCHEMA,
    TUTOR_SYSTEM_PROMPT,
)

__all__ = [
    "TUTOR_SYSTEM_PROMPT",
    "JSON_SYSTEM_PROMPT",
    "QUIZ_RESPONSE_SCHEMA",
    "THEORY_GRADING_SCHEMA",
    "EXPLAIN_TOPIC_PROMPT",
    "QUIZ_GENERATION_PROMPT",
    "THEORY_GRADING_PROMPT",
    "FEEDBACK_PROMPT",
    "FEEDBACK_ANSWER_LINE",
]
