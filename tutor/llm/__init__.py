"""Tutor LLM - Cliente do servico de raciocinio."""

from .client import ReasoningClient
from .factory import LLMClientFactory

__all__ = ["LLMClientFactory", "ReasoningClient"]
