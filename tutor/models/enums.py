"""Tutor Enums - Tipos de questao, etapas de correcao e faixas de desempenho."""

from enum import Enum


class QuestionType(str, Enum):
    """Tipos de questao aceitos no quiz."""

    MULTIPLE_CHOICE = "multiple-choice"  # 4 alternativas, correcao local
    THEORY = "theory"  # Resposta aberta, corrigida pelo servico


class GradingStage(str, Enum):
    """Rotulos de progresso exibidos durante a submissao."""

    MULTIPLE_CHOICE = "Grading multiple-choice questions..."
    THEORY = "Grading {count} theory questions with AI..."
    FEEDBACK = "Generating final feedback..."

    def label(self, **kwargs) -> str:
        """Retorna o rotulo formatado."""
        return self.value.format(**kwargs)


class PerformanceBand(str, Enum):
    """Faixas de desempenho usadas na apresentacao do resultado."""

    HIGH = "high"  # >= 80%
    MEDIUM = "medium"  # 50-79%
    LOW = "low"  # <50%
