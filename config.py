# =============================================================================
# CONFIGURACAO DO STUDY ASSISTANT
# =============================================================================

import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

logger = logging.getLogger(__name__)

DEFAULT_ALLOWED_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5173",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:5173",
]


class AgentModel(str, Enum):
    """Modelos Claude disponiveis para o tutor."""

    HAIKU = "haiku"  # Rapido e economico
    SONNET = "sonnet"
    OPUS = "opus"  # Melhor qualidade


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Valor invalido para {name}: '{value}', usando {default}")
        return default


@dataclass
class TutorConfig:
    """Configuracao do servico, lida do ambiente.

    Attributes:
        model: Modelo usado pelo servico de raciocinio
        multiple_choice_count: Questoes de multipla escolha por quiz
        theory_count: Questoes teoricas por quiz
        strict_quiz_validation: Rejeitar quizzes fora da estrutura esperada
        agentfs_id: ID do AgentFS que guarda as notas salvas
        log_level: Nivel de log da aplicacao
        allowed_origins: Origens liberadas no CORS
    """

    model: AgentModel = AgentModel.HAIKU
    multiple_choice_count: int = 30
    theory_count: int = 4
    strict_quiz_validation: bool = False
    agentfs_id: str = "study-assistant"
    log_level: str = "INFO"
    allowed_origins: list[str] = field(default_factory=lambda: list(DEFAULT_ALLOWED_ORIGINS))

    @classmethod
    def from_env(cls) -> "TutorConfig":
        """Cria configuracao a partir das variaveis de ambiente."""
        model_name = os.getenv("TUTOR_MODEL", AgentModel.HAIKU.value).lower()
        try:
            model = AgentModel(model_name)
        except ValueError:
            logger.warning(f"Modelo invalido '{model_name}', usando 'haiku' como fallback")
            model = AgentModel.HAIKU

        origins = os.getenv("ALLOWED_ORIGINS")
        allowed_origins = (
            [o.strip() for o in origins.split(",") if o.strip()]
            if origins
            else list(DEFAULT_ALLOWED_ORIGINS)
        )

        return cls(
            model=model,
            multiple_choice_count=_env_int("TUTOR_MC_QUESTIONS", 30),
            theory_count=_env_int("TUTOR_THEORY_QUESTIONS", 4),
            strict_quiz_validation=_env_bool("TUTOR_STRICT_QUIZ_VALIDATION", False),
            agentfs_id=os.getenv("TUTOR_AGENTFS_ID", "study-assistant"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            allowed_origins=allowed_origins,
        )

    @property
    def total_questions(self) -> int:
        return self.multiple_choice_count + self.theory_count

    def to_dict(self) -> dict[str, Any]:
        return {
            "model": self.model.value,
            "quiz": {
                "multiple_choice": self.multiple_choice_count,
                "theory": self.theory_count,
                "strict_validation": self.strict_quiz_validation,
            },
            "storage": {"agentfs_id": self.agentfs_id},
            "log_level": self.log_level,
        }


_config: Optional[TutorConfig] = None


def get_config() -> TutorConfig:
    """Retorna a configuracao (instancia unica)."""
    global _config
    if _config is None:
        _config = TutorConfig.from_env()
    return _config


def reload_config() -> TutorConfig:
    """Rele o ambiente e substitui a instancia atual."""
    global _config
    _config = TutorConfig.from_env()
    return _config
