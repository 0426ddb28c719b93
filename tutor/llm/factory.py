"""LLM Client Factory - Opcoes do Claude Agent SDK por operacao do tutor."""

from claude_agent_sdk import ClaudeAgentOptions

from config import AgentModel, get_config

from ..prompts import JSON_SYSTEM_PROMPT, TUTOR_SYSTEM_PROMPT


class LLMClientFactory:
    """Factory para criar ClaudeAgentOptions com diferentes configuracoes.

    Centraliza a configuracao das chamadas ao servico de raciocinio:
    - System prompt por tipo de resposta (texto livre ou JSON)
    - Selecao de modelo (HAIKU para velocidade, OPUS para qualidade)
    - Uma unica rodada, sem ferramentas

    Example:
        >>> factory = LLMClientFactory()
        >>> options = factory.create_quiz_options()
        >>> async for message in query(prompt="...", options=options): ...
    """

    DEFAULT_MODEL = AgentModel.HAIKU  # Rapido e economico
    QUALITY_MODEL = AgentModel.OPUS  # Melhor qualidade

    def __init__(self, model: AgentModel | None = None):
        self.model = model or get_config().model

    def create_options(self, system_prompt: str) -> ClaudeAgentOptions:
        """Cria opcoes genericas para uma chamada de uma rodada.

        Args:
            system_prompt: Prompt de sistema da chamada

        Returns:
            ClaudeAgentOptions configurado
        """
        return ClaudeAgentOptions(
            model=self.model.value,
            system_prompt=system_prompt,
            max_turns=1,
            allowed_tools=[],
        )

    def create_explanation_options(self) -> ClaudeAgentOptions:
        """Opcoes para explicacao de topico (texto livre)."""
        return self.create_options(TUTOR_SYSTEM_PROMPT)

    def create_quiz_options(self) -> ClaudeAgentOptions:
        """Opcoes para geracao de quiz (JSON)."""
        return self.create_options(JSON_SYSTEM_PROMPT)

    def create_grading_options(self) -> ClaudeAgentOptions:
        """Opcoes para correcao das questoes teoricas (JSON)."""
        return self.create_options(JSON_SYSTEM_PROMPT)

    def create_feedback_options(self) -> ClaudeAgentOptions:
        """Opcoes para o feedback narrativo (texto livre)."""
        return self.create_options(TUTOR_SYSTEM_PROMPT)
