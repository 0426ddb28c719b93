"""Reasoning Client - Chamadas ao servico de raciocinio via Claude Agent SDK.

Cada operacao faz exatamente uma rodada com o servico e devolve dados
tipados ou levanta ServiceError, seja qual for a falha do SDK, do parsing
ou da validacao. Nao ha retry, cache nem streaming: a chamada e
tudo-ou-nada.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import AsyncIterator, Callable
from typing import Any, TypeVar

from claude_agent_sdk import (
    AssistantMessage,
    ClaudeAgentOptions,
    ResultMessage,
    TextBlock,
)
from claude_agent_sdk import query as sdk_query
from pydantic import BaseModel

from ..exceptions import ServiceError
from ..models.schemas import (
    Quiz,
    QuizResult,
    Student,
    TheoryGrade,
    TheoryGradingItem,
    TheoryGradingResponse,
)
from ..prompts import (
    EXPLAIN_TOPIC_PROMPT,
    FEEDBACK_ANSWER_LINE,
    FEEDBACK_PROMPT,
    QUIZ_GENERATION_PROMPT,
    QUIZ_RESPONSE_SCHEMA,
    THEORY_GRADING_PROMPT,
    THEORY_GRADING_SCHEMA,
)
from .factory import LLMClientFactory

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

QueryFn = Callable[..., AsyncIterator[Any]]


class ReasoningClient:
    """Cliente do servico de raciocinio usado pelo tutor.

    Operacoes:
        - explain_topic: explicacao em texto livre
        - generate_quiz: quiz estruturado (titulo + questoes)
        - grade_theory_answers: correcao em lote das questoes teoricas
        - generate_feedback: feedback narrativo a partir do resultado

    Example:
        >>> client = ReasoningClient()
        >>> quiz = await client.generate_quiz("Photosynthesis...", student, 30, 4)
    """

    EXPLAIN_ERROR = "Failed to fetch explanation from AI service. Please try again."
    QUIZ_ERROR = "Failed to generate quiz from AI service. Please try again."
    GRADING_ERROR = "Failed to grade theory answers from AI service."
    FEEDBACK_ERROR = "Failed to generate feedback from AI service."

    def __init__(
        self,
        llm_factory: LLMClientFactory | None = None,
        query_fn: QueryFn | None = None,
    ):
        self.llm_factory = llm_factory or LLMClientFactory()
        self._query = query_fn or sdk_query

    # =========================================================================
    # OPERACOES
    # =========================================================================

    async def explain_topic(self, topic: str) -> str:
        """Gera explicacao de um topico para o aluno."""
        prompt = EXPLAIN_TOPIC_PROMPT.format(topic=topic)
        try:
            return await self._complete(prompt, self.llm_factory.create_explanation_options())
        except Exception as e:
            logger.error(f"Erro ao buscar explicacao do topico: {e}")
            raise ServiceError(self.EXPLAIN_ERROR) from e

    async def generate_quiz(
        self,
        topic_content: str,
        student: Student,
        multiple_choice_count: int,
        theory_count: int,
    ) -> Quiz:
        """Gera quiz misto sobre o conteudo informado.

        `options` so e exigido nas questoes de multipla escolha; a resposta
        e devolvida como veio, sem checar composicao nem alternativas.
        """
        prompt = QUIZ_GENERATION_PROMPT.format(
            student_name=student.name,
            mc_count=multiple_choice_count,
            theory_count=theory_count,
            content=topic_content,
            schema=json.dumps(QUIZ_RESPONSE_SCHEMA, indent=2),
        )
        try:
            return await self._complete_model(
                prompt, self.llm_factory.create_quiz_options(), Quiz
            )
        except Exception as e:
            logger.error(f"Erro ao gerar quiz: {e}")
            raise ServiceError(self.QUIZ_ERROR) from e

    async def grade_theory_answers(self, items: list[TheoryGradingItem]) -> list[TheoryGrade]:
        """Corrige um lote de respostas teoricas.

        Contrato posicional com o servico: results[i] corrige items[i]. Nao
        existe chave de correlacao, entao uma resposta com tamanho diferente
        do lote e tratada como malformada.

        Args:
            items: Respostas a corrigir, na ordem de coleta

        Returns:
            Correcoes na mesma ordem e quantidade de `items`
        """
        if not items:
            return []

        answers = json.dumps([item.model_dump(by_alias=True) for item in items], indent=2)
        prompt = THEORY_GRADING_PROMPT.format(
            count=len(items),
            answers=answers,
            schema=json.dumps(THEORY_GRADING_SCHEMA, indent=2),
        )
        try:
            response = await self._complete_model(
                prompt, self.llm_factory.create_grading_options(), TheoryGradingResponse
            )
            if len(response.results) != len(items):
                raise ServiceError(
                    f"Esperado {len(items)} correcoes, recebido {len(response.results)}"
                )
            return response.results
        except Exception as e:
            logger.error(f"Erro ao corrigir respostas teoricas: {e}")
            raise ServiceError(self.GRADING_ERROR) from e

    async def generate_feedback(self, result: QuizResult) -> str:
        """Gera feedback narrativo e personalizado para o resultado."""
        prompt = self.build_feedback_prompt(result)
        try:
            return await self._complete(prompt, self.llm_factory.create_feedback_options())
        except Exception as e:
            logger.error(f"Erro ao gerar feedback: {e}")
            raise ServiceError(self.FEEDBACK_ERROR) from e

    @staticmethod
    def build_feedback_prompt(result: QuizResult) -> str:
        """Monta o prompt de feedback com nome, titulo, nota e acertos."""
        lines = []
        for answer in result.answers:
            if answer.is_correct:
                verdict = "Correct"
            else:
                verdict = f'Incorrect, correct answer was "{answer.correct_answer}"'
            lines.append(
                FEEDBACK_ANSWER_LINE.format(
                    question=answer.question_text,
                    selected=answer.selected_answer,
                    verdict=verdict,
                )
            )

        return FEEDBACK_PROMPT.format(
            student_name=result.student.name,
            quiz_title=result.quiz_title,
            score=result.score,
            total=result.total_questions,
            answer_lines="\n".join(lines),
        )

    # =========================================================================
    # TRANSPORTE E PARSING
    # =========================================================================

    async def _complete(self, prompt: str, options: ClaudeAgentOptions) -> str:
        """Executa uma rodada e concatena o texto da resposta."""
        text = ""

        async for message in self._query(prompt=prompt, options=options):
            if isinstance(message, AssistantMessage):
                for block in message.content:
                    if isinstance(block, TextBlock):
                        text += block.text
            elif isinstance(message, ResultMessage) and message.is_error:
                raise ServiceError(f"Servico retornou erro: {message.result or message.subtype}")

        text = text.strip()
        if not text:
            raise ServiceError("Resposta vazia do servico")

        return text

    async def _complete_model(
        self, prompt: str, options: ClaudeAgentOptions, model_cls: type[ModelT]
    ) -> ModelT:
        """Executa uma rodada e valida o JSON da resposta no modelo informado."""
        text = await self._complete(prompt, options)
        data = self._extract_json(text)
        return model_cls.model_validate(data)

    @staticmethod
    def _extract_json(text: str) -> dict[str, Any]:
        """Extrai objeto JSON da resposta.

        Aceita JSON puro, bloco markdown ```json``` ou JSON com texto ao redor.

        Raises:
            json.JSONDecodeError: Se nao houver JSON valido
        """
        text = text.strip()

        match = re.search(r"```(?:json)?\s*(.*?)```", text, re.DOTALL)
        if match:
            text = match.group(1).strip()

        start = text.find("{")
        end = text.rfind("}")
        if start != -1 and end > start:
            text = text[start : end + 1]

        return json.loads(text)
