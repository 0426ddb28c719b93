"""Quiz Builder - Montagem do quiz misto a partir do conteudo do topico."""

import logging

from config import TutorConfig, get_config

from ..exceptions import QuizValidationError
from ..llm.client import ReasoningClient
from ..models.enums import QuestionType
from ..models.schemas import Quiz, Student

logger = logging.getLogger(__name__)


class QuizBuilder:
    """Gera quizzes com composicao fixa de multipla escolha + teoria.

    O quiz devolvido pelo servico e aceito como veio. Depois da geracao a
    estrutura e inspecionada: por padrao os problemas so viram warnings no
    log; com `strict_quiz_validation` o quiz e rejeitado.

    Example:
        >>> builder = QuizBuilder(ReasoningClient())
        >>> quiz = await builder.generate_quiz(notes, student)
        >>> len(quiz.questions)
        34
    """

    OPTIONS_PER_QUESTION = 4

    def __init__(self, client: ReasoningClient, config: TutorConfig | None = None):
        self.client = client
        self.config = config or get_config()

    async def generate_quiz(self, topic_content: str, student: Student) -> Quiz:
        """Gera quiz para o aluno com base no conteudo.

        Args:
            topic_content: Notas do topico (nao vazio)
            student: Aluno da sessao

        Returns:
            Quiz gerado

        Raises:
            ValueError: Se o conteudo estiver vazio
            ServiceError: Se o servico falhar
            QuizValidationError: Se a estrutura for invalida em modo estrito
        """
        if not topic_content or not topic_content.strip():
            raise ValueError("Conteudo do topico vazio")

        quiz = await self.client.generate_quiz(
            topic_content,
            student,
            self.config.multiple_choice_count,
            self.config.theory_count,
        )

        issues = self.inspect_quiz(quiz)
        if issues:
            if self.config.strict_quiz_validation:
                logger.error(f"Quiz rejeitado ({len(issues)} problemas): {issues}")
                raise QuizValidationError(
                    "The generated quiz was malformed. Please try again.", issues
                )
            for issue in issues:
                logger.warning(f"Quiz '{quiz.title}': {issue}")

        logger.info(
            f"Quiz gerado para {student.name}: '{quiz.title}' ({len(quiz.questions)} questoes)"
        )
        return quiz

    def inspect_quiz(self, quiz: Quiz) -> list[str]:
        """Lista problemas de estrutura do quiz.

        Verifica a composicao (MC + teoria), o numero de alternativas e se a
        resposta correta de cada multipla escolha esta entre as alternativas.
        """
        issues = []

        mc_count = sum(1 for q in quiz.questions if q.question_type == QuestionType.MULTIPLE_CHOICE)
        theory_count = len(quiz.questions) - mc_count

        if mc_count != self.config.multiple_choice_count:
            issues.append(
                f"esperado {self.config.multiple_choice_count} questoes de multipla escolha, recebido {mc_count}"
            )
        if theory_count != self.config.theory_count:
            issues.append(
                f"esperado {self.config.theory_count} questoes teoricas, recebido {theory_count}"
            )

        for index, question in enumerate(quiz.questions, start=1):
            if not question.is_multiple_choice:
                continue
            options = question.options or []
            if len(options) != self.OPTIONS_PER_QUESTION:
                issues.append(f"questao {index}: {len(options)} alternativas")
            if question.correct_answer not in options:
                issues.append(f"questao {index}: resposta correta fora das alternativas")

        return issues
