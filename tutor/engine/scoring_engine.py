"""Quiz Scoring Engine - Correcao local, reinsercao das notas teoricas e faixas."""

from collections.abc import Mapping
from dataclasses import dataclass, field

from ..models.enums import PerformanceBand
from ..models.schemas import (
    Answer,
    PendingTheoryAnswer,
    Question,
    TheoryGrade,
    TheoryGradingItem,
)


@dataclass
class LocalGrading:
    """Resultado da passada local de correcao.

    Attributes:
        answers: Respostas na ordem do quiz (teoricas com isCorrect=False provisorio)
        score: Acertos de multipla escolha
        pending: Questoes teoricas a corrigir, com o indice original
    """

    answers: list[Answer] = field(default_factory=list)
    score: int = 0
    pending: list[PendingTheoryAnswer] = field(default_factory=list)


class QuizScoringEngine:
    """Motor de pontuacao do quiz.

    Multipla escolha e corrigida localmente por igualdade exata de texto
    (diferencia maiusculas). Questoes teoricas ficam na fila ate que o
    servico devolva as notas, que sao reinseridas pela posicao original.

    Faixas de desempenho:
        - >=80%: HIGH
        - 50-79%: MEDIUM
        - <50%: LOW

    Example:
        >>> engine = QuizScoringEngine()
        >>> grading = engine.grade_local(quiz.questions, {0: "B", 1: "C"})
        >>> grading.score
        1
    """

    # Faixas de desempenho (threshold, band)
    BAND_THRESHOLDS = [
        (80, PerformanceBand.HIGH),
        (50, PerformanceBand.MEDIUM),
        (0, PerformanceBand.LOW),
    ]

    def grade_answer(self, question: Question, selected_answer: str) -> Answer:
        """Monta a resposta corrigida de uma questao.

        Questoes teoricas voltam com isCorrect=False ate a correcao remota.
        """
        is_correct = False
        if question.is_multiple_choice:
            is_correct = selected_answer == question.correct_answer

        return Answer(
            question_text=question.question_text,
            question_type=question.question_type,
            selected_answer=selected_answer,
            correct_answer=question.correct_answer,
            is_correct=is_correct,
        )

    def grade_local(self, questions: list[Question], answers: Mapping[int, str]) -> LocalGrading:
        """Corrige a multipla escolha e enfileira as teoricas.

        Args:
            questions: Questoes na ordem do quiz
            answers: Respostas por indice (ausente = string vazia)

        Returns:
            LocalGrading com respostas ordenadas, acertos e fila teorica
        """
        grading = LocalGrading()

        for index, question in enumerate(questions):
            selected = answers.get(index, "")
            answer = self.grade_answer(question, selected)

            if question.is_multiple_choice:
                if answer.is_correct:
                    grading.score += 1
            else:
                grading.pending.append(
                    PendingTheoryAnswer(
                        original_index=index,
                        item=TheoryGradingItem(
                            question_text=question.question_text,
                            ideal_answer=question.correct_answer,
                            user_answer=selected,
                        ),
                    )
                )

            grading.answers.append(answer)

        return grading

    def apply_theory_grades(
        self,
        answers: list[Answer],
        pending: list[PendingTheoryAnswer],
        grades: list[TheoryGrade],
    ) -> int:
        """Reinsere as notas teoricas nas posicoes originais.

        grades[i] corresponde a pending[i]; o slot atualizado e
        pending[i].original_index, nao a posicao no lote.

        Args:
            answers: Respostas completas (atualizadas no lugar)
            pending: Fila enviada ao servico
            grades: Notas devolvidas, na ordem da fila

        Returns:
            Numero de respostas teoricas corretas
        """
        if len(pending) != len(grades):
            raise ValueError(
                f"Numero de notas ({len(grades)}) diferente do numero de questoes teoricas ({len(pending)})"
            )

        correct = 0
        for entry, grade in zip(pending, grades):
            index = entry.original_index
            answers[index] = answers[index].model_copy(
                update={"is_correct": grade.is_correct, "feedback": grade.feedback}
            )
            if grade.is_correct:
                correct += 1

        return correct

    def calculate_score(self, answers: list[Answer]) -> int:
        """Conta respostas corretas."""
        return sum(1 for answer in answers if answer.is_correct)

    def calculate_percentage(self, score: int, total: int) -> int:
        """Percentual arredondado de acerto (0 quando nao ha questoes)."""
        if total <= 0:
            return 0
        return round(score / total * 100)

    def calculate_band(self, percentage: float) -> PerformanceBand:
        """Calcula a faixa de desempenho pelo percentual."""
        for threshold, band in self.BAND_THRESHOLDS:
            if percentage >= threshold:
                return band

        return self.BAND_THRESHOLDS[-1][1]
