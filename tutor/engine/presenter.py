"""Result Presenter - Adapta o QuizResult para exibicao."""

from ..models.enums import QuestionType
from ..models.schemas import QuizResult, ResultRow, ResultView
from .scoring_engine import QuizScoringEngine

NOT_ANSWERED = "Not answered"


class ResultPresenter:
    """Monta a visao de resultado consumida pela interface."""

    def __init__(self, scoring: QuizScoringEngine | None = None):
        self.scoring = scoring or QuizScoringEngine()

    def build(self, result: QuizResult, feedback_pending: bool = False) -> ResultView:
        percentage = self.scoring.calculate_percentage(result.score, result.total_questions)

        rows = [
            ResultRow(
                number=number,
                question_text=answer.question_text,
                question_type=answer.question_type,
                selected_answer=answer.selected_answer or NOT_ANSWERED,
                correct_answer=answer.correct_answer,
                is_correct=answer.is_correct,
                # Feedback por questao so existe nas teoricas
                feedback=answer.feedback if answer.question_type == QuestionType.THEORY else None,
            )
            for number, answer in enumerate(result.answers, start=1)
        ]

        return ResultView(
            student_name=result.student.name,
            quiz_title=result.quiz_title,
            score=result.score,
            total_questions=result.total_questions,
            percentage=percentage,
            band=self.scoring.calculate_band(percentage),
            feedback=result.feedback,
            feedback_pending=feedback_pending,
            rows=rows,
            result=result,
        )
