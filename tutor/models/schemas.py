"""Tutor Schemas - Modelos Pydantic do dominio e de request/response.

Os nomes em JSON seguem o formato camelCase trocado com o servico de
raciocinio (questionText, correctAnswer, ...). Em Python os atributos sao
snake_case; ambos os formatos sao aceitos na entrada.
"""

import uuid

from pydantic import BaseModel, ConfigDict, Field

from .enums import PerformanceBand, QuestionType


class TutorModel(BaseModel):
    """Base com suporte a alias camelCase."""

    model_config = ConfigDict(populate_by_name=True)


# =============================================================================
# DOMINIO
# =============================================================================


class Student(TutorModel):
    """Aluno da sessao. Criado uma vez e imutavel."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str = Field(default_factory=lambda: uuid.uuid4().hex, description="Identificador opaco")
    name: str = Field(..., min_length=1, description="Nome do aluno")


class Question(TutorModel):
    """Questao do quiz.

    `options` so existe para multipla escolha; respostas do servico que
    omitem o campo em questoes teoricas sao aceitas.
    """

    question_text: str = Field(..., alias="questionText", description="Enunciado")
    question_type: QuestionType = Field(..., alias="questionType", description="Tipo da questao")
    options: list[str] | None = Field(
        default=None, description="4 alternativas (apenas multiple-choice)"
    )
    correct_answer: str = Field(
        ...,
        alias="correctAnswer",
        description="Alternativa correta (MC) ou resposta de referencia (teoria)",
    )

    @property
    def is_multiple_choice(self) -> bool:
        return self.question_type == QuestionType.MULTIPLE_CHOICE


class Quiz(TutorModel):
    """Quiz gerado. A ordem das questoes e o indice canonico."""

    title: str = Field(..., description="Titulo do quiz")
    questions: list[Question] = Field(..., description="Questoes em ordem")


class Answer(TutorModel):
    """Resposta corrigida, uma por questao, na ordem do quiz."""

    question_text: str = Field(..., alias="questionText")
    question_type: QuestionType = Field(..., alias="questionType")
    selected_answer: str = Field(..., alias="selectedAnswer")
    correct_answer: str = Field(..., alias="correctAnswer")
    is_correct: bool = Field(default=False, alias="isCorrect")
    feedback: str | None = Field(default=None, description="Feedback (teoria)")


class QuizResult(TutorModel):
    """Resultado do quiz, entregue preliminar e depois com feedback."""

    student: Student
    quiz_title: str = Field(..., alias="quizTitle")
    score: int = Field(..., ge=0, description="Acertos (MC + teoria)")
    total_questions: int = Field(..., alias="totalQuestions")
    answers: list[Answer] = Field(..., description="Respostas na ordem do quiz")
    feedback: str = Field(..., description="Feedback narrativo ou placeholder")


class TheoryGradingItem(TutorModel):
    """Item enviado ao servico para correcao de uma questao teorica."""

    question_text: str = Field(..., alias="questionText")
    ideal_answer: str = Field(..., alias="idealAnswer")
    user_answer: str = Field(..., alias="userAnswer")


class PendingTheoryAnswer(TutorModel):
    """Questao teorica aguardando correcao, com o indice original no quiz."""

    original_index: int = Field(..., ge=0, description="Posicao no quiz")
    item: TheoryGradingItem


class TheoryGrade(TutorModel):
    """Correcao de uma questao teorica devolvida pelo servico."""

    is_correct: bool = Field(..., alias="isCorrect")
    feedback: str = Field(..., description="Justificativa da correcao")


class TheoryGradingResponse(TutorModel):
    """Envelope da resposta de correcao em lote."""

    results: list[TheoryGrade]


class SavedNote(TutorModel):
    """Nota salva localmente (titulo unico, sem diferenciar maiusculas)."""

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    title: str
    content: str


# =============================================================================
# REQUEST / RESPONSE
# =============================================================================


class CreateSessionRequest(TutorModel):
    """Request para iniciar sessao de estudo."""

    name: str = Field(..., description="Nome do aluno")


class ExplainTopicRequest(TutorModel):
    """Request para explicacao de um topico."""

    topic: str = Field(..., description="Topico a ser explicado")


class TopicContentRequest(TutorModel):
    """Request para definir o conteudo base do quiz manualmente."""

    content: str


class AnswerRequest(TutorModel):
    """Request para registrar resposta de uma questao."""

    value: str = Field(..., description="Alternativa escolhida ou texto livre")


class SaveNoteRequest(TutorModel):
    """Request para salvar nota."""

    title: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)


class SessionResponse(TutorModel):
    """Snapshot da sessao."""

    session_id: str = Field(..., alias="sessionId")
    student: Student
    topic_content: str = Field(default="", alias="topicContent")
    quiz: Quiz | None = None
    answered_count: int = Field(default=0, alias="answeredCount")
    complete: bool = False
    status: str = ""
    submitting: bool = False
    generating: bool = False


class ResultRow(TutorModel):
    """Linha de exibicao de uma resposta."""

    number: int = Field(..., description="Numero da questao (1-N)")
    question_text: str = Field(..., alias="questionText")
    question_type: QuestionType = Field(..., alias="questionType")
    selected_answer: str = Field(..., alias="selectedAnswer")
    correct_answer: str = Field(..., alias="correctAnswer")
    is_correct: bool = Field(..., alias="isCorrect")
    feedback: str | None = None


class ResultView(TutorModel):
    """Resultado pronto para apresentacao."""

    student_name: str = Field(..., alias="studentName")
    quiz_title: str = Field(..., alias="quizTitle")
    score: int
    total_questions: int = Field(..., alias="totalQuestions")
    percentage: int = Field(..., description="Percentual arredondado (0-100)")
    band: PerformanceBand
    feedback: str
    feedback_pending: bool = Field(default=False, alias="feedbackPending")
    rows: list[ResultRow]
    result: QuizResult
