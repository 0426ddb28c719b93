"""Tutor Exceptions - Erros do fluxo de quiz."""


class TutorError(Exception):
    """Erro base do modulo tutor."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ServiceError(TutorError):
    """Falha no servico de raciocinio (transporte, parsing ou erro do servico).

    Sempre carrega uma mensagem legivel para o usuario. Nao distingue falhas
    transitorias de permanentes: toda ocorrencia encerra a tentativa atual.
    """


class QuizValidationError(ServiceError):
    """Quiz gerado nao respeita a estrutura esperada (modo estrito)."""

    def __init__(self, message: str, issues: list[str]):
        super().__init__(message)
        self.issues = issues


class SubmissionInProgressError(TutorError):
    """Ja existe uma submissao em andamento para esta sessao."""


class QuizGenerationInProgressError(TutorError):
    """Um novo quiz esta sendo gerado para esta sessao."""


class QuizNotReadyError(TutorError):
    """A sessao ainda nao tem quiz instalado."""
