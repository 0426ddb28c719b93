# =============================================================================
# CONFTEST - Fixtures compartilhadas para todos os testes
# =============================================================================
# Centraliza mocks, fixtures e configurações comuns
# =============================================================================

import os
from unittest.mock import AsyncMock, MagicMock, patch

import pytest


# =============================================================================
# FIXTURES DE AMBIENTE
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Configura ambiente de testes globalmente."""
    env_vars = {
        "LOG_LEVEL": "ERROR",  # Reduzir logs em testes
        "TUTOR_MODEL": "haiku",
    }
    with patch.dict(os.environ, env_vars):
        yield


# =============================================================================
# FIXTURES DO AGENTFS
# =============================================================================


@pytest.fixture
def mock_agentfs():
    """Mock do AgentFS com KV vazio."""
    mock = MagicMock()

    mock.kv = AsyncMock()
    mock.kv.get = AsyncMock(return_value=None)
    mock.kv.set = AsyncMock()
    mock.kv.delete = AsyncMock()
    mock.kv.list = AsyncMock(return_value=[])

    mock.close = AsyncMock()

    return mock


@pytest.fixture
def mock_agentfs_with_data():
    """Mock do AgentFS com KV em memória."""
    mock = MagicMock()
    _storage = {}

    async def mock_get(key):
        return _storage.get(key)

    async def mock_set(key, value):
        _storage[key] = value

    async def mock_delete(key):
        _storage.pop(key, None)

    async def mock_list(prefix=""):
        return [{"key": k} for k in _storage if k.startswith(prefix)]

    mock.kv = AsyncMock()
    mock.kv.get = mock_get
    mock.kv.set = mock_set
    mock.kv.delete = mock_delete
    mock.kv.list = mock_list
    mock._storage = _storage

    mock.close = AsyncMock()

    return mock


# =============================================================================
# FIXTURES DO SERVICO DE RACIOCINIO
# =============================================================================


@pytest.fixture
def mock_reasoning_client():
    """Mock do ReasoningClient (todas as operações assíncronas)."""
    from tutor.llm.client import ReasoningClient

    mock = MagicMock(spec=ReasoningClient)
    mock.explain_topic = AsyncMock(return_value="Photosynthesis converts light into chemical energy.")
    mock.generate_quiz = AsyncMock()
    mock.grade_theory_answers = AsyncMock(return_value=[])
    mock.generate_feedback = AsyncMock(return_value="Great work, keep it up!")

    return mock


@pytest.fixture
def make_sdk_stream():
    """Factory para simular o stream de mensagens do Claude Agent SDK."""
    from claude_agent_sdk import AssistantMessage, ResultMessage, TextBlock

    def _make(*texts: str, is_error: bool = False):
        messages = [
            AssistantMessage(content=[TextBlock(text=text)], model="claude-haiku-4-5")
            for text in texts
        ]
        messages.append(
            ResultMessage(
                subtype="error_during_execution" if is_error else "success",
                duration_ms=10,
                duration_api_ms=8,
                is_error=is_error,
                num_turns=1,
                session_id="test-session",
                result="boom" if is_error else None,
            )
        )

        def query_fn(prompt, options):
            async def _gen():
                for message in messages:
                    yield message

            query_fn.calls.append({"prompt": prompt, "options": options})
            return _gen()

        query_fn.calls = []
        return query_fn

    return _make


# =============================================================================
# FIXTURES DO QUIZ
# =============================================================================


@pytest.fixture
def student():
    """Aluno de exemplo."""
    from tutor.models.schemas import Student

    return Student(id="student-1", name="Jane Doe")


@pytest.fixture
def small_quiz():
    """Quiz com 2 MC + 1 teoria (cenário de referência)."""
    from tutor.models.schemas import Quiz

    return Quiz.model_validate(
        {
            "title": "Cell Biology",
            "questions": [
                {
                    "questionText": "Q1",
                    "questionType": "multiple-choice",
                    "options": ["A", "B", "C", "D"],
                    "correctAnswer": "B",
                },
                {
                    "questionText": "Q2",
                    "questionType": "multiple-choice",
                    "options": ["A", "B", "C", "D"],
                    "correctAnswer": "A",
                },
                {
                    "questionText": "What do mitochondria do?",
                    "questionType": "theory",
                    "correctAnswer": "mitochondria produce energy",
                },
            ],
        }
    )


@pytest.fixture
def interleaved_quiz():
    """Quiz com teóricas intercaladas (índices 0, 2 e 4)."""
    from tutor.models.schemas import Quiz

    questions = []
    for i in range(5):
        if i % 2 == 0:
            questions.append(
                {"questionText": f"T{i}", "questionType": "theory", "correctAnswer": f"ideal {i}"}
            )
        else:
            questions.append(
                {
                    "questionText": f"M{i}",
                    "questionType": "multiple-choice",
                    "options": ["w", "x", "y", "z"],
                    "correctAnswer": "x",
                }
            )
    return Quiz.model_validate({"title": "Interleaved", "questions": questions})


@pytest.fixture
def quiz_payload():
    """Resposta JSON de quiz 30 MC + 4 teoria, como devolvida pelo serviço."""
    questions = []
    for i in range(34):
        if i % 9 == 4:
            questions.append(
                {
                    "questionText": f"Explain concept {i}",
                    "questionType": "theory",
                    "correctAnswer": f"Ideal answer {i}",
                }
            )
        else:
            questions.append(
                {
                    "questionText": f"Question {i}?",
                    "questionType": "multiple-choice",
                    "options": ["opt A", "opt B", "opt C", "opt D"],
                    "correctAnswer": "opt C",
                }
            )
    return {"title": "Photosynthesis", "questions": questions}


@pytest.fixture
def full_quiz(quiz_payload):
    """Quiz 30 MC + 4 teoria validado."""
    from tutor.models.schemas import Quiz

    return Quiz.model_validate(quiz_payload)


@pytest.fixture
def session(student, small_quiz):
    """Sessão com o quiz pequeno instalado."""
    from tutor.models.state import QuizSession

    session = QuizSession(student=student)
    session.topic_content = "Cells and mitochondria"
    session.install_quiz(small_quiz)
    return session


@pytest.fixture
def answered_session(session):
    """Sessão com todas as respostas do cenário de referência."""
    session.answers.set_answer(0, "B")
    session.answers.set_answer(1, "C")
    session.answers.set_answer(2, "the mitochondria makes energy for the cell")
    return session


# =============================================================================
# FIXTURES DO FASTAPI
# =============================================================================


@pytest.fixture
def api(mock_reasoning_client, mock_agentfs_with_data):
    """Cliente de teste FastAPI com serviço e AgentFS mockados."""
    from fastapi.testclient import TestClient

    import app_state
    from server import app
    from tutor.engine.grading import GradingOrchestrator
    from tutor.storage.note_store import NoteStore

    app_state.sessions.clear()
    app.dependency_overrides[app_state.get_reasoning_client] = lambda: mock_reasoning_client
    app.dependency_overrides[app_state.get_grading_orchestrator] = lambda: GradingOrchestrator(
        mock_reasoning_client
    )

    async def _note_store():
        return NoteStore(mock_agentfs_with_data)

    app.dependency_overrides[app_state.get_note_store] = _note_store

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()
    app_state.sessions.clear()


# =============================================================================
# FIXTURES DE LOGGING
# =============================================================================


@pytest.fixture
def capture_logs(caplog):
    """Captura logs para verificação em testes."""
    import logging

    caplog.set_level(logging.DEBUG)
    return caplog
