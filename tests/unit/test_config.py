# =============================================================================
# TESTES - Config Module
# =============================================================================
# Testes unitários para configuração centralizada
# =============================================================================

import os
from unittest.mock import patch


class TestAgentModel:
    """Testes para AgentModel enum."""

    def test_all_models_exist(self):
        """Verifica modelos disponiveis."""
        from config import AgentModel

        assert AgentModel.HAIKU.value == "haiku"
        assert AgentModel.SONNET.value == "sonnet"
        assert AgentModel.OPUS.value == "opus"


class TestTutorConfig:
    """Testes para TutorConfig dataclass."""

    def test_from_env_defaults(self):
        """Verifica valores padrão do from_env."""
        from config import AgentModel, TutorConfig

        with patch.dict(os.environ, {}, clear=True):
            config = TutorConfig.from_env()

        assert config.model == AgentModel.HAIKU
        assert config.multiple_choice_count == 30
        assert config.theory_count == 4
        assert config.total_questions == 34
        assert config.strict_quiz_validation is False
        assert config.agentfs_id == "study-assistant"
        assert config.log_level == "INFO"
        assert "http://localhost:3000" in config.allowed_origins

    def test_from_env_custom_values(self):
        """Verifica valores customizados via env vars."""
        from config import AgentModel, TutorConfig

        env_vars = {
            "TUTOR_MODEL": "sonnet",
            "TUTOR_MC_QUESTIONS": "10",
            "TUTOR_THEORY_QUESTIONS": "2",
            "TUTOR_AGENTFS_ID": "notes-test",
            "LOG_LEVEL": "debug",
            "ALLOWED_ORIGINS": "http://a.test, http://b.test",
        }

        with patch.dict(os.environ, env_vars, clear=True):
            config = TutorConfig.from_env()

        assert config.model == AgentModel.SONNET
        assert config.multiple_choice_count == 10
        assert config.theory_count == 2
        assert config.agentfs_id == "notes-test"
        assert config.log_level == "DEBUG"
        assert config.allowed_origins == ["http://a.test", "http://b.test"]

    def test_to_dict_structure(self):
        """Verifica estrutura do to_dict."""
        from config import TutorConfig

        data = TutorConfig().to_dict()

        assert data["model"] == "haiku"
        assert data["quiz"]["multiple_choice"] == 30
        assert data["quiz"]["theory"] == 4
        assert "strict_validation" in data["quiz"]
        assert data["storage"]["agentfs_id"] == "study-assistant"


class TestGetConfig:
    """Testes para get_config singleton."""

    def test_returns_same_instance(self):
        """Verifica singleton retorna mesma instância."""
        from config import get_config

        assert get_config() is get_config()

    def test_reload_creates_new_instance(self):
        """Verifica reload cria nova instância."""
        from config import get_config, reload_config

        config1 = get_config()
        config2 = reload_config()

        assert config1 is not config2
        assert get_config() is config2


class TestConfigValidation:
    """Testes de validação de configuração."""

    def test_invalid_model_falls_back(self):
        """Verifica fallback para modelo inválido."""
        from config import AgentModel, TutorConfig

        with patch.dict(os.environ, {"TUTOR_MODEL": "gpt-4"}, clear=True):
            config = TutorConfig.from_env()

        assert config.model == AgentModel.HAIKU

    def test_invalid_number_falls_back(self):
        """Verifica fallback para número inválido."""
        from config import TutorConfig

        with patch.dict(os.environ, {"TUTOR_MC_QUESTIONS": "many"}, clear=True):
            config = TutorConfig.from_env()

        assert config.multiple_choice_count == 30

    def test_boolean_env_vars_parsed(self):
        """Verifica parsing de booleanos das env vars."""
        from config import TutorConfig

        with patch.dict(os.environ, {"TUTOR_STRICT_QUIZ_VALIDATION": "true"}, clear=True):
            assert TutorConfig.from_env().strict_quiz_validation is True

        with patch.dict(os.environ, {"TUTOR_STRICT_QUIZ_VALIDATION": "false"}, clear=True):
            assert TutorConfig.from_env().strict_quiz_validation is False

        # Case insensitive
        with patch.dict(os.environ, {"TUTOR_STRICT_QUIZ_VALIDATION": "TRUE"}, clear=True):
            assert TutorConfig.from_env().strict_quiz_validation is True
