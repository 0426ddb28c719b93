# =============================================================================
# CONFTEST - Pytest Fixtures Globais
# =============================================================================
# Garante que os modulos da raiz (config, app_state, server, tutor) sejam
# importaveis nos testes
# =============================================================================

import sys
from pathlib import Path

import pytest

# Adicionar root ao path
sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture(autouse=True)
def reset_config_cache():
    """Descarta a configuracao em cache entre testes."""
    import config

    config._config = None
    yield
    config._config = None
