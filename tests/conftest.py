import os
import sys

import pytest

# Allow running the suite from a checkout without installing the package
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from ai_gateway.core.models.catalog import ModelCatalog
from ai_gateway.logging import LoggerRegistry, MemoryLogger

API_KEY_VARIABLES = ("GEMINI_API_KEY", "OPENAI_API_KEY", "ANTHROPIC_API_KEY", "AI_GATEWAY_CONFIG", "AI_GATEWAY_LOG_LEVEL")


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Tests never see real keys or gateway settings from the developer's shell."""
    for name in API_KEY_VARIABLES:
        monkeypatch.delenv(name, raising=False)
    yield
    LoggerRegistry.reset()


@pytest.fixture
def memory_logger():
    logger = MemoryLogger()
    with LoggerRegistry.use(logger):
        yield logger


@pytest.fixture(scope="session")
def catalog():
    return ModelCatalog.from_yaml()
