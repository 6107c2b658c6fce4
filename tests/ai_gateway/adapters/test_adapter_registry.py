"""
Tests for building the provider-to-adapter map.
"""
import pytest

from ai_gateway.adapters import ADAPTER_CLASSES, AnthropicAdapter, GeminiAdapter, OpenAIAdapter, create_adapters
from ai_gateway.core.models.modelspec import Provider
from ai_gateway.errors import ConfigurationError


def test_every_provider_has_an_adapter_class():
    assert set(ADAPTER_CLASSES) == set(Provider)
    for provider, adapter_class in ADAPTER_CLASSES.items():
        assert adapter_class.provider is provider


def test_create_adapters_with_all_keys(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "g")
    monkeypatch.setenv("OPENAI_API_KEY", "o")
    monkeypatch.setenv("ANTHROPIC_API_KEY", "a")

    adapters = create_adapters(set(Provider))

    assert isinstance(adapters[Provider.GEMINI], GeminiAdapter)
    assert isinstance(adapters[Provider.OPENAI], OpenAIAdapter)
    assert isinstance(adapters[Provider.ANTHROPIC], AnthropicAdapter)


def test_missing_key_for_any_provider_fails(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "g")
    monkeypatch.setenv("OPENAI_API_KEY", "o")
    with pytest.raises(ConfigurationError, match="Anthropic"):
        create_adapters(set(Provider))


def test_key_variable_overrides(monkeypatch):
    monkeypatch.setenv("MY_GEMINI_KEY", "g")
    adapters = create_adapters([Provider.GEMINI], api_key_env={Provider.GEMINI: "MY_GEMINI_KEY"})
    assert adapters[Provider.GEMINI].api_key_env == "MY_GEMINI_KEY"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
