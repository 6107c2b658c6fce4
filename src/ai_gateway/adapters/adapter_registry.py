# adapters/adapter_registry.py
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from ai_gateway.core.models.modelspec import Provider
from ai_gateway.logging import get_logger
from .base import ProviderAdapter
from .gemini_adapter import GeminiAdapter
from .openai_adapter import OpenAIAdapter
from .anthropic_adapter import AnthropicAdapter

ADAPTER_CLASSES: Mapping[Provider, type[ProviderAdapter]] = MappingProxyType({
    Provider.GEMINI: GeminiAdapter,
    Provider.OPENAI: OpenAIAdapter,
    Provider.ANTHROPIC: AnthropicAdapter,
})


def create_adapters(
    providers: Iterable[Provider],
    api_key_env: Optional[Mapping[Provider, str]] = None,
) -> dict[Provider, ProviderAdapter]:
    """
    Construct one adapter per provider.

    Raises ConfigurationError on the first provider whose key is missing, so
    a misconfigured deployment fails at startup rather than on first use.
    """
    api_key_env = api_key_env or {}
    adapters: dict[Provider, ProviderAdapter] = {}
    for provider in sorted(set(providers), key=list(Provider).index):
        adapter_class = ADAPTER_CLASSES[provider]
        adapters[provider] = adapter_class(api_key_env=api_key_env.get(provider))
        get_logger().debug(f"Initialized {adapter_class.name} adapter", api_key_env=adapters[provider].api_key_env)
    return adapters
