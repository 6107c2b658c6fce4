from ai_gateway.adapters.base import AdapterResponse, ProviderAdapter
from ai_gateway.adapters.gemini_adapter import GeminiAdapter
from ai_gateway.adapters.openai_adapter import OpenAIAdapter
from ai_gateway.adapters.anthropic_adapter import AnthropicAdapter
from ai_gateway.adapters.adapter_registry import ADAPTER_CLASSES, create_adapters

__all__ = [
    "ADAPTER_CLASSES",
    "AdapterResponse",
    "AnthropicAdapter",
    "GeminiAdapter",
    "OpenAIAdapter",
    "ProviderAdapter",
    "create_adapters",
]
