# adapters/anthropic_adapter.py
from dataclasses import replace
from typing import Any

import anthropic

from ai_gateway.core.models.modelspec import ModelDefinition, Provider
from ai_gateway.core.pricing.usage import Usage
from .base import ProviderAdapter, usage_field

JSON_INSTRUCTION = "Please respond with valid JSON only, no additional text."

# The SDK refuses non-streaming requests with a large max_tokens unless a timeout is set explicitly
CLIENT_TIMEOUT_SECONDS = 600.0


class AnthropicAdapter(ProviderAdapter):
    """
    Adapter for Anthropic Claude models.

    The Messages API has no JSON response flag, so JSON mode is requested
    through the prompt and enforced by parsing.
    """

    provider = Provider.ANTHROPIC
    name = "Anthropic"
    default_api_key_env = "ANTHROPIC_API_KEY"

    def _create_client(self, api_key: str) -> Any:
        return anthropic.Anthropic(api_key=api_key, timeout=CLIENT_TIMEOUT_SECONDS)

    def _json_prompt(self, prompt: str) -> str:
        return f"{prompt}\n\n{JSON_INSTRUCTION}"

    def _generate(self, prompt: str, model: ModelDefinition, json_mode: bool) -> Any:
        kwargs: dict[str, Any] = {
            "model": model.id,
            "max_tokens": model.max_output_tokens,
            "messages": [{"role": "user", "content": prompt}],
        }
        if model.temperature is not None:
            kwargs["temperature"] = model.temperature
        return self.client.messages.create(**kwargs)

    def _decode_text(self, response: Any) -> str:
        text_parts = []
        for block in getattr(response, "content", None) or []:
            if getattr(block, "type", None) == "text":
                text_parts.append(getattr(block, "text", "") or "")
        return "".join(text_parts)

    def _decode_usage(self, response: Any) -> Usage:
        native = getattr(response, "usage", None)
        usage = Usage.from_counts(
            prompt_tokens=usage_field(native, "input_tokens"),
            completion_tokens=usage_field(native, "output_tokens"),
        )
        # No total is reported; derive it
        return replace(usage, total_tokens=usage.prompt_tokens + usage.completion_tokens)
