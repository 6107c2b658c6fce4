# adapters/openai_adapter.py
from typing import Any

from openai import OpenAI

from ai_gateway.core.models.modelspec import ModelDefinition, Provider
from ai_gateway.core.pricing.usage import Usage
from .base import ProviderAdapter, usage_field

# JSON mode is refused unless the input mentions JSON
JSON_INSTRUCTION = "Respond with a valid JSON object only."


class OpenAIAdapter(ProviderAdapter):
    """Adapter for OpenAI models via the Responses API."""

    provider = Provider.OPENAI
    name = "OpenAI"
    default_api_key_env = "OPENAI_API_KEY"

    def _create_client(self, api_key: str) -> Any:
        return OpenAI(api_key=api_key)

    def _json_prompt(self, prompt: str) -> str:
        return f"{prompt}\n\n{JSON_INSTRUCTION}"

    def _generate(self, prompt: str, model: ModelDefinition, json_mode: bool) -> Any:
        kwargs: dict[str, Any] = {
            "model": model.id,
            "input": prompt,
            "max_output_tokens": model.max_output_tokens,
        }
        if model.temperature is not None:
            kwargs["temperature"] = model.temperature
        if json_mode:
            kwargs["text"] = {"format": {"type": "json_object"}}
        return self.client.responses.create(**kwargs)

    def _decode_text(self, response: Any) -> str:
        return getattr(response, "output_text", None) or ""

    def _decode_usage(self, response: Any) -> Usage:
        usage = getattr(response, "usage", None)
        return Usage.from_counts(
            prompt_tokens=usage_field(usage, "input_tokens"),
            completion_tokens=usage_field(usage, "output_tokens"),
            total_tokens=usage_field(usage, "total_tokens"),
        )
