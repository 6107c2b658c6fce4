# adapters/gemini_adapter.py
from typing import Any

from google import genai
from google.genai import types

from ai_gateway.core.models.modelspec import ModelDefinition, Provider
from ai_gateway.core.pricing.usage import Usage
from .base import ProviderAdapter, usage_field


class GeminiAdapter(ProviderAdapter):
    provider = Provider.GEMINI
    name = "Gemini"
    default_api_key_env = "GEMINI_API_KEY"

    def _create_client(self, api_key: str) -> Any:
        return genai.Client(api_key=api_key)

    def _generate(self, prompt: str, model: ModelDefinition, json_mode: bool) -> Any:
        config = types.GenerateContentConfig(
            max_output_tokens=model.max_output_tokens,
            temperature=model.temperature,
            response_mime_type="application/json" if json_mode else None,
        )
        return self.client.models.generate_content(model=model.id, contents=prompt, config=config)

    def _decode_text(self, response: Any) -> str:
        return getattr(response, "text", None) or ""

    def _decode_usage(self, response: Any) -> Usage:
        metadata = getattr(response, "usage_metadata", None)
        return Usage.from_counts(
            prompt_tokens=usage_field(metadata, "prompt_token_count"),
            completion_tokens=usage_field(metadata, "candidates_token_count"),
            total_tokens=usage_field(metadata, "total_token_count"),
        )
