# adapters/base.py
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

from ai_gateway.core.models.modelspec import ModelDefinition, Provider
from ai_gateway.core.pricing.usage import Usage
from ai_gateway.errors import ConfigurationError, ParseError, ProviderError
from ai_gateway.logging import get_logger
from ai_gateway.util.json_utils import parse_json_response, preview

T = TypeVar("T")


@dataclass(frozen=True)
class AdapterResponse(Generic[T]):
    result: T
    usage: Usage


class ProviderAdapter(ABC):
    """
    Uniform generation contract implemented once per provider.

    Subclasses only describe how to build the native client, how to make one
    call and how to decode the native response. Error wrapping, JSON parsing
    and logging live here so every provider fails the same way.

    Instances hold nothing but the client handle and are safe to share
    between threads.
    """

    provider: Provider
    name: str
    default_api_key_env: str

    def __init__(self, api_key: Optional[str] = None, api_key_env: Optional[str] = None, client: Any = None):
        """
        Args:
            api_key: Explicit key; when omitted it is read from the environment.
            api_key_env: Environment variable holding the key (defaults per provider).
            client: Pre-built native client. Skips key resolution entirely.

        Raises:
            ConfigurationError: no client was given and no key could be found.
        """
        self.api_key_env = api_key_env or self.default_api_key_env
        if client is None:
            client = self._create_client(self._resolve_api_key(api_key))
        self._client = client

    def _resolve_api_key(self, api_key: Optional[str]) -> str:
        api_key = api_key or os.environ.get(self.api_key_env)
        if not api_key or not api_key.strip():
            raise ConfigurationError(
                f"{self.name} API key not found in environment variable {self.api_key_env}"
            )
        return api_key.strip()

    @property
    def client(self) -> Any:
        return self._client

    # ── Provider-specific hooks ───────────────────────────────────────

    @abstractmethod
    def _create_client(self, api_key: str) -> Any:
        """Construct the provider SDK client."""

    @abstractmethod
    def _generate(self, prompt: str, model: ModelDefinition, json_mode: bool) -> Any:
        """Make one SDK call and return the native response object."""

    @abstractmethod
    def _decode_text(self, response: Any) -> str:
        """Extract the generated text; never returns None."""

    @abstractmethod
    def _decode_usage(self, response: Any) -> Usage:
        """Map native token accounting onto Usage, defaulting missing fields to 0."""

    def _json_prompt(self, prompt: str) -> str:
        """Prompt sent in JSON mode. Providers without a native flag append an instruction."""
        return prompt

    # ── Contract ──────────────────────────────────────────────────────

    def generate_text(self, prompt: str, model: ModelDefinition) -> AdapterResponse[str]:
        response = self._call(prompt, model, json_mode=False)
        return AdapterResponse(result=self._decode_text(response), usage=self._decode_usage(response))

    def generate_json(self, prompt: str, model: ModelDefinition) -> AdapterResponse[Any]:
        response = self._call(self._json_prompt(prompt), model, json_mode=True)
        text = self._decode_text(response)
        try:
            result = parse_json_response(text, self.name, model_id=model.id)
        except ParseError as e:
            get_logger().gateway_error(e, response_preview=repr(preview(e.raw_text)))
            raise
        return AdapterResponse(result=result, usage=self._decode_usage(response))

    def _call(self, prompt: str, model: ModelDefinition, json_mode: bool) -> Any:
        try:
            return self._generate(prompt, model, json_mode)
        except Exception as e:
            error = ProviderError(str(e) or e.__class__.__name__, model_id=model.id)
            get_logger().gateway_error(error, f"{self.name} API call failed: {error.message}")
            raise error from e

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(provider='{self.provider.value}', api_key_env='{self.api_key_env}')"


def usage_field(container: Any, field_name: str) -> Any:
    """Read a token field from an SDK object or plain dict, tolerating a missing container."""
    if container is None:
        return None
    if isinstance(container, dict):
        return container.get(field_name)
    return getattr(container, field_name, None)
