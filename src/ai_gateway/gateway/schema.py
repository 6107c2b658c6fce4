from dataclasses import dataclass
from enum import Enum
from typing import Any

from ai_gateway.core.models.modelspec import Provider
from ai_gateway.core.pricing.usage import Usage


class GenerationMode(Enum):
    TEXT = "text"
    JSON = "json"


@dataclass(frozen=True)
class GenerationRequest:
    prompt: str
    model_id: str
    mode: GenerationMode = GenerationMode.TEXT

    def __post_init__(self):
        if not isinstance(self.prompt, str) or not self.prompt.strip():
            raise ValueError("prompt must be a non-empty string")
        if not self.model_id:
            raise ValueError("model_id must be a non-empty string")
        if not isinstance(self.mode, GenerationMode):
            # Accept "text" / "json" from callers that deserialize requests
            object.__setattr__(self, "mode", GenerationMode(self.mode))


@dataclass(frozen=True)
class GenerationResult:
    payload: Any            # str for TEXT, parsed JSON value for JSON
    usage: Usage
    cost_usd: float
    model_id: str
    provider: Provider
    latency_ms: float = 0.0

    def to_dict(self) -> dict:
        return {
            "payload": self.payload,
            "usage": self.usage.to_dict(),
            "cost_usd": self.cost_usd,
            "model_id": self.model_id,
            "provider": self.provider.value,
            "latency_ms": self.latency_ms,
        }
