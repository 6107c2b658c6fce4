from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class Provider(str, Enum):
    GEMINI = "gemini"
    OPENAI = "openai"
    ANTHROPIC = "anthropic"


class ModelTier(str, Enum):
    """Coarse pricing/quality classes, declared cheapest first."""
    BUDGET = "Budget"
    PRO = "Pro"
    PREMIUM = "Premium"

    @property
    def rank(self) -> int:
        return list(ModelTier).index(self)


@dataclass(frozen=True)
class ModelDefinition:
    id: str                     # e.g. "gemini-2.5-flash-lite"
    name: str                   # e.g. "Gemini 2.5 Flash-Lite"
    provider: Provider
    tier: ModelTier

    # Limits (tokens)
    max_input_tokens: int
    max_output_tokens: int

    # Cost (USD per 1M tokens)
    input_price_per_million_tokens: float
    output_price_per_million_tokens: float

    capabilities: frozenset[str] = field(default_factory=frozenset)

    # Sampling temperature for every call; None leaves the provider default
    temperature: Optional[float] = 0.7

    def has_capability(self, capability: str) -> bool:
        return capability in self.capabilities
