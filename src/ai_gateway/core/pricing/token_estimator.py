"""Pre-call token counting and cost estimation."""

from functools import lru_cache
from typing import Optional

import tiktoken

from ai_gateway.core.models.modelspec import ModelDefinition
from ai_gateway.logging import get_logger
from .cost_estimate import CostBreakdown
from .token_pricing_policy import TokenPricingPolicy

# Providers tokenize differently; o200k_base is a close enough proxy for estimates
DEFAULT_ENCODING = "o200k_base"
CHARS_PER_TOKEN = 4.0


@lru_cache(maxsize=None)
def _get_encoding(encoding_name: str):
    return tiktoken.get_encoding(encoding_name)


def count_tokens(text: str, encoding_name: str = DEFAULT_ENCODING) -> int:
    """Count tokens using tiktoken, falling back to a character ratio if the encoding cannot be loaded."""
    if not text:
        return 0

    try:
        return len(_get_encoding(encoding_name).encode(text))
    except Exception as e:
        # tiktoken downloads encodings on first use; offline hosts end up here
        get_logger().debug(f"tiktoken unavailable ({e}), estimating tokens from length")

    return int(len(text) / CHARS_PER_TOKEN)


def estimate_cost_usd(
    prompt: str,
    model: ModelDefinition,
    expected_output_tokens: Optional[int] = None,
) -> CostBreakdown:
    """
    Estimate the cost of sending prompt to model before making the call.

    When expected_output_tokens is not given, the answer is assumed to be as
    long as the prompt, capped at the model's output ceiling.
    """
    prompt_tokens = count_tokens(prompt)
    if expected_output_tokens is None:
        expected_output_tokens = prompt_tokens
    expected_output_tokens = max(0, min(expected_output_tokens, model.max_output_tokens))
    return TokenPricingPolicy.for_model(model).cost_for_tokens(prompt_tokens, expected_output_tokens)
