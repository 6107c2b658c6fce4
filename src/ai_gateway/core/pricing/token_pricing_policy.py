from ai_gateway.core.models.modelspec import ModelDefinition
from .cost_estimate import CostBreakdown
from .usage import Usage

TOKENS_PER_PRICE_UNIT = 1_000_000


class TokenPricingPolicy:
    def __init__(self, input_cost_per_1m: float, output_cost_per_1m: float):
        self.input_cost_per_1m = input_cost_per_1m
        self.output_cost_per_1m = output_cost_per_1m

    @classmethod
    def for_model(cls, model: ModelDefinition) -> "TokenPricingPolicy":
        return cls(
            input_cost_per_1m=model.input_price_per_million_tokens,
            output_cost_per_1m=model.output_price_per_million_tokens,
        )

    def cost_for_tokens(self, prompt_tokens: int, completion_tokens: int) -> CostBreakdown:
        return CostBreakdown(
            input_usd=(prompt_tokens / TOKENS_PER_PRICE_UNIT) * self.input_cost_per_1m,
            output_usd=(completion_tokens / TOKENS_PER_PRICE_UNIT) * self.output_cost_per_1m,
        )

    def cost(self, usage: Usage) -> CostBreakdown:
        # Only prompt and completion tokens are priced; total_tokens is informational
        return self.cost_for_tokens(usage.prompt_tokens, usage.completion_tokens)


def compute_cost_usd(usage: Usage, model: ModelDefinition) -> float:
    """USD cost of one call, priced with the definition of the model that served it."""
    return TokenPricingPolicy.for_model(model).cost(usage).total_usd
