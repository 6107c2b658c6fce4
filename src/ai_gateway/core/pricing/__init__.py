from ai_gateway.core.pricing.usage import ZERO_USAGE, Usage
from ai_gateway.core.pricing.cost_estimate import CostBreakdown, format_usd
from ai_gateway.core.pricing.token_pricing_policy import TokenPricingPolicy, compute_cost_usd
from ai_gateway.core.pricing.token_estimator import count_tokens, estimate_cost_usd

__all__ = [
    "CostBreakdown",
    "TokenPricingPolicy",
    "Usage",
    "ZERO_USAGE",
    "compute_cost_usd",
    "count_tokens",
    "estimate_cost_usd",
    "format_usd",
]
