from ai_gateway.configuration.config_manager import ConfigManager
from ai_gateway.core.bootstrap import bootstrap_catalog, bootstrap_logging
from ai_gateway.core.models.catalog import ModelCatalog
from ai_gateway.core.pricing.cost_estimate import format_usd
from ai_gateway.core.pricing.token_pricing_policy import TokenPricingPolicy

SAMPLE_CALL_TOKENS = 1000


def format_price(price_per_1m: float) -> str:
    return f"${price_per_1m:.2f}"


def show_models_by_tier(catalog: ModelCatalog) -> list[str]:
    """Print the catalog grouped by tier, cheapest first, and return the printed lines."""
    lines = []
    for group in catalog.get_models_by_tier():
        lines.append(f"{group.tier.value}:")
        for model in group.models:
            sample_cost = TokenPricingPolicy.for_model(model).cost_for_tokens(SAMPLE_CALL_TOKENS, SAMPLE_CALL_TOKENS)
            default_marker = " [default]" if model.id == catalog.default_model_id else ""
            lines.append(
                f"  {model.id:28s} {model.name} ({model.provider.value}){default_marker}, "
                f"{format_price(model.input_price_per_million_tokens)} in / "
                f"{format_price(model.output_price_per_million_tokens)} out per 1M tokens, "
                f"1K in + 1K out: {format_usd(sample_cost.total_usd)}"
            )
    for line in lines:
        print(line)
    return lines


def main():
    # Listing the catalog needs no provider keys, so adapters are not constructed here
    config = ConfigManager().get_config()
    bootstrap_logging(config)
    show_models_by_tier(bootstrap_catalog(config))


if __name__ == "__main__":
    main()
