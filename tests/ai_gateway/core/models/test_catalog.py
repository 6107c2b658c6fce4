"""
Tests for the model catalog: lookups, provider filtering and tier grouping.
"""
import pytest

from ai_gateway.core.models.catalog import DEFAULT_MODEL_ID, ModelCatalog
from ai_gateway.core.models.modelspec import ModelDefinition, ModelTier, Provider
from ai_gateway.errors import CatalogError, ModelNotFoundError


def make_model(model_id, provider=Provider.GEMINI, tier=ModelTier.BUDGET, input_price=1.0, output_price=2.0):
    return ModelDefinition(
        id=model_id,
        name=model_id.title(),
        provider=provider,
        tier=tier,
        max_input_tokens=1000,
        max_output_tokens=100,
        input_price_per_million_tokens=input_price,
        output_price_per_million_tokens=output_price,
    )


def test_every_model_resolves_to_itself(catalog):
    """get_model_by_id round-trips every id and is_model_exists agrees."""
    for model in catalog.get_all_models():
        assert catalog.get_model_by_id(model.id).id == model.id
        assert catalog.is_model_exists(model.id)


def test_unknown_model_id_raises_not_found(catalog):
    with pytest.raises(ModelNotFoundError) as exc_info:
        catalog.get_model_by_id("nonexistent")
    assert exc_info.value.model_id == "nonexistent"
    assert isinstance(exc_info.value, LookupError)
    assert not catalog.is_model_exists("nonexistent")


def test_all_models_keep_declaration_order(catalog):
    ids = [m.id for m in catalog.get_all_models()]
    assert ids == [
        "gemini-2.5-flash-lite",
        "gemini-3-flash-preview",
        "gemini-3-pro-preview",
        "gpt-5",
        "gpt-5-pro",
        "gpt-5-mini",
        "gpt-4o",
        "gpt-4o-mini",
        "claude-haiku-4-5-20251001",
        "claude-sonnet-4-5-20250929",
        "claude-opus-4-6",
    ]


def test_models_by_provider_filters_and_keeps_order(catalog):
    openai_ids = [m.id for m in catalog.get_models_by_provider(Provider.OPENAI)]
    assert openai_ids == ["gpt-5", "gpt-5-pro", "gpt-5-mini", "gpt-4o", "gpt-4o-mini"]
    assert [m.id for m in catalog.get_models_by_provider("anthropic")] == [
        "claude-haiku-4-5-20251001",
        "claude-sonnet-4-5-20250929",
        "claude-opus-4-6",
    ]
    assert catalog.get_models_by_provider("mistral") == ()


def test_models_by_tier_order_and_price_sorting(catalog):
    groups = catalog.get_models_by_tier()
    assert [g.tier for g in groups] == [ModelTier.BUDGET, ModelTier.PRO, ModelTier.PREMIUM]
    for group in groups:
        assert group.models, f"Empty tier {group.tier} should have been omitted"
        prices = [m.input_price_per_million_tokens for m in group.models]
        assert prices == sorted(prices)
        assert all(m.tier == group.tier for m in group.models)

    budget_ids = [m.id for m in groups[0].models]
    assert budget_ids == [
        "gemini-2.5-flash-lite",
        "gpt-4o-mini",
        "gpt-5-mini",
        "gemini-3-flash-preview",
        "claude-haiku-4-5-20251001",
    ]


def test_models_by_tier_skips_empty_tiers_and_keeps_ties_stable():
    catalog = ModelCatalog(
        [
            make_model("b-first", tier=ModelTier.PREMIUM, input_price=3.0),
            make_model("a-cheap", tier=ModelTier.BUDGET, input_price=0.5),
            make_model("b-second", tier=ModelTier.PREMIUM, input_price=3.0),
            make_model("b-cheapest", tier=ModelTier.PREMIUM, input_price=1.0),
        ],
        default_model_id="a-cheap",
    )
    groups = catalog.get_models_by_tier()
    assert [g.tier for g in groups] == [ModelTier.BUDGET, ModelTier.PREMIUM]
    assert [m.id for m in groups[1].models] == ["b-cheapest", "b-first", "b-second"]


def test_duplicate_ids_are_rejected_across_providers():
    with pytest.raises(CatalogError, match="Duplicate model id"):
        ModelCatalog(
            [make_model("shared", provider=Provider.GEMINI), make_model("shared", provider=Provider.OPENAI)],
            default_model_id="shared",
        )


def test_negative_price_is_rejected():
    with pytest.raises(CatalogError, match="negative price"):
        ModelCatalog([make_model("bad", output_price=-0.01)], default_model_id="bad")


def test_default_model_must_exist():
    with pytest.raises(CatalogError, match="Default model"):
        ModelCatalog([make_model("only")], default_model_id="missing")


def test_catalog_metadata(catalog):
    assert catalog.default_model_id == DEFAULT_MODEL_ID
    assert catalog.providers() == {Provider.GEMINI, Provider.OPENAI, Provider.ANTHROPIC}
    assert len(catalog) == 11
    assert "gpt-4o" in catalog


def test_catalog_is_read_only(catalog):
    model = catalog.get_model_by_id("gpt-4o")
    with pytest.raises(AttributeError):
        model.input_price_per_million_tokens = 0.0
    assert isinstance(catalog.get_all_models(), tuple)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
