"""
Tests for loading the catalog from YAML.
"""
import pytest

from ai_gateway.core.models.catalog import ModelCatalog
from ai_gateway.core.models.model_loader import get_models_config_path, load_models_from_yaml
from ai_gateway.core.models.modelspec import ModelTier, Provider
from ai_gateway.errors import CatalogError

VALID_ENTRY = """
  - id: tiny-model
    name: Tiny
    provider: openai
    tier: Pro
    max_input_tokens: 1000
    max_output_tokens: 200
    input_price_per_million_tokens: 1.5
    output_price_per_million_tokens: 6
"""


def write_catalog(tmp_path, body, default_model_id="tiny-model"):
    path = tmp_path / "models.yaml"
    path.write_text(f"default_model_id: {default_model_id}\nmodels:\n{body}", encoding="utf-8")
    return path


def test_packaged_catalog_loads():
    assert get_models_config_path().exists()
    models = load_models_from_yaml()
    assert len(models) == 11

    flash_lite = models[0]
    assert flash_lite.id == "gemini-2.5-flash-lite"
    assert flash_lite.provider is Provider.GEMINI
    assert flash_lite.tier is ModelTier.BUDGET
    assert flash_lite.input_price_per_million_tokens == 0.10
    assert flash_lite.output_price_per_million_tokens == 0.40
    assert flash_lite.max_output_tokens == 65536
    assert flash_lite.temperature == 0.7
    assert flash_lite.has_capability("low-latency")


def test_gpt5_family_leaves_temperature_unset():
    by_id = {m.id: m for m in load_models_from_yaml()}
    assert by_id["gpt-5"].temperature is None
    assert by_id["gpt-5-mini"].temperature is None
    assert by_id["gpt-4o"].temperature == 0.7


def test_custom_catalog_file(tmp_path):
    catalog = ModelCatalog.from_yaml(write_catalog(tmp_path, VALID_ENTRY))
    model = catalog.get_model_by_id("tiny-model")
    assert model.provider is Provider.OPENAI
    assert model.output_price_per_million_tokens == 6.0
    assert model.capabilities == frozenset()
    assert catalog.default_model_id == "tiny-model"


def test_missing_field_is_reported(tmp_path):
    body = VALID_ENTRY.replace("    max_output_tokens: 200\n", "")
    with pytest.raises(CatalogError, match="max_output_tokens"):
        load_models_from_yaml(write_catalog(tmp_path, body))


def test_unknown_provider_and_tier_are_rejected(tmp_path):
    with pytest.raises(CatalogError, match="unknown provider"):
        load_models_from_yaml(write_catalog(tmp_path, VALID_ENTRY.replace("provider: openai", "provider: cohere")))
    with pytest.raises(CatalogError, match="unknown tier"):
        load_models_from_yaml(write_catalog(tmp_path, VALID_ENTRY.replace("tier: Pro", "tier: Gold")))


@pytest.mark.parametrize("field_name, value", [
    ("input_price_per_million_tokens", "null"),
    ("output_price_per_million_tokens", "cheap"),
    ("max_input_tokens", "[1000]"),
    ("max_output_tokens", "true"),
])
def test_invalid_numbers_are_catalog_errors(tmp_path, field_name, value):
    body = "\n".join(
        f"    {field_name}: {value}" if line.startswith(f"    {field_name}:") else line
        for line in VALID_ENTRY.split("\n")
    )
    with pytest.raises(CatalogError, match=f"tiny-model has invalid {field_name}"):
        load_models_from_yaml(write_catalog(tmp_path, body))


def test_capabilities_must_be_a_list_of_strings(tmp_path):
    with pytest.raises(CatalogError, match="capabilities must be a list of strings"):
        load_models_from_yaml(write_catalog(tmp_path, VALID_ENTRY + "    capabilities: reasoning\n"))

    models = load_models_from_yaml(write_catalog(tmp_path, VALID_ENTRY + "    capabilities: [reasoning, vision]\n"))
    assert models[0].has_capability("reasoning")
    assert models[0].capabilities == frozenset({"reasoning", "vision"})


def test_explicit_null_temperature_is_kept(tmp_path):
    models = load_models_from_yaml(write_catalog(tmp_path, VALID_ENTRY + "    temperature: null\n"))
    assert models[0].temperature is None


def test_duplicate_ids_in_file_are_rejected(tmp_path):
    with pytest.raises(CatalogError, match="Duplicate"):
        ModelCatalog.from_yaml(write_catalog(tmp_path, VALID_ENTRY + VALID_ENTRY))


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_models_from_yaml(tmp_path / "absent.yaml")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
