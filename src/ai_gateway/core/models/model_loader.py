"""Loader for model definitions from YAML configuration."""

from pathlib import Path
from typing import Any, List, Optional

import yaml

from ai_gateway.errors import CatalogError
from .modelspec import ModelDefinition, ModelTier, Provider

REQUIRED_FIELDS = (
    "id",
    "name",
    "provider",
    "tier",
    "max_input_tokens",
    "max_output_tokens",
    "input_price_per_million_tokens",
    "output_price_per_million_tokens",
)

DEFAULT_TEMPERATURE = 0.7


def get_models_config_path() -> Path:
    """Path of the catalog shipped with the package."""
    return Path(__file__).parent / "models.yaml"


def _number(entry: dict, field_name: str, convert):
    value = entry[field_name]
    if isinstance(value, bool):
        raise CatalogError(f"Model {entry['id']} has invalid {field_name}: {value!r}")
    try:
        return convert(value)
    except (TypeError, ValueError):
        raise CatalogError(f"Model {entry['id']} has invalid {field_name}: {value!r}") from None


def _capabilities(entry: dict) -> frozenset:
    value = entry.get("capabilities")
    if value is None:
        return frozenset()
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise CatalogError(f"Model {entry['id']} capabilities must be a list of strings")
    return frozenset(value)


def _temperature(entry: dict) -> Optional[float]:
    if "temperature" not in entry:
        return DEFAULT_TEMPERATURE
    if entry["temperature"] is None:
        return None
    return _number(entry, "temperature", float)


def _parse_entry(entry: Any, position: int) -> ModelDefinition:
    if not isinstance(entry, dict):
        raise CatalogError(f"Catalog entry #{position} is not a mapping")

    missing = [name for name in REQUIRED_FIELDS if name not in entry]
    if missing:
        label = entry.get("id", f"#{position}")
        raise CatalogError(f"Catalog entry {label} is missing: {', '.join(missing)}")

    model_id = entry["id"]
    try:
        provider = Provider(entry["provider"])
    except ValueError:
        raise CatalogError(f"Model {model_id} has unknown provider '{entry['provider']}'") from None
    try:
        tier = ModelTier(entry["tier"])
    except ValueError:
        raise CatalogError(f"Model {model_id} has unknown tier '{entry['tier']}'") from None

    return ModelDefinition(
        id=model_id,
        name=entry["name"],
        provider=provider,
        tier=tier,
        max_input_tokens=_number(entry, "max_input_tokens", int),
        max_output_tokens=_number(entry, "max_output_tokens", int),
        input_price_per_million_tokens=_number(entry, "input_price_per_million_tokens", float),
        output_price_per_million_tokens=_number(entry, "output_price_per_million_tokens", float),
        capabilities=_capabilities(entry),
        temperature=_temperature(entry),
    )


def load_catalog_document(config_path: Optional[Path] = None) -> dict:
    """Read the raw YAML document (models plus catalog-level settings)."""
    config_path = Path(config_path) if config_path else get_models_config_path()

    if not config_path.exists():
        raise FileNotFoundError(f"Models config not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise CatalogError(f"Models config {config_path} must be a mapping with a 'models' list")
    return data


def parse_models(document: dict) -> List[ModelDefinition]:
    return [_parse_entry(entry, i) for i, entry in enumerate(document.get("models") or [], start=1)]


def load_models_from_yaml(config_path: Optional[Path] = None) -> List[ModelDefinition]:
    """Load all model definitions, in declaration order."""
    return parse_models(load_catalog_document(config_path))
