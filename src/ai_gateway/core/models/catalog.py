from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Optional

from ai_gateway.errors import CatalogError, ModelNotFoundError
from ai_gateway.core.models.modelspec import ModelDefinition, ModelTier, Provider
from ai_gateway.core.models.model_loader import load_catalog_document, parse_models

DEFAULT_MODEL_ID = "gemini-2.5-flash-lite"


@dataclass(frozen=True)
class TierGroup:
    tier: ModelTier
    models: tuple[ModelDefinition, ...]


class ModelCatalog:
    """
    Read-only registry of model definitions.

    Built once at startup from an ordered sequence of definitions. Declaration
    order is preserved by every listing method; the catalog exposes no way to
    add, remove or change a model afterwards.
    """

    def __init__(self, models: Iterable[ModelDefinition], default_model_id: str = DEFAULT_MODEL_ID):
        ordered = tuple(models)
        by_id: dict[str, ModelDefinition] = {}
        for model in ordered:
            self._validate(model)
            if model.id in by_id:
                raise CatalogError(f"Duplicate model id in catalog: {model.id}")
            by_id[model.id] = model

        if ordered and default_model_id not in by_id:
            raise CatalogError(f"Default model {default_model_id} is not in the catalog")

        self._models = ordered
        self._by_id = MappingProxyType(by_id)
        self._default_model_id = default_model_id

    @classmethod
    def from_yaml(cls, config_path: Optional[Path] = None) -> "ModelCatalog":
        document = load_catalog_document(config_path)
        return cls(
            parse_models(document),
            default_model_id=document.get("default_model_id", DEFAULT_MODEL_ID),
        )

    @staticmethod
    def _validate(model: ModelDefinition) -> None:
        if not model.id:
            raise CatalogError("Model id must not be empty")
        if not isinstance(model.provider, Provider):
            raise CatalogError(f"Model {model.id} has unknown provider {model.provider!r}")
        if not isinstance(model.tier, ModelTier):
            raise CatalogError(f"Model {model.id} has unknown tier {model.tier!r}")
        if model.input_price_per_million_tokens < 0 or model.output_price_per_million_tokens < 0:
            raise CatalogError(f"Model {model.id} has a negative price")
        if model.max_input_tokens <= 0 or model.max_output_tokens <= 0:
            raise CatalogError(f"Model {model.id} must have positive token limits")

    @property
    def default_model_id(self) -> str:
        return self._default_model_id

    def get_all_models(self) -> tuple[ModelDefinition, ...]:
        return self._models

    def get_models_by_provider(self, provider: Provider | str) -> tuple[ModelDefinition, ...]:
        try:
            provider = Provider(provider)
        except ValueError:
            return ()
        return tuple(m for m in self._models if m.provider == provider)

    def get_model_by_id(self, model_id: str) -> ModelDefinition:
        try:
            return self._by_id[model_id]
        except KeyError:
            raise ModelNotFoundError(model_id) from None

    def is_model_exists(self, model_id: str) -> bool:
        return model_id in self._by_id

    def get_models_by_tier(self) -> list[TierGroup]:
        """Models grouped Budget, Pro, Premium; cheapest input price first within a tier."""
        groups = []
        for tier in ModelTier:
            # sorted() is stable, so equal prices keep declaration order
            models = sorted(
                (m for m in self._models if m.tier == tier),
                key=lambda m: m.input_price_per_million_tokens,
            )
            if models:
                groups.append(TierGroup(tier=tier, models=tuple(models)))
        return groups

    def providers(self) -> set[Provider]:
        return {m.provider for m in self._models}

    def __len__(self) -> int:
        return len(self._models)

    def __contains__(self, model_id: object) -> bool:
        return model_id in self._by_id

    def __repr__(self) -> str:
        return f"ModelCatalog(models={len(self._models)}, default='{self._default_model_id}')"
