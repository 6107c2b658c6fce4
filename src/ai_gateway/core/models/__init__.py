from ai_gateway.core.models.modelspec import ModelDefinition, ModelTier, Provider
from ai_gateway.core.models.catalog import DEFAULT_MODEL_ID, ModelCatalog, TierGroup

__all__ = [
    "DEFAULT_MODEL_ID",
    "ModelCatalog",
    "ModelDefinition",
    "ModelTier",
    "Provider",
    "TierGroup",
]
