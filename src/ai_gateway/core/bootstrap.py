from typing import Mapping, Optional

from ai_gateway.adapters.adapter_registry import create_adapters
from ai_gateway.adapters.base import ProviderAdapter
from ai_gateway.configuration.config_manager import ConfigManager, GatewayConfig
from ai_gateway.core.models.catalog import ModelCatalog
from ai_gateway.core.models.modelspec import Provider
from ai_gateway.gateway.dispatcher import GatewayDispatcher
from ai_gateway.logging import LoggerRegistry, get_logger


def bootstrap_logging(config: GatewayConfig) -> None:
    LoggerRegistry.configure(config.log_level, show_timestamp=config.show_timestamps)


def bootstrap_catalog(config: GatewayConfig) -> ModelCatalog:
    catalog = ModelCatalog.from_yaml(config.catalog_path)
    get_logger().debug(f"Loaded model catalog with {len(catalog)} models", default_model=catalog.default_model_id)
    return catalog


def bootstrap_adapters(catalog: ModelCatalog, config: GatewayConfig) -> dict[Provider, ProviderAdapter]:
    return create_adapters(catalog.providers(), api_key_env=config.api_key_env)


def bootstrap_gateway(
    config: Optional[GatewayConfig] = None,
    adapters: Optional[Mapping[Provider, ProviderAdapter]] = None,
) -> GatewayDispatcher:
    """
    Initialization phase: logging, catalog, one adapter per catalog provider, dispatcher.

    Call once at process start and share the returned dispatcher. Raises
    ConfigurationError when a provider key is missing, so bad deployments
    fail here instead of on the first request. Pre-built adapters, when
    given, replace construction from the environment.
    """
    config = config or ConfigManager().get_config()
    bootstrap_logging(config)
    catalog = bootstrap_catalog(config)
    if adapters is None:
        adapters = bootstrap_adapters(catalog, config)
    dispatcher = GatewayDispatcher(catalog, adapters)
    get_logger().info(
        f"AI gateway ready: {len(catalog)} models across {len(catalog.providers())} providers"
    )
    return dispatcher
