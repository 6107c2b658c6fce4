from ai_gateway.configuration.config_manager import ConfigManager, DEFAULT_API_KEY_ENV, GatewayConfig

__all__ = ["ConfigManager", "DEFAULT_API_KEY_ENV", "GatewayConfig"]
