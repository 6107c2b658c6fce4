import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional

from ai_gateway.core.models.modelspec import Provider
from ai_gateway.errors import ConfigurationError
from ai_gateway.logging.log_level import LogLevel

CONFIG_PATH_ENV = "AI_GATEWAY_CONFIG"
LOG_LEVEL_ENV = "AI_GATEWAY_LOG_LEVEL"

DEFAULT_API_KEY_ENV: Mapping[Provider, str] = MappingProxyType({
    Provider.GEMINI: "GEMINI_API_KEY",
    Provider.OPENAI: "OPENAI_API_KEY",
    Provider.ANTHROPIC: "ANTHROPIC_API_KEY",
})


@dataclass(frozen=True)
class GatewayConfig:
    api_key_env: Mapping[Provider, str] = field(default_factory=lambda: DEFAULT_API_KEY_ENV)
    catalog_path: Optional[Path] = None
    log_level: LogLevel = LogLevel.INFO
    show_timestamps: bool = False


class ConfigManager:
    """
    Builds the GatewayConfig from defaults, an optional JSON file and the environment.

    The file is named by AI_GATEWAY_CONFIG; AI_GATEWAY_LOG_LEVEL overrides the
    file's log level. Example file:

        {
            "api_key_env": {"gemini": "GOOGLE_API_KEY"},
            "catalog_path": "config/models.yaml",
            "log_level": "debug",
            "show_timestamps": true
        }
    """

    def __init__(self, config_path: Optional[Path] = None, environ: Optional[Mapping[str, str]] = None):
        self._environ = os.environ if environ is None else environ
        self._config_path = self._resolve_config_path(config_path)
        self._config_data = None

    def _resolve_config_path(self, config_path: Optional[Path]) -> Optional[Path]:
        if config_path is not None:
            return Path(config_path)
        configured = self._environ.get(CONFIG_PATH_ENV)
        return Path(configured) if configured else None

    @property
    def config_path(self) -> Optional[Path]:
        return self._config_path

    def load_config_data(self) -> dict:
        if self._config_data is None:
            if self._config_path is None:
                self._config_data = {}
            elif not self._config_path.exists():
                raise ConfigurationError(f"Configuration file not found: {self._config_path}")
            else:
                try:
                    with open(self._config_path, 'r', encoding='utf-8') as f:
                        data = json.load(f)
                except json.JSONDecodeError as e:
                    raise ConfigurationError(f"Configuration file {self._config_path} is not valid JSON: {e}") from e
                if not isinstance(data, dict):
                    raise ConfigurationError(f"Configuration file {self._config_path} must contain a JSON object")
                self._config_data = data

        return self._config_data

    def _api_key_env(self, overrides: dict) -> Mapping[Provider, str]:
        if not isinstance(overrides, dict):
            raise ConfigurationError("'api_key_env' must be an object mapping provider to variable name")
        api_key_env = dict(DEFAULT_API_KEY_ENV)
        for provider_name, env_name in overrides.items():
            try:
                provider = Provider(provider_name)
            except ValueError:
                raise ConfigurationError(f"Unknown provider in api_key_env: {provider_name}") from None
            if not isinstance(env_name, str) or not env_name:
                raise ConfigurationError(f"api_key_env.{provider_name} must be a non-empty string")
            api_key_env[provider] = env_name
        return MappingProxyType(api_key_env)

    def _log_level(self, config_data: dict) -> LogLevel:
        value = self._environ.get(LOG_LEVEL_ENV) or config_data.get('log_level')
        if not value:
            return LogLevel.INFO
        try:
            return LogLevel.parse(str(value))
        except ValueError as e:
            raise ConfigurationError(str(e)) from e

    def _catalog_path(self, config_data: dict) -> Optional[Path]:
        value = config_data.get('catalog_path')
        if not value:
            return None
        path = Path(value)
        # Relative paths are relative to the config file, not the working directory
        if not path.is_absolute() and self._config_path is not None:
            path = self._config_path.parent / path
        return path

    def _show_timestamps(self, config_data: dict) -> bool:
        value = config_data.get('show_timestamps', False)
        if not isinstance(value, bool):
            raise ConfigurationError(f"'show_timestamps' must be true or false, got {value!r}")
        return value

    def get_config(self) -> GatewayConfig:
        config_data = self.load_config_data()
        return GatewayConfig(
            api_key_env=self._api_key_env(config_data.get('api_key_env', {})),
            catalog_path=self._catalog_path(config_data),
            log_level=self._log_level(config_data),
            show_timestamps=self._show_timestamps(config_data),
        )
