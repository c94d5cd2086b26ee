"""
Configuration Manager with YAML support and Pydantic validation.
"""

import hashlib
import json
import os
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]
from pydantic import ValidationError

from bittrex_api.config.schemas import ClientConfig
from bittrex_api.utils.logger import LoggerMixin

CONFIG_SECTION = "bittrex"


def _expand_env(value: Any) -> Any:
    """Expand ${NAME} references in every string of a parsed YAML tree"""
    if isinstance(value, str):
        return os.path.expandvars(value)
    if isinstance(value, dict):
        return {key: _expand_env(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_expand_env(item) for item in value]
    return value


class ConfigManager(LoggerMixin):
    """
    Loads a ClientConfig from the ``bittrex:`` section of a YAML file.

    Features:
    - Pydantic validation of the client settings
    - Environment variable substitution (``api_secret: ${BITTREX_SECRET}``)
    - Configuration versioning with hash tracking
    """

    def __init__(self, config_path: Path) -> None:
        """
        Initialize ConfigManager.

        Args:
            config_path: Path to the YAML configuration file
        """
        self.config_path = config_path
        self._config: ClientConfig | None = None
        self._config_hash: str | None = None

        self.logger.info("Initializing ConfigManager", path=str(config_path))

    def load(self) -> ClientConfig:
        """
        Load and validate configuration from file.

        Returns:
            Validated ClientConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            yaml.YAMLError: If the file is not valid YAML
            ValidationError: If config validation fails
        """
        if not self.config_path.exists():
            raise FileNotFoundError(f"Config file not found: {self.config_path}")

        try:
            with open(self.config_path, encoding="utf-8") as f:
                raw_config = yaml.safe_load(f) or {}

            # Hash the file as written, before secrets are substituted
            config_str = json.dumps(raw_config, sort_keys=True, default=str)
            new_hash = hashlib.sha256(config_str.encode()).hexdigest()[:16]

            section = raw_config.get(CONFIG_SECTION, raw_config)
            config = ClientConfig(**_expand_env(section))

            self._config = config
            self._config_hash = new_hash

            self.logger.info(
                "Configuration loaded successfully",
                version_hash=new_hash,
                api_version=config.api_version.value,
                calls_per_second=config.calls_per_second,
            )

            return config

        except yaml.YAMLError as e:
            self.logger.error("Failed to parse YAML", error=str(e))
            raise
        except ValidationError as e:
            self.logger.error("Configuration validation failed", error=str(e))
            raise

    def get_config(self) -> ClientConfig:
        """
        Get current configuration.

        Raises:
            RuntimeError: If config not loaded
        """
        if self._config is None:
            raise RuntimeError("Configuration not loaded. Call load() first.")
        return self._config

    def get_config_version(self) -> str:
        """
        Get current configuration version hash.
        """
        if self._config_hash is None:
            raise RuntimeError("Configuration not loaded")
        return self._config_hash
