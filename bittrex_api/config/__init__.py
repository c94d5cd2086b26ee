"""Configuration management modules"""

from bittrex_api.config.manager import ConfigManager
from bittrex_api.config.schemas import ClientConfig

__all__ = [
    "ConfigManager",
    "ClientConfig",
]
