"""Tests for ConfigManager and ClientConfig"""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from bittrex_api.api.constants import ApiVersion
from bittrex_api.config.manager import ConfigManager
from bittrex_api.config.schemas import ClientConfig


def write_config(path: Path, content: str) -> Path:
    path.write_text(content, encoding="utf-8")
    return path


class TestClientConfig:
    def test_defaults(self):
        config = ClientConfig(api_key="key", api_secret="secret")
        assert config.calls_per_second == 1.0
        assert config.api_version is ApiVersion.V1_1
        assert config.request_timeout == 10.0

    def test_secrets_hidden(self):
        config = ClientConfig(api_key="key", api_secret="hunter2")
        assert "hunter2" not in str(config)
        assert config.api_secret.get_secret_value() == "hunter2"

    def test_requires_credentials(self):
        with pytest.raises(ValidationError):
            ClientConfig(api_key="key")


class TestConfigManager:
    def test_load(self, tmp_path: Path):
        path = write_config(
            tmp_path / "config.yaml",
            "bittrex:\n"
            "  api_key: key\n"
            "  api_secret: secret\n"
            "  calls_per_second: 2\n"
            "  api_version: v2.0\n",
        )
        manager = ConfigManager(path)
        config = manager.load()

        assert config.calls_per_second == 2
        assert config.api_version is ApiVersion.V2_0
        assert manager.get_config() is config
        assert len(manager.get_config_version()) == 16

    def test_env_substitution(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("BITTREX_TEST_SECRET", "from-env")
        path = write_config(
            tmp_path / "config.yaml",
            "bittrex:\n  api_key: key\n  api_secret: ${BITTREX_TEST_SECRET}\n",
        )
        config = ConfigManager(path).load()
        assert config.api_secret.get_secret_value() == "from-env"

    def test_version_hash_changes_with_content(self, tmp_path: Path):
        path = write_config(
            tmp_path / "config.yaml", "bittrex:\n  api_key: a\n  api_secret: b\n"
        )
        manager = ConfigManager(path)
        manager.load()
        first = manager.get_config_version()

        write_config(path, "bittrex:\n  api_key: a\n  api_secret: c\n")
        manager.load()
        assert manager.get_config_version() != first

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            ConfigManager(tmp_path / "missing.yaml").load()

    def test_invalid_yaml(self, tmp_path: Path):
        path = write_config(tmp_path / "config.yaml", "bittrex: [unclosed\n")
        with pytest.raises(yaml.YAMLError):
            ConfigManager(path).load()

    def test_validation_error(self, tmp_path: Path):
        path = write_config(
            tmp_path / "config.yaml",
            "bittrex:\n  api_key: a\n  api_secret: b\n  calls_per_second: 0\n",
        )
        with pytest.raises(ValidationError):
            ConfigManager(path).load()

    def test_get_config_before_load(self, tmp_path: Path):
        manager = ConfigManager(tmp_path / "config.yaml")
        with pytest.raises(RuntimeError, match="not loaded"):
            manager.get_config()
        with pytest.raises(RuntimeError):
            manager.get_config_version()
