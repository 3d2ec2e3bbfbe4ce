"""
Tests for configuration loading.
"""

import pytest

from laundrycal import config as config_module
from laundrycal.config import AppConfig, load_config


class TestAppConfig:
    """Tests for AppConfig."""

    def test_defaults(self):
        config = AppConfig()

        assert config.api.base_url == "http://prod.bokatvattid.se/api/api2"
        assert config.api.limit == 100
        assert config.server.host == "0.0.0.0"
        assert config.server.port == 10000
        assert config.calendar.prodid == "bokatvattid-api"

    def test_load_from_yaml(self, tmp_path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text(
            "api:\n"
            "  base_url: http://localhost:9000/api2\n"
            "  timeout_seconds: 5\n"
            "server:\n"
            "  port: 8080\n",
            encoding="utf-8",
        )

        config = AppConfig.load_from_yaml(config_path)

        assert config.api.base_url == "http://localhost:9000/api2"
        assert config.api.timeout_seconds == 5
        assert config.server.port == 8080
        assert config.server.host == "0.0.0.0"

    def test_empty_file_uses_defaults(self, tmp_path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("", encoding="utf-8")

        assert AppConfig.load_from_yaml(config_path) == AppConfig()

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            AppConfig.load_from_yaml(tmp_path / "missing.yaml")

    def test_invalid_yaml_raises(self, tmp_path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("api: [unclosed\n", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid YAML"):
            AppConfig.load_from_yaml(config_path)

    def test_non_mapping_root_raises(self, tmp_path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(ValueError, match="mapping"):
            AppConfig.load_from_yaml(config_path)

    @pytest.mark.parametrize(
        "yaml_text",
        [
            "server:\n  port: 0\n",
            "server:\n  port: 70000\n",
            "api:\n  timeout_seconds: 0\n",
            "api:\n  limit: 0\n",
        ],
    )
    def test_invalid_values_raise(self, tmp_path, yaml_text):
        config_path = tmp_path / "config.yaml"
        config_path.write_text(yaml_text, encoding="utf-8")

        with pytest.raises(ValueError):
            AppConfig.load_from_yaml(config_path)


class TestLoadConfig:
    """Tests for load_config."""

    def test_falls_back_to_defaults(self, tmp_path, monkeypatch):
        monkeypatch.setattr(config_module, "get_default_config_path", lambda: tmp_path / "config.yaml")

        assert load_config() == AppConfig()

    def test_uses_default_path_when_present(self, tmp_path, monkeypatch):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("server:\n  port: 8081\n", encoding="utf-8")
        monkeypatch.setattr(config_module, "get_default_config_path", lambda: config_path)

        assert load_config().server.port == 8081

    def test_explicit_path_must_exist(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")
