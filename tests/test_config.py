"""Tests for config.py: loading, env var expansion, validation."""

import logging

import pytest

from config import Config, SourceConfig, expand_env_vars, load_config


class TestExpandEnvVars:
    def test_dollar_brace_syntax(self, monkeypatch):
        monkeypatch.setenv("TEST_VAR", "hello")
        assert expand_env_vars("${TEST_VAR}") == "hello"

    def test_dollar_prefix_syntax(self, monkeypatch):
        monkeypatch.setenv("MY_VAR", "world")
        assert expand_env_vars("$MY_VAR") == "world"

    def test_missing_var_becomes_empty(self, monkeypatch):
        monkeypatch.delenv("NONEXISTENT_VAR", raising=False)
        assert expand_env_vars("${NONEXISTENT_VAR}") == ""

    def test_nested_dict_and_list(self, monkeypatch):
        monkeypatch.setenv("HOST", "api.local")
        result = expand_env_vars({"source": {"hosts": ["${HOST}", "literal"]}})
        assert result == {"source": {"hosts": ["api.local", "literal"]}}

    def test_non_string_passthrough(self):
        assert expand_env_vars(42) == 42
        assert expand_env_vars(None) is None


class TestConfigFromYaml:
    def test_load_basic_yaml(self, config_yaml):
        cfg = Config.from_yaml(config_yaml)
        assert cfg.web.port == 8081
        assert cfg.source.base_url == "http://videos.internal:8080"
        assert cfg.source.page_size == 24
        assert cfg.source.timeout == 5
        assert cfg.source.endpoint == "/api/v1/videos"

    def test_env_var_expansion_in_yaml(self, tmp_path, monkeypatch):
        monkeypatch.setenv("YTD_TEST_URL", "https://videos.example.com")
        cfg_file = tmp_path / "env_config.yaml"
        cfg_file.write_text("""\
source:
  base_url: "${YTD_TEST_URL}"
""")
        cfg = Config.from_yaml(cfg_file)
        assert cfg.source.base_url == "https://videos.example.com"
        assert cfg.web.port == 3000

    def test_empty_yaml_gives_defaults(self, tmp_path):
        cfg_file = tmp_path / "empty.yaml"
        cfg_file.write_text("")
        cfg = Config.from_yaml(cfg_file)
        assert cfg.source.page_size == 12
        assert cfg.database.path == "db/ytdash.db"


class TestConfigFromEnv:
    def test_defaults(self, monkeypatch):
        for var in ["YTD_WEB_HOST", "YTD_WEB_PORT", "YTD_SOURCE_URL", "YTD_PAGE_SIZE"]:
            monkeypatch.delenv(var, raising=False)
        cfg = Config.from_env()
        assert cfg.web.host == "0.0.0.0"
        assert cfg.source.base_url == "http://localhost:8080"
        assert cfg.source.page_size == 12

    def test_from_env_vars(self, monkeypatch):
        monkeypatch.setenv("YTD_WEB_PORT", "9090")
        monkeypatch.setenv("YTD_SOURCE_URL", "http://other:1234")
        monkeypatch.setenv("YTD_PAGE_SIZE", "50")
        cfg = Config.from_env()
        assert cfg.web.port == 9090
        assert cfg.source.base_url == "http://other:1234"
        assert cfg.source.page_size == 50


class TestSourceConfig:
    def test_url_joins_base_and_endpoint(self):
        assert SourceConfig(base_url="http://x:8080/").url == "http://x:8080/api/v1/videos"
        assert SourceConfig(base_url="http://x", endpoint="videos").url == "http://x/videos"


class TestLoadConfig:
    def test_load_from_path(self, config_yaml):
        cfg = load_config(str(config_yaml))
        assert cfg.source.page_size == 24

    def test_missing_file_raises(self):
        with pytest.raises(FileNotFoundError):
            load_config("/nonexistent/path/config.yaml")

    def test_fallback_to_env(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        cfg = load_config(None)
        assert isinstance(cfg, Config)

    def test_non_positive_page_size_reset(self, tmp_path, caplog):
        cfg_file = tmp_path / "bad_size.yaml"
        cfg_file.write_text("source:\n  page_size: 0\n")
        with caplog.at_level(logging.WARNING):
            cfg = load_config(str(cfg_file))
        assert cfg.source.page_size == 12
        assert "must be positive" in caplog.text

    def test_base_url_without_scheme_warns(self, tmp_path, caplog):
        cfg_file = tmp_path / "bad_url.yaml"
        cfg_file.write_text("source:\n  base_url: localhost:8080\n")
        with caplog.at_level(logging.WARNING):
            load_config(str(cfg_file))
        assert "no http(s) scheme" in caplog.text
