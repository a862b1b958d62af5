"""Shared pytest fixtures for ytdash tests."""

import pytest

from config import Config, WebConfig, SourceConfig, DatabaseConfig
from data.settings_store import SettingsStore
from fakes import FakeSource


@pytest.fixture
def fake_source():
    return FakeSource()


@pytest.fixture
def settings_store(tmp_path):
    """SettingsStore backed by a temp-dir SQLite file."""
    store = SettingsStore(db_path=str(tmp_path / "test.db"))
    yield store
    store.close()


@pytest.fixture
def sample_config(tmp_path):
    """Minimal Config with safe defaults for testing."""
    return Config(
        web=WebConfig(host="127.0.0.1", port=9999, session_secret="test-secret"),
        source=SourceConfig(base_url="http://api.test", page_size=3, timeout=2),
        database=DatabaseConfig(path=str(tmp_path / "test.db")),
    )


@pytest.fixture
def config_yaml(tmp_path):
    """Write a minimal config.yaml and return its path."""
    cfg = tmp_path / "config.yaml"
    cfg.write_text("""\
web:
  host: 0.0.0.0
  port: 8081
source:
  base_url: "http://videos.internal:8080"
  page_size: 24
  timeout: 5
database:
  path: "{db_path}"
""".format(db_path=str(tmp_path / "cfg_test.db")))
    return cfg
