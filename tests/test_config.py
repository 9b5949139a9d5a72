"""Tests for configuration."""

import importlib

import pytest
from pydantic import ValidationError

from ytt.core.config import TranscriptConfig, YTTSettings, get_settings, load_settings
from ytt.fetcher.transport import DEFAULT_USER_AGENT
from ytt.utils.cache import InMemoryCache


@pytest.fixture(autouse=True)
def _isolated(monkeypatch, tmp_path):
    """Run each test away from real config files and YTT_* variables."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setitem(YTTSettings.model_config, "toml_file", [tmp_path / "ytt.toml"])
    for name in ("USER_AGENT", "DISABLE_HTTPS", "TIMEOUT", "CACHE_TTL", "VERBOSE"):
        monkeypatch.delenv(f"YTT_{name}", raising=False)


def test_default_settings():
    settings = load_settings()
    assert settings.user_agent == DEFAULT_USER_AGENT
    assert settings.disable_https is False
    assert settings.timeout == 30.0
    assert settings.verbose is False


def test_toml_layer(tmp_path):
    (tmp_path / "ytt.toml").write_text('user_agent = "from-toml"\ntimeout = 3.0\n')
    settings = load_settings()
    assert settings.user_agent == "from-toml"
    assert settings.timeout == 3.0


def test_env_overrides_toml(tmp_path, monkeypatch):
    (tmp_path / "ytt.toml").write_text('user_agent = "from-toml"\n')
    monkeypatch.setenv("YTT_USER_AGENT", "from-env")
    assert load_settings().user_agent == "from-env"


def test_keyword_overrides_env(monkeypatch):
    monkeypatch.setenv("YTT_TIMEOUT", "10")
    assert load_settings(timeout=1.5).timeout == 1.5


def test_none_override_ignored():
    assert load_settings(user_agent=None).user_agent == DEFAULT_USER_AGENT


def test_transcript_config_defaults():
    config = TranscriptConfig()
    assert config.lang is None
    assert config.cache is None
    assert config.disable_https is None
    assert config.video_fetch is None


def test_transcript_config_is_frozen():
    config = TranscriptConfig(lang="en")
    with pytest.raises(ValidationError):
        config.lang = "fr"


def test_transcript_config_accepts_cache_and_hooks():
    cache = InMemoryCache()

    def hook(params):
        raise AssertionError("not called")

    config = TranscriptConfig(cache=cache, video_fetch=hook, cache_ttl=1000)
    assert config.cache is cache
    assert config.video_fetch is hook


def test_transcript_config_rejects_non_cache():
    with pytest.raises(ValidationError):
        TranscriptConfig(cache="redis://localhost")


def test_transcript_config_accepts_zero_ttl():
    assert TranscriptConfig(cache_ttl=0).cache_ttl == 0


def test_transcript_config_rejects_negative_ttl():
    with pytest.raises(ValidationError):
        TranscriptConfig(cache_ttl=-1)


def test_transcript_config_rejects_non_callable_hook():
    with pytest.raises(ValidationError):
        TranscriptConfig(player_fetch="https://proxy")


def test_cache_ttl_defaults_to_cache_default():
    assert load_settings().cache_ttl is None


def test_cache_ttl_toml_layer(tmp_path):
    (tmp_path / "ytt.toml").write_text("cache_ttl = 5000\n")
    assert load_settings().cache_ttl == 5000


def test_cache_ttl_env_overrides_toml(tmp_path, monkeypatch):
    (tmp_path / "ytt.toml").write_text("cache_ttl = 5000\n")
    monkeypatch.setenv("YTT_CACHE_TTL", "250")
    assert load_settings().cache_ttl == 250


class TestConsole:
    @pytest.fixture(autouse=True)
    def _fresh_caches(self):
        from ytt.utils.console import get_console

        get_settings.cache_clear()
        get_console.cache_clear()
        yield
        get_settings.cache_clear()
        get_console.cache_clear()

    def test_import_does_not_load_settings(self, tmp_path):
        import ytt.utils.console

        (tmp_path / "ytt.toml").write_text('timeout = "not a number"\n')
        importlib.reload(ytt.utils.console)
        with pytest.raises(ValidationError):
            get_settings()

    def test_quiet_by_default(self):
        from ytt.utils.console import get_console

        assert get_console().quiet is True

    def test_verbose_from_env(self, monkeypatch):
        from ytt.utils.console import get_console

        monkeypatch.setenv("YTT_VERBOSE", "1")
        assert get_console().quiet is False
