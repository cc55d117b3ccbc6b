import pytest

from compressor.config import Config, get_config


def test_defaults(monkeypatch):
    for name in ("APPEARANCE_MODE", "COLOR_THEME", "LOG_LEVEL", "POLL_INTERVAL_MS", "ENCODER_WORKERS"):
        monkeypatch.delenv(name, raising=False)
    cfg = Config()
    assert cfg.appearance_mode == "system"
    assert cfg.color_theme == "blue"
    assert cfg.log_level == "INFO"
    assert cfg.poll_interval_ms == 50
    assert cfg.encoder_workers == 1


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("APPEARANCE_MODE", "dark")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("POLL_INTERVAL_MS", "20")
    cfg = Config()
    assert cfg.appearance_mode == "dark"
    assert cfg.log_level == "DEBUG"
    assert cfg.poll_interval_ms == 20


@pytest.mark.parametrize("name, value", [("POLL_INTERVAL_MS", "abc"), ("POLL_INTERVAL_MS", "0"), ("ENCODER_WORKERS", "-1")])
def test_invalid_values(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValueError):
        Config()


def test_get_config_is_cached():
    assert get_config() is get_config()
