"""Unit tests for configuration helpers."""

import pytest
from pydantic import ValidationError

from eventdispatch.config import loaders, settings
from eventdispatch.config.settings import DispatcherConfig
from eventdispatch.core import EventDispatcher


def test_debug_flag_reads_environment(monkeypatch):
    """Truthy spellings of EVENTDISPATCH_DEBUG enable debug mode."""
    monkeypatch.setenv("EVENTDISPATCH_DEBUG", "Yes")
    assert settings.debug_enabled() is True

    monkeypatch.setenv("EVENTDISPATCH_DEBUG", "0")
    assert settings.debug_enabled() is False


def test_defaults_without_environment():
    config = DispatcherConfig.from_env()

    assert config.debug is False
    assert config.log_indent_text == "    "
    assert config.log_level == "INFO"


def test_environment_overrides_config_file(monkeypatch, tmp_path):
    """Values from the YAML file apply unless an environment variable overrides them."""
    path = tmp_path / "dispatcher.yaml"
    loaders.write_yaml(path, {"debug": False, "log_indent_text": "  ", "log_level": "warning"})
    monkeypatch.setenv("EVENTDISPATCH_CONFIG_PATH", str(path))
    monkeypatch.setenv("EVENTDISPATCH_DEBUG", "true")

    config = DispatcherConfig.from_env()

    assert config.debug is True
    assert config.log_indent_text == "  "
    assert config.log_level == "WARNING"


def test_missing_config_file_falls_back_to_defaults(monkeypatch, tmp_path):
    monkeypatch.setenv("EVENTDISPATCH_CONFIG_PATH", str(tmp_path / "absent.yaml"))

    assert DispatcherConfig.from_env() == DispatcherConfig()


def test_load_round_trips_saved_config(tmp_path):
    path = tmp_path / "nested" / "dispatcher.yaml"
    DispatcherConfig(debug=True, log_indent_text="\t").save(path)

    loaded = DispatcherConfig.load(path)

    assert loaded.debug is True
    assert loaded.log_indent_text == "\t"


def test_load_rejects_missing_and_empty_files(tmp_path):
    with pytest.raises(FileNotFoundError):
        DispatcherConfig.load(tmp_path / "missing.yaml")

    empty = tmp_path / "empty.yaml"
    empty.write_text("")
    with pytest.raises(ValueError):
        DispatcherConfig.load(empty)


def test_validation_rejects_bad_values():
    with pytest.raises(ValidationError):
        DispatcherConfig(log_indent_text="--")
    with pytest.raises(ValidationError):
        DispatcherConfig(log_level="chatty")


def test_dispatcher_debug_defaults_from_config():
    assert EventDispatcher(config=DispatcherConfig(debug=True)).debug is True
    assert EventDispatcher(debug=False, config=DispatcherConfig(debug=True)).debug is False


def test_dispatcher_reads_environment_when_no_config_given(monkeypatch):
    monkeypatch.setenv("EVENTDISPATCH_DEBUG", "1")

    assert EventDispatcher().debug is True
