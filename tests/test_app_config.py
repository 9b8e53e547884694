import json

import pytest

import utils.app_config as app_config


@pytest.fixture(autouse=True)
def config_path(tmp_path, monkeypatch):
    config_dir = tmp_path / ".budget_easy"
    monkeypatch.setattr(app_config, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(app_config, "CONFIG_FILE", config_dir / "config.json")
    monkeypatch.delenv("BUDGET_EASY_LOG_LEVEL", raising=False)
    return config_dir / "config.json"


def test_missing_file_gives_empty_config():
    assert app_config.load_config() == {}


def test_corrupt_file_gives_empty_config(config_path):
    config_path.parent.mkdir(parents=True)
    config_path.write_text("{not json", encoding="utf-8")
    assert app_config.load_config() == {}


def test_non_dict_file_gives_empty_config(config_path):
    config_path.parent.mkdir(parents=True)
    config_path.write_text("[1, 2]", encoding="utf-8")
    assert app_config.load_config() == {}


def test_save_then_load(config_path):
    app_config.save_config({"simulate_latency": False})
    assert json.loads(config_path.read_text(encoding="utf-8")) == {"simulate_latency": False}
    assert not config_path.with_suffix(".tmp").exists()


def test_get_setting_falls_back_to_defaults():
    assert app_config.get_setting("simulate_latency") is True
    assert app_config.get_setting("unknown", "x") == "x"


def test_set_setting_and_remove():
    app_config.set_setting("appearance_mode", "dark")
    assert app_config.get_setting("appearance_mode") == "dark"
    app_config.set_setting("appearance_mode", None)
    assert app_config.get_setting("appearance_mode") == "system"


def test_log_level_env_wins(monkeypatch):
    app_config.set_setting("log_level", "warning")
    assert app_config.get_log_level() == "WARNING"
    monkeypatch.setenv("BUDGET_EASY_LOG_LEVEL", "debug")
    assert app_config.get_log_level() == "DEBUG"


def test_date_format_default_comes_from_defaults():
    assert app_config.get_setting("date_format") == "MMM D, YYYY"
    app_config.set_setting("date_format", "DD/MM/YYYY")
    assert app_config.get_setting("date_format") == "DD/MM/YYYY"
