"""
Tests for the configuration manager
"""

import json

import pytest
from sm_menu.config import ConfigManager
from sm_menu.context import CliPreferences
from sm_menu.exceptions import ConfigurationError


@pytest.fixture
def fresh_config(tmp_path, monkeypatch):
    """A ConfigManager bound to a temporary directory, singleton state restored afterwards"""
    saved = (ConfigManager._instance, ConfigManager._initialized)

    def build(file_config=None, env=None):
        for key, value in (env or {}).items():
            monkeypatch.setenv(key, value)
        if file_config is not None:
            (tmp_path / "config.json").write_text(json.dumps(file_config))
        ConfigManager._instance = None
        ConfigManager._initialized = False
        return ConfigManager(config_dir=tmp_path)

    yield build
    ConfigManager._instance, ConfigManager._initialized = saved


def test_defaults(fresh_config):
    cfg = fresh_config()
    assert cfg.get("app.name") == "sm-menu"
    assert cfg.get("preferences.max_list_items") == 50
    assert cfg.get("missing.key", "fallback") == "fallback"


def test_defaults_are_not_shared(fresh_config):
    cfg = fresh_config()
    cfg.set("preferences.max_list_items", 3)
    assert ConfigManager.DEFAULT_CONFIG["preferences"]["max_list_items"] == 50
    cfg.reset_to_defaults()
    assert cfg.get("preferences.max_list_items") == 50


def test_file_overlay(fresh_config):
    cfg = fresh_config(file_config={"preferences": {"colored_prompt": False}})
    assert cfg.get("preferences.colored_prompt") is False
    assert cfg.get("preferences.max_list_items") == 50


def test_corrupt_file_falls_back_to_defaults(fresh_config, tmp_path):
    (tmp_path / "config.json").write_text("{not json")
    cfg = fresh_config()
    assert cfg.get("app.name") == "sm-menu"


def test_environment_overlay(fresh_config):
    cfg = fresh_config(env={
        "SM_MENU_PREFERENCES_MAX_LIST_ITEMS": "7",
        "SM_MENU_PREFERENCES_COLORED_PROMPT": "false",
    })
    assert cfg.get("preferences.max_list_items") == 7
    assert cfg.get("preferences.colored_prompt") is False


def test_preferences(fresh_config):
    cfg = fresh_config(file_config={"preferences": {"max_list_items": 10, "colored_prompt": False}})
    assert cfg.preferences() == CliPreferences(
        colored_prompt=False, show_suggestions=True, confirm_destructive=True, max_list_items=10
    )


@pytest.mark.parametrize("value", [0, -1, "ten", True])
def test_validate_rejects_bad_list_size(fresh_config, value):
    cfg = fresh_config()
    cfg.set("preferences.max_list_items", value)
    with pytest.raises(ConfigurationError) as exc_info:
        cfg.validate()
    assert exc_info.value.details["config_key"] == "preferences.max_list_items"


def test_save_round_trip(fresh_config, tmp_path):
    cfg = fresh_config()
    cfg.set("preferences.show_suggestions", False)
    path = cfg.save()
    assert path == tmp_path / "config.json"
    assert json.loads(path.read_text())["preferences"]["show_suggestions"] is False


def test_to_dict_is_a_copy(fresh_config):
    cfg = fresh_config()
    cfg.to_dict()["app"]["name"] = "changed"
    assert cfg.get("app.name") == "sm-menu"
