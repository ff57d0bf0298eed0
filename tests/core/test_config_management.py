# tests/core/test_config_management.py
import json
import logging

import pytest

from winbuilder.core.handlers.config_handler import handle_config
from winbuilder.core.managers.config_manager import ConfigManager, load_settings
from winbuilder.core.utils.configure_logging import LogWithTqdm, configure_logger
from winbuilder.core.utils.path_utils import PathUtils

# Een standaard, voorspelbare configuratie voor onze tests
MOCK_SETTINGS_CONTENT = {
    "debug": {
        "level": "WARNING"
    },
    "builder": {
        "indent_marker": ">",
        "attribute_separator": ";"
    },
    "compile": {
        "pretty": False
    },
    "window": {
        "width": 800,
        "height": 462
    }
}


@pytest.fixture
def config_env(tmp_path, monkeypatch):
    """
    Een fixture die een geïsoleerde testomgeving opzet voor de ConfigManager:
    - Plaatst een nep 'settings.json' bestand in een tijdelijke map.
    - Monkeypatched PathUtils om naar dit bestand te wijzen.
    - Herlaadt na de test de echte configuratie.
    """
    settings_file = tmp_path / "settings.json"
    settings_file.write_text(json.dumps(MOCK_SETTINGS_CONTENT))
    monkeypatch.setattr(PathUtils, "get_settings_file", lambda: settings_file)

    manager = ConfigManager()
    manager.reset()  # Forceer herladen vanuit ons nep-bestand
    yield manager

    monkeypatch.undo()
    manager.reset()


def test_config_manager_is_singleton():
    assert ConfigManager() is ConfigManager()


def test_config_manager_load(config_env):
    """Test of de manager de configuratie correct laadt."""
    config = config_env.get_all()
    assert config["debug"]["level"] == "WARNING"
    assert config["window"]["width"] == 800


def test_config_manager_get_nested(config_env):
    """Test het ophalen van geneste waarden."""
    assert config_env.get_nested("builder.attribute_separator") == ";"
    assert config_env.get_nested("non.existent.key", "default") == "default"
    assert config_env.get_nested("builder.attribute_separator.deeper", "x") == "x"


def test_config_manager_set_nested_casts_types(config_env):
    """De nieuwe waarde krijgt het type van de oude waarde."""
    config_env.set_nested("window.width", "1024")
    assert config_env.get_nested("window.width") == 1024

    config_env.set_nested("compile.pretty", "true")
    assert config_env.get_nested("compile.pretty") is True
    config_env.set_nested("compile.pretty", "false")
    assert config_env.get_nested("compile.pretty") is False

    # Niet te converteren: wordt als string opgeslagen
    config_env.set_nested("window.height", "tall")
    assert config_env.get_nested("window.height") == "tall"

    # Nieuwe sleutels worden aangemaakt
    config_env.set_nested("builder.extra.flag", "on")
    assert config_env.get_nested("builder.extra.flag") == "on"


def test_config_manager_set_nested_through_scalar_fails(config_env):
    assert config_env.set_nested("debug.level.sub", "x") is False


def test_config_manager_reset(config_env):
    """Test of de reset-functie de configuratie herlaadt vanaf schijf."""
    config_env.set_nested("debug.level", "DEBUG")
    config_env.reset()
    assert config_env.get_nested("debug.level") == "WARNING"


def test_missing_settings_file_gives_empty_config(tmp_path, monkeypatch):
    monkeypatch.setattr(PathUtils, "get_settings_file", lambda: tmp_path / "missing.json")
    manager = ConfigManager()
    manager.reset()
    try:
        assert manager.get_all() == {}
        assert manager.get_nested("window.width", 800) == 800
    finally:
        monkeypatch.undo()
        manager.reset()


def test_invalid_settings_file_gives_empty_config(tmp_path, monkeypatch):
    broken = tmp_path / "settings.json"
    broken.write_text("{not json")
    monkeypatch.setattr(PathUtils, "get_settings_file", lambda: broken)
    manager = ConfigManager()
    manager.reset()
    try:
        assert manager.get_all() == {}
    finally:
        monkeypatch.undo()
        manager.reset()


def test_settings_must_be_a_json_object(tmp_path):
    settings_file = tmp_path / "settings.json"
    settings_file.write_text("[1, 2]")
    assert load_settings(settings_file) == {}


def test_shipped_settings_file_is_valid():
    """Het meegeleverde settings.json bevat de standaardwaarden."""
    data = json.loads(PathUtils.get_settings_file().read_text(encoding="utf-8"))
    assert data["builder"] == {"indent_marker": ">", "attribute_separator": ";"}
    assert data["window"]["width"] == 800


# --- Tests voor de 'config' command handler ---

def test_handle_config_list(config_env, capsys):
    assert handle_config(["list"]) == 0
    output_json = json.loads(capsys.readouterr().out)
    assert output_json["builder"]["attribute_separator"] == ";"


def test_handle_config_get(config_env, capsys):
    assert handle_config(["get", "window.height"]) == 0
    assert capsys.readouterr().out.strip() == "462"


def test_handle_config_get_unknown_key(config_env, capsys):
    assert handle_config(["get", "nope"]) == 1
    assert "Unknown config key" in capsys.readouterr().out


def test_handle_config_without_arguments(config_env, capsys):
    assert handle_config([]) == 1
    assert "config list" in capsys.readouterr().out


# --- Tests voor de logging-configuratie ---

@pytest.fixture
def restore_logging():
    """Zet de root logger en de aangepaste loggers na de test terug."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    names = ("htmlbuilder", "noisy.lib")
    levels = {name: logging.getLogger(name).level for name in names}
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    for name, old in levels.items():
        logging.getLogger(name).setLevel(old)


def test_configure_logger_sets_levels(restore_logging):
    configure_logger("info", module_specific_levels={"htmlbuilder": "DEBUG"}, silenced_loggers={"noisy.lib": "bogus"})
    assert logging.getLogger().level == logging.INFO
    assert logging.getLogger("htmlbuilder").level == logging.DEBUG
    assert logging.getLogger("noisy.lib").level == logging.CRITICAL


def test_configure_logger_installs_one_tqdm_handler(restore_logging):
    """Herhaald aanroepen vervangt de eigen handler en laat andere handlers staan."""
    other = logging.NullHandler()
    logging.getLogger().addHandler(other)
    configure_logger()
    configure_logger(logging.ERROR)

    handlers = logging.getLogger().handlers
    assert sum(isinstance(h, LogWithTqdm) for h in handlers) == 1
    assert other in handlers
    assert logging.getLogger().level == logging.ERROR


def test_tqdm_handler_writes_to_stderr(restore_logging, capsys):
    configure_logger("WARNING")
    logging.getLogger("htmlbuilder.test").warning("zichtbaar")
    assert "WARNING  htmlbuilder.test: zichtbaar" in capsys.readouterr().err
