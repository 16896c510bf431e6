import pytest
import yaml

from capture_suites.framework.config_loader import ConfigLoader, ConfigurationError


def write_config(path, data):
    path.write_text(yaml.dump(data, sort_keys=False), encoding="utf-8")
    return path


def test_env_override_and_defaults(monkeypatch, tmp_path):
    config_path = write_config(tmp_path / "config.yaml", {"logging": {"level": "INFO"}})

    ConfigLoader.reset()
    loader = ConfigLoader(config_path=config_path)
    assert loader.get("logging.level") == "INFO"
    assert loader.get("logging.rotation", "10 MB") == "10 MB"

    ConfigLoader.reset()
    monkeypatch.setenv("LOGGING_LEVEL", "DEBUG")
    loader = ConfigLoader(config_path=config_path)
    assert loader.get("logging.level") == "DEBUG"


def test_reload_updates_values(tmp_path):
    config_path = write_config(tmp_path / "config.yaml", {"browsers": ["chrome"]})

    loader = ConfigLoader(config_path=config_path)
    assert loader.get_browser_ids() == ["chrome"]

    write_config(config_path, {"browsers": ["chrome", "firefox"]})
    loader.reload()
    assert loader.get_browser_ids() == ["chrome", "firefox"]


@pytest.mark.parametrize(
    "browsers, expected",
    [
        ({"ie11": {}, "chrome": {}, "firefox": {}}, ["ie11", "chrome", "firefox"]),
        (["chrome", "firefox", "chrome"], ["chrome", "firefox"]),
        ("chrome, firefox,,ie11", ["chrome", "firefox", "ie11"]),
    ],
    ids=["mapping", "list", "string"],
)
def test_browser_ids_from_yaml(tmp_path, browsers, expected):
    config_path = write_config(tmp_path / "config.yaml", {"browsers": browsers})

    assert ConfigLoader(config_path=config_path).get_browser_ids() == expected


def test_browser_ids_env_override(monkeypatch, tmp_path):
    config_path = write_config(tmp_path / "config.yaml", {"browsers": {"chrome": {}}})
    monkeypatch.setenv("BROWSERS", "firefox,opera")

    assert ConfigLoader(config_path=config_path).get_browser_ids() == ["firefox", "opera"]


def test_missing_file_yields_no_browsers(tmp_path):
    assert ConfigLoader(config_path=tmp_path / "missing.yaml").get_browser_ids() == []


def test_invalid_browsers_value_raises(tmp_path):
    config_path = write_config(tmp_path / "config.yaml", {"browsers": 42})

    with pytest.raises(ConfigurationError):
        ConfigLoader(config_path=config_path).get_browser_ids()


def test_invalid_yaml_raises(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("browsers: [chrome\n", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        ConfigLoader(config_path=config_path)


def test_default_config_ships_browsers(project_root):
    loader = ConfigLoader(config_path=project_root / "config" / "config.yaml")

    assert loader.get_browser_ids() == ["chrome", "firefox", "ie11"]


def test_default_config_ships_logging_settings(project_root):
    loader = ConfigLoader(config_path=project_root / "config" / "config.yaml")

    assert loader.get("logging.level") == "INFO"
    assert loader.get("logging.format") is None
    assert loader.get("logging.rotation") == "10 MB"
    assert loader.get("logging.retention") == "7 days"
