import pytest

from registry_http.conf import ENVIRONMENT_VARIABLE, Config
from registry_http.exceptions import ConfigurationError


def test_defaults(monkeypatch):
    monkeypatch.delenv(ENVIRONMENT_VARIABLE, raising=False)

    config = Config()

    assert config.JSON_CONTENT_TYPE == "application/json; charset=utf-8"
    assert config.RENAMED_JSON_KEYS == {"krate": "crate"}
    assert config.HUMAN_ERROR_STATUS == 200
    assert config.CONFIG_MODULE.__name__ == "registry_http.conf.default_config"


def test_settings_are_overridden_from_environment(monkeypatch, tmp_path):
    (tmp_path / "registry_test_settings.py").write_text(
        "HUMAN_ERROR_STATUS = 400\nDEBUG = True\nlowercase = 'ignored'\n"
    )
    monkeypatch.syspath_prepend(str(tmp_path))
    monkeypatch.setenv(ENVIRONMENT_VARIABLE, "registry_test_settings")

    config = Config()

    assert config.HUMAN_ERROR_STATUS == 400
    assert config.DEBUG is True
    assert config.JSON_CONTENT_TYPE == "application/json; charset=utf-8"
    assert not hasattr(config, "lowercase")
    assert repr(config) == '<Config "registry_test_settings">'


def test_invalid_human_error_status(monkeypatch, tmp_path):
    (tmp_path / "registry_bad_settings.py").write_text("HUMAN_ERROR_STATUS = 'ok'\n")
    monkeypatch.syspath_prepend(str(tmp_path))
    monkeypatch.setenv(ENVIRONMENT_VARIABLE, "registry_bad_settings")

    with pytest.raises(ConfigurationError):
        Config()


def test_human_error_status_is_used(mocker):
    from registry_http.conf import active_config
    from registry_http.exceptions import human

    mocker.patch.object(active_config, "HUMAN_ERROR_STATUS", 400)

    assert human("bad request").response().status_code == 400
