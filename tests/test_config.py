"""Tests for environment-driven configuration."""
import importlib

import pytest

from articles_api import config


@pytest.fixture
def reload_config(monkeypatch):
    """Reload config under patched env vars, restoring the original afterwards."""
    def _reload(**env):
        monkeypatch.delenv("EXPOSE_ERROR_DETAILS", raising=False)
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        return importlib.reload(config)

    yield _reload
    monkeypatch.undo()
    importlib.reload(config)


def test_error_details_on_in_development(reload_config):
    assert reload_config(APP_ENV="development").EXPOSE_ERROR_DETAILS is True


def test_app_env_is_case_insensitive(reload_config):
    assert reload_config(APP_ENV="Development").EXPOSE_ERROR_DETAILS is True


@pytest.mark.parametrize("app_env", ["production", "staging"])
def test_error_details_off_outside_development(reload_config, app_env):
    assert reload_config(APP_ENV=app_env).EXPOSE_ERROR_DETAILS is False


def test_explicit_flag_overrides_environment(reload_config):
    assert reload_config(
        APP_ENV="development", EXPOSE_ERROR_DETAILS="false"
    ).EXPOSE_ERROR_DETAILS is False
    assert reload_config(
        APP_ENV="production", EXPOSE_ERROR_DETAILS="true"
    ).EXPOSE_ERROR_DETAILS is True


def test_defaults_to_production(reload_config, monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)
    cfg = reload_config()
    assert cfg.APP_ENV == "production"
    assert cfg.EXPOSE_ERROR_DETAILS is False
