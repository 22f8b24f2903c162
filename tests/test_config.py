from __future__ import annotations

import pytest

from config import get_settings_module, load_settings


@pytest.mark.parametrize(
    "env, expected",
    [
        ("prod", "config.production"),
        ("Production", "config.production"),
        ("test", "config.testing"),
        (" testing ", "config.testing"),
        ("development", "config.development"),
        ("staging", "config.development"),
    ],
)
def test_env_names_map_to_settings_modules(env, expected):
    assert get_settings_module(env) == expected


def test_app_env_variable_is_used_by_default(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")

    settings = load_settings()

    assert settings.__name__ == "config.testing"
    assert settings.TESTING is True


def test_missing_app_env_means_development(monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)

    assert get_settings_module() == "config.development"
