"""Settings modules for the payroll app, chosen by the APP_ENV variable."""

import importlib
import os
from types import ModuleType
from typing import Optional

DEFAULT_ENV = "development"

_ENV_MODULES = {
    "dev": "config.development",
    "development": "config.development",
    "test": "config.testing",
    "testing": "config.testing",
    "prod": "config.production",
    "production": "config.production",
}


def get_settings_module(env: Optional[str] = None) -> str:
    """Dotted path of the settings module for `env` (defaults to $APP_ENV).

    Unknown names fall back to development settings.
    """
    if env is None:
        env = os.getenv("APP_ENV", DEFAULT_ENV)
    return _ENV_MODULES.get(env.strip().lower(), _ENV_MODULES[DEFAULT_ENV])


def load_settings(env: Optional[str] = None) -> ModuleType:
    return importlib.import_module(get_settings_module(env))
