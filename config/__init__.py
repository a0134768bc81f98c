import os
from typing import Optional

_ENV_MODULES = {
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
}


def get_settings_module(env: Optional[str] = None) -> str:
    # APP_ENV picks the settings module; anything unknown runs as development
    env = (env or os.getenv("APP_ENV", "development")).strip().lower()
    return _ENV_MODULES.get(env, "config.development")
