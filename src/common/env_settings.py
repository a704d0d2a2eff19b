"""
Environment Settings

Remote source connection details, read from the environment (or a .env file).
The key is a SecretStr so it never shows up in logs or reprs.
"""

import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import AliasChoices, BaseModel, Field, HttpUrl, SecretStr, ValidationError


class EnvSettings(BaseModel):
    supabase_url: HttpUrl = Field(
        validation_alias=AliasChoices("SUPABASE_URL", "VITE_SUPABASE_URL"),
    )
    supabase_key: SecretStr = Field(
        validation_alias=AliasChoices("SUPABASE_KEY", "VITE_SUPABASE_ANON_KEY"),
    )


def _load_dotenv():
    # Load from repo root if present, otherwise rely on environment variables.
    root_env = Path(__file__).resolve().parents[2] / ".env"
    if root_env.exists():
        load_dotenv(root_env)
    else:
        load_dotenv()


def settings_from_mapping(environ) -> EnvSettings:
    """Build EnvSettings from a mapping, naming missing variables on failure."""
    try:
        return EnvSettings.model_validate(dict(environ))
    except ValidationError as exc:
        missing = [str(e["loc"][0]) for e in exc.errors() if e["type"] == "missing"]
        if missing:
            detail = f"Missing required environment variables: {', '.join(missing)}"
        else:
            detail = f"Invalid remote source settings: {exc.error_count()} error(s)"
        raise RuntimeError(detail) from exc


@lru_cache()
def get_env_settings() -> EnvSettings:
    _load_dotenv()
    return settings_from_mapping(os.environ)
