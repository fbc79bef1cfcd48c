"""YAML config loader with environment overlay for the provider credential."""

import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from weatherfinder.config.schema import FinderConfig

API_KEY_ENV = "OPENWEATHER_API_KEY"


class ConfigError(Exception):
    """Raised when configuration is missing or invalid."""


def load_config(path: str | Path | None = None) -> FinderConfig:
    """Load and validate config from an optional YAML file.

    The API key from the environment overrides any key in the file.
    """
    raw: dict = {}
    if path is not None:
        path = Path(path)
        try:
            with open(path) as f:
                raw = yaml.safe_load(f) or {}
        except OSError as e:
            raise ConfigError(f"Cannot read config {path}: {e}") from e
        if not isinstance(raw, dict):
            raise ConfigError(f"Config {path} must be a mapping")

    env_key = os.environ.get(API_KEY_ENV, "")
    if env_key:
        raw["api_key"] = env_key

    try:
        return FinderConfig(**raw)
    except ValidationError as e:
        raise ConfigError(str(e)) from e


def require_api_key(config: FinderConfig) -> str:
    if not config.api_key:
        raise ConfigError(f"{API_KEY_ENV} not set")
    return config.api_key


def masked_config_json(config: FinderConfig) -> str:
    """Config as JSON with the API key replaced by a fixed mask."""
    masked = config.model_copy(
        update={"api_key": "****" if config.api_key else ""}
    )
    return masked.model_dump_json(indent=2)
