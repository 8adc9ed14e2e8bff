"""Config loader: optional YAML file, then .env and process environment overrides."""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from cwaweather.config.defaults import ENV_OVERRIDES
from cwaweather.config.schema import ProxyConfig

REDACTED = "****"


def load_config(
    path: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> ProxyConfig:
    """Build the process-wide config once at startup.

    Values from the YAML file (if given) are overridden by environment
    variables. When ``environ`` is None, a ``.env`` file in the working
    directory is loaded into ``os.environ`` first.
    """
    raw: dict[str, Any] = {}
    if path is not None:
        with open(Path(path)) as f:
            raw = yaml.safe_load(f) or {}

    if environ is None:
        load_dotenv(Path.cwd() / ".env")
        environ = os.environ

    for env_name, dotted_key in ENV_OVERRIDES.items():
        value = environ.get(env_name)
        if value:
            _set_dotted(raw, dotted_key, value)

    return ProxyConfig(**raw)


def redacted(config: ProxyConfig) -> dict[str, Any]:
    """Config as a plain dict with the API key masked."""
    data = config.model_dump(mode="json")
    if data.get("cwa_api_key"):
        data["cwa_api_key"] = REDACTED
    return data


def _set_dotted(data: dict[str, Any], dotted_key: str, value: Any) -> None:
    parts = dotted_key.split(".")
    target = data
    for part in parts[:-1]:
        target = target.setdefault(part, {})
    target[parts[-1]] = value
