"""Load generator config from YAML or JSON."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from .schema import GeneratorConfig

SUPPORTED_SUFFIXES = (".yaml", ".yml", ".json")


class ConfigLoadError(ValueError):
    """Raised when a config file cannot be read or has the wrong shape."""


def load_config(path: str | Path, **overrides: Any) -> GeneratorConfig:
    """Read a YAML/JSON config file and validate it as ``GeneratorConfig``.

    Keyword ``overrides`` that are not ``None`` replace values from the file,
    so command-line flags can take precedence over the stored config.
    Validation errors from Pydantic propagate unchanged.
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    suffix = config_path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise ConfigLoadError(
            f"Unsupported config format '{suffix}'. Use .yaml/.yml or .json."
        )

    text = config_path.read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(text) if suffix != ".json" else json.loads(text or "{}")
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise ConfigLoadError(f"Could not parse {config_path.name}: {exc}") from exc

    data = data or {}
    if not isinstance(data, dict):
        raise ConfigLoadError("Config root must be a JSON/YAML object.")

    merged: dict[str, Any] = {**data, **{key: value for key, value in overrides.items() if value is not None}}
    return GeneratorConfig.model_validate(merged)
