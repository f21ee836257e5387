"""Loading of the build config, the route table and the release version."""

from __future__ import annotations

import json
from pathlib import Path

import yaml
from pydantic import ValidationError

from psbuild.config.models import BuildConfig, RouteTable
from psbuild.errors import ConfigError

CONFIG_FILENAME = "psbuild.yaml"


def load_config(root: Path, cli_path: str | None = None) -> BuildConfig:
    """Load config with resolution order: explicit path > <root>/psbuild.yaml > defaults."""
    config_paths = [
        Path(cli_path) if cli_path else None,
        root / CONFIG_FILENAME,
    ]

    for path in config_paths:
        if path and path.exists():
            try:
                with open(path) as f:
                    raw = yaml.safe_load(f)
                if raw is None:
                    continue
                return BuildConfig(**raw)
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {path}: {e}") from e
            except (ValidationError, TypeError) as e:
                raise ConfigError(f"Invalid config in {path}: {e}") from e

    return BuildConfig()


def _read_json(path: Path, what: str) -> object:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ConfigError(f"{what} not found: {path}") from e
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Could not read {what} {path}: {e}") from e


def load_routes(path: Path) -> RouteTable:
    """Read the JSON route table. All six domain keys are required."""
    raw = _read_json(path, "route table")
    if not isinstance(raw, dict):
        raise ConfigError(f"Route table {path} must be a JSON object")
    try:
        return RouteTable(**raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid route table in {path}: {e}") from e


def load_release_version(path: Path) -> str:
    """Return the ``version`` field of package.json."""
    raw = _read_json(path, "package metadata")
    version = raw.get("version") if isinstance(raw, dict) else None
    if not isinstance(version, str) or not version:
        raise ConfigError(f"No release version in {path}")
    return version
