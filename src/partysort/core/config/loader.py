"""Config loading and persistence."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from partysort.core.contracts.config import PartySortConfig
from partysort.core.contracts.exceptions import ConfigError


def _resolve_path(value: Path | None, *, base_dir: Path) -> Path | None:
    if value is None:
        return None
    if value.is_absolute():
        return value
    return (base_dir / value).resolve()


def load_config(path: str | Path) -> PartySortConfig:
    """Load and validate config from JSON, resolving relative paths against the config directory."""
    config_path = Path(path).expanduser().resolve()
    config_dir = config_path.parent

    try:
        raw_payload: Any = json.loads(config_path.read_text(encoding="utf-8"))
        parsed = PartySortConfig.model_validate(raw_payload)
    except OSError as exc:
        raise ConfigError(f"failed reading config file: {config_path}") from exc
    except UnicodeDecodeError as exc:
        raise ConfigError(f"config file is not valid UTF-8: {config_path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in config file: {config_path}") from exc
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc

    return parsed.model_copy(update={"roster_path": _resolve_path(parsed.roster_path, base_dir=config_dir)})


def _relative_roster_path(config: PartySortConfig, *, base_dir: Path) -> PartySortConfig:
    if config.roster_path is None or not config.roster_path.is_absolute():
        return config
    try:
        relative = config.roster_path.relative_to(base_dir)
    except ValueError:
        return config
    return config.model_copy(update={"roster_path": relative})


def save_config(config: PartySortConfig, path: str | Path) -> None:
    config_path = Path(path).expanduser().resolve()
    payload = _relative_roster_path(config, base_dir=config_path.parent)
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(payload.model_dump_json(indent=2, exclude_none=True) + "\n", encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"failed writing config file: {config_path}") from exc
