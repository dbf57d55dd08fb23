from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from sublaunch.config_model import ConfigModel
from sublaunch.paths import get_paths, get_root
from sublaunch.pools import path_dirs as pool_path_dirs


class ConfigError(ValueError):
    pass


Config = ConfigModel


def _read_raw(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"cannot read {path}: {e}") from e
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(f"{path}: top level must be a mapping")
    return raw


def load_config(config_path: str | Path | None = None) -> Config:
    if config_path is None:
        return Config()
    path = Path(config_path).expanduser()
    if not path.is_absolute():
        path = get_root() / path

    raw = _read_raw(path)
    try:
        return Config.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"{path}: {e}") from e


def resolve_status_path(cfg: Config) -> Path:
    value = (cfg.ui.status_path or "").strip()
    if not value or value.lower() in ("auto", "xdg"):
        return get_paths().status_path
    path = Path(value).expanduser()
    if not path.is_absolute():
        path = get_root() / path
    return path


def resolve_log_path(cfg: Config) -> Path | None:
    value = (cfg.ui.log_path or "").strip()
    if value.lower() in ("", "off", "none"):
        return None
    if value.lower() in ("auto", "xdg"):
        return get_paths().log_path
    path = Path(value).expanduser()
    if not path.is_absolute():
        path = get_root() / path
    return path


def executable_dirs(cfg: Config, *, path_dirs: list[Path] | None = None) -> list[Path]:
    dirs = [Path(d).expanduser() for d in cfg.pools.executable_dirs]
    if cfg.pools.use_path:
        dirs.extend(pool_path_dirs() if path_dirs is None else path_dirs)
    return dirs
