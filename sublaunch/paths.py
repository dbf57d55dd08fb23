from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_path, user_state_path

APP_NAME = "sublaunch"


@dataclass(frozen=True)
class LauncherPaths:
    root: Path
    config_dir: Path
    state_dir: Path

    @property
    def config_path(self) -> Path:
        return self.config_dir / "config.yaml"

    @property
    def status_path(self) -> Path:
        return self.state_dir / "status.json"

    @property
    def log_path(self) -> Path:
        return self.state_dir / f"{APP_NAME}.log"


def get_root() -> Path:
    env = os.environ.get("SUBLAUNCH_ROOT")
    if env:
        return Path(env).expanduser().resolve()
    return Path.cwd().resolve()


def get_paths(*, app_name: str = APP_NAME) -> LauncherPaths:
    cfg = user_config_path(app_name, ensure_exists=True)
    state = user_state_path(app_name, ensure_exists=True)
    return LauncherPaths(root=get_root(), config_dir=Path(cfg), state_dir=Path(state))


def find_config_path(explicit: str | None = None) -> Path:
    if explicit:
        return Path(explicit).expanduser().resolve()

    env = os.environ.get("SUBLAUNCH_CONFIG")
    if env:
        return Path(env).expanduser().resolve()

    p = get_paths().config_path
    if p.exists():
        return p

    # portable fallback
    return get_root() / "config.yaml"


def template_path() -> Path:
    return Path(__file__).resolve().parents[1] / "config.yaml"


def ensure_default_config(*, template: Path, dest_path: Path) -> bool:
    """Copy ``template`` to ``dest_path`` unless it exists. True if written."""
    if dest_path.exists() or not template.exists():
        return False
    dest_path.parent.mkdir(parents=True, exist_ok=True)
    dest_path.write_text(template.read_text(encoding="utf-8"), encoding="utf-8")
    return True
