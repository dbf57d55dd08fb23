from __future__ import annotations

import logging
import shlex
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from shutil import which
from typing import Protocol

from sublaunch.commands import Action, OpenUrl, RunCommand
from sublaunch.config import Config, executable_dirs as config_executable_dirs
from sublaunch.pools import DEFAULT_EXECUTABLE_DIRS, scan_executables

log = logging.getLogger(__name__)


class UnsupportedTarget(RuntimeError):
    pass


class Host(Protocol):
    def tag_names(self) -> list[str]:
        ...

    def view_names(self) -> list[str]:
        ...

    def executable_names(self) -> list[str]:
        ...

    def open_url(self, url: str) -> None:
        ...

    def ensure_tag(self, name: str) -> None:
        ...

    def ensure_view(self, name: str, tags: tuple[str, ...]) -> None:
        ...

    def spawn(self, command: str, tags: tuple[str, ...]) -> None:
        ...


def _resolve_exe(name: str) -> str | None:
    return which(name)


@dataclass
class SystemHost:
    """Opens URLs and spawns processes on this machine.

    Tags and views only live in memory here; a window manager binding would
    replace ``ensure_tag``/``ensure_view`` and the client tagging in ``spawn``.
    """

    browser: str = "auto"
    can_open_urls: bool = True
    can_spawn: bool = True
    executable_dirs: tuple[Path, ...] = DEFAULT_EXECUTABLE_DIRS
    tags: dict[str, None] = field(default_factory=dict)
    views: dict[str, tuple[str, ...]] = field(default_factory=dict)
    clients: dict[int, tuple[str, ...]] = field(default_factory=dict)

    @classmethod
    def from_config(cls, cfg: Config) -> SystemHost:
        return cls(
            browser=cfg.executor.browser,
            can_open_urls=cfg.executor.can_open_urls,
            can_spawn=cfg.executor.can_spawn,
            executable_dirs=tuple(config_executable_dirs(cfg)),
            tags=dict.fromkeys(cfg.pools.tags),
            views={v: () for v in cfg.pools.views},
        )

    # --- Enumeration ---
    def tag_names(self) -> list[str]:
        return list(self.tags)

    def view_names(self) -> list[str]:
        return list(self.views)

    def executable_names(self) -> list[str]:
        return scan_executables(self.executable_dirs)

    # --- Tags / views ---
    def ensure_tag(self, name: str) -> None:
        self.tags.setdefault(name, None)

    def ensure_view(self, name: str, tags: tuple[str, ...]) -> None:
        merged = dict.fromkeys(self.views.get(name, ()))
        merged.update(dict.fromkeys(tags))
        self.views[name] = tuple(merged)

    # --- Processes ---
    def browser_command(self, url: str) -> list[str]:
        cmdline = (self.browser or "").strip()
        if not cmdline or cmdline.lower() == "auto":
            exe = _resolve_exe("xdg-open")
            if not exe:
                raise UnsupportedTarget("No supported browser found (xdg-open is missing)")
            return [exe, url]

        parts = shlex.split(cmdline)
        exe = _resolve_exe(parts[0])
        if not exe:
            raise UnsupportedTarget(f"Browser not found: {parts[0]}")
        args = [p.replace("{url}", url) for p in parts[1:]]
        if not any("{url}" in p for p in parts[1:]):
            args.append(url)
        return [exe, *args]

    def open_url(self, url: str) -> None:
        if not self.can_open_urls:
            raise UnsupportedTarget("Opening URLs is disabled")
        cmd = self.browser_command(url)
        try:
            subprocess.Popen(cmd, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
        except OSError as e:
            raise UnsupportedTarget(f"Cannot start browser: {e}") from e

    def spawn(self, command: str, tags: tuple[str, ...]) -> None:
        if not self.can_spawn:
            raise UnsupportedTarget("Launching programs is disabled")
        exe = _resolve_exe(command)
        if not exe:
            raise UnsupportedTarget(f"Executable not found: {command}")
        try:
            proc = subprocess.Popen([exe], start_new_session=True)
        except OSError as e:
            raise UnsupportedTarget(f"Cannot launch {command}: {e}") from e
        if tags:
            self.clients[proc.pid] = tags


def perform(action: Action, host: Host) -> str:
    """Run ``action`` on ``host`` and return a short status message.

    ``UnsupportedTarget`` from the host propagates; the caller shows it. Every
    program in a command is tried even if an earlier one fails, and the raised
    message names the ones that did start.
    """
    if isinstance(action, OpenUrl):
        log.info("Opening %s", action.url)
        host.open_url(action.url)
        return f"Opened {action.url}"

    if isinstance(action, RunCommand):
        cmd = action.command
        log.info("Running tags=%s views=%s spawn=%s", cmd.tags, cmd.views, cmd.spawn)
        for t in cmd.tags:
            host.ensure_tag(t)
        for v in cmd.views:
            host.ensure_view(v, cmd.tags)
        launched: list[str] = []
        failed: list[str] = []
        for s in cmd.spawn:
            try:
                host.spawn(s, cmd.tags)
            except UnsupportedTarget as e:
                failed.append(str(e))
            else:
                launched.append(s)
        if failed:
            if launched:
                raise UnsupportedTarget(f"Launched {' '.join(launched)}; " + "; ".join(failed))
            raise UnsupportedTarget("; ".join(failed))
        if launched:
            return f"Launched {' '.join(launched)}"
        return "Updated " + " ".join([*(f"#{t}" for t in cmd.tags), *(f"@{v}" for v in cmd.views)])

    raise TypeError(f"unsupported action: {action!r}")
