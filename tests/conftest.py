from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import pytest

from sublaunch.executor import UnsupportedTarget


@dataclass
class FakeHost:
    tags: list[str] = field(default_factory=list)
    views: list[str] = field(default_factory=list)
    executables: list[str] = field(default_factory=list)
    browser_ok: bool = True
    broken: set[str] = field(default_factory=set)
    calls: list[tuple] = field(default_factory=list)

    def tag_names(self) -> list[str]:
        return list(self.tags)

    def view_names(self) -> list[str]:
        return list(self.views)

    def executable_names(self) -> list[str]:
        return list(self.executables)

    def open_url(self, url: str) -> None:
        if not self.browser_ok:
            raise UnsupportedTarget("No supported browser found")
        self.calls.append(("open_url", url))

    def ensure_tag(self, name: str) -> None:
        self.calls.append(("ensure_tag", name))
        if name not in self.tags:
            self.tags.append(name)

    def ensure_view(self, name: str, tags: tuple[str, ...]) -> None:
        self.calls.append(("ensure_view", name, tags))
        if name not in self.views:
            self.views.append(name)

    def spawn(self, command: str, tags: tuple[str, ...]) -> None:
        self.calls.append(("spawn", command, tags))
        if command in self.broken:
            raise UnsupportedTarget(f"Executable not found: {command}")


@pytest.fixture
def fake_host() -> FakeHost:
    return FakeHost(
        tags=["work", "web", "media"],
        views=["editor", "www", "mail"],
        executables=["urxvt", "uname", "uptime", "firefox", "fetchmail", "chromium"],
    )


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    p = tmp_path / "config.yaml"
    p.write_text("launcher:\n  idle_status: Idle\n", encoding="utf-8")
    return p
