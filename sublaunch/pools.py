from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping


DEFAULT_EXECUTABLE_DIRS = (Path("/usr/bin"),)


def _unique(names: Iterable[str]) -> tuple[str, ...]:
    seen: set[str] = set()
    out: list[str] = []
    for n in names:
        if not n or n in seen:
            continue
        seen.add(n)
        out.append(n)
    return tuple(out)


def index_by_first_char(names: Iterable[str]) -> dict[str, tuple[str, ...]]:
    buckets: dict[str, list[str]] = {}
    for n in _unique(names):
        buckets.setdefault(n[0], []).append(n)
    return {k: tuple(v) for k, v in buckets.items()}


@dataclass(frozen=True)
class CandidatePools:
    """One immutable snapshot of completion candidates.

    The executable index is held read-only and left out of the hash, so a
    snapshot can be hashed by its tags and views.
    """

    tags: tuple[str, ...] = ()
    views: tuple[str, ...] = ()
    executables: Mapping[str, tuple[str, ...]] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        if not isinstance(self.executables, MappingProxyType):
            object.__setattr__(self, "executables", MappingProxyType(dict(self.executables)))

    @classmethod
    def from_names(
        cls,
        *,
        tags: Iterable[str] = (),
        views: Iterable[str] = (),
        executables: Iterable[str] = (),
    ) -> CandidatePools:
        return cls(
            tags=_unique(tags),
            views=_unique(views),
            executables=index_by_first_char(executables),
        )

    def executables_for(self, first: str) -> tuple[str, ...]:
        return self.executables.get(first, ())

    @property
    def executable_count(self) -> int:
        return sum(len(v) for v in self.executables.values())


def path_dirs() -> list[Path]:
    raw = os.environ.get("PATH") or ""
    return [Path(p) for p in raw.split(os.pathsep) if p]


def _iter_executables(dirs: Iterable[Path]) -> Iterable[str]:
    for d in dirs:
        if not d.is_dir():
            continue
        try:
            entries = sorted(d.iterdir())
        except OSError:
            continue
        for p in entries:
            if p.is_file() and os.access(p, os.X_OK):
                yield p.name


def scan_executables(dirs: Iterable[Path | str] = DEFAULT_EXECUTABLE_DIRS) -> list[str]:
    """Executable names found in ``dirs``, sorted per directory, first hit wins."""
    return list(_unique(_iter_executables(Path(d).expanduser() for d in dirs)))
