from __future__ import annotations

import itertools
import uuid
from dataclasses import dataclass, replace
from typing import Callable, Iterable

TagFactory = Callable[[], str]


@dataclass(frozen=True)
class CommandDescriptor:
    tags: tuple[str, ...] = ()
    views: tuple[str, ...] = ()
    spawn: tuple[str, ...] = ()
    synthetic_tag: bool = False

    @property
    def needs_adhoc_tag(self) -> bool:
        return bool(self.views and self.spawn and not self.tags)

    def as_dict(self) -> dict[str, object]:
        return {
            "tags": list(self.tags),
            "views": list(self.views),
            "spawn": list(self.spawn),
            "synthetic_tag": self.synthetic_tag,
        }


@dataclass(frozen=True)
class OpenUrl:
    url: str


@dataclass(frozen=True)
class RunCommand:
    command: CommandDescriptor


Action = OpenUrl | RunCommand


class UuidTagFactory:
    def __init__(self, *, prefix: str = "adhoc-", length: int = 12) -> None:
        self._prefix = prefix
        self._length = length

    def __call__(self) -> str:
        return f"{self._prefix}{uuid.uuid4().hex[: self._length]}"


class CounterTagFactory:
    def __init__(self, *, prefix: str = "adhoc-", start: int = 1) -> None:
        self._prefix = prefix
        self._counter = itertools.count(start)

    def __call__(self) -> str:
        return f"{self._prefix}{next(self._counter)}"


def make_tag_factory(style: str) -> TagFactory:
    if style == "counter":
        return CounterTagFactory()
    if style == "uuid":
        return UuidTagFactory()
    raise ValueError(f"unknown ad-hoc tag style: {style!r}")


def _dedup(items: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(items))


def split_command(text: str) -> CommandDescriptor:
    tags: list[str] = []
    views: list[str] = []
    spawn: list[str] = []
    for arg in (text or "").split():
        if arg.startswith("#"):
            bucket, name = tags, arg[1:]
        elif arg.startswith("@"):
            bucket, name = views, arg[1:]
        else:
            bucket, name = spawn, arg
        if name:
            bucket.append(name)
    return CommandDescriptor(tags=_dedup(tags), views=_dedup(views), spawn=_dedup(spawn))


def apply_adhoc_policy(desc: CommandDescriptor, tag_factory: TagFactory) -> CommandDescriptor:
    if not desc.needs_adhoc_tag:
        return desc
    return replace(desc, tags=(tag_factory(),), synthetic_tag=True)


def parse_command(text: str, *, tag_factory: TagFactory | None = None) -> CommandDescriptor:
    return apply_adhoc_policy(split_command(text), tag_factory or UuidTagFactory())
