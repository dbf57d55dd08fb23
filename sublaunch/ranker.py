from __future__ import annotations

from typing import NamedTuple

from sublaunch.distance import EditDistance
from sublaunch.pools import CandidatePools

SIGILS = ("#", "@")


class Guess(NamedTuple):
    suggestion: str
    score: int


def last_token(text: str) -> str:
    parts = (text or "").split()
    return parts[-1] if parts else ""


def splice(text: str, suggestion: str) -> str:
    """Replace the last token of ``text`` with ``suggestion``."""
    token = last_token(text)
    if not token:
        return (text or "") + suggestion
    head = text.rstrip()
    return head[: len(head) - len(token)] + suggestion


def select_pool(pools: CandidatePools, token: str) -> tuple[str, tuple[str, ...]]:
    if token.startswith("#"):
        return "#", pools.tags
    if token.startswith("@"):
        return "@", pools.views
    if not token:
        return "", ()
    return "", pools.executables_for(token[0])


class Ranker:
    def __init__(self, dist: EditDistance | None = None) -> None:
        self._dist = dist or EditDistance()

    def guesses(self, pools: CandidatePools, token: str) -> list[Guess]:
        if not token:
            return []
        prefix, names = select_pool(pools, token)
        if not names:
            return []
        needle = token[len(prefix):]
        scored = [Guess(f"{prefix}{name}", self._dist(needle, name)) for name in names]
        # list.sort is stable: equal scores keep pool order
        scored.sort(key=lambda g: g.score)
        return scored

    def rank(self, pools: CandidatePools, token: str, select_index: int) -> str | None:
        if select_index < 0:
            return None
        found = self.guesses(pools, token)
        if select_index >= len(found):
            return None
        return found[select_index].suggestion
