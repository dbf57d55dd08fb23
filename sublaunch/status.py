from __future__ import annotations

import json
import time
from dataclasses import asdict, dataclass
from pathlib import Path


@dataclass
class StatusSnapshot:
    state: str = "starting"  # starting|idle|typing|completing|launching|error
    message: str = ""
    input: str = ""
    last_error: str = ""
    ts: float = 0.0


class StatusWriter:
    """Publishes the launcher status line as a small JSON file for panels/bars."""

    def __init__(self, *, path: Path, min_interval_s: float = 0.1) -> None:
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._min_interval_s = min_interval_s
        self._snapshot = StatusSnapshot()

    @property
    def snapshot(self) -> StatusSnapshot:
        return self._snapshot

    def update(
        self,
        *,
        state: str | None = None,
        message: str | None = None,
        input: str | None = None,
        last_error: str | None = None,
        force: bool = False,
    ) -> bool:
        if state is not None:
            self._snapshot.state = state
        if message is not None:
            self._snapshot.message = message
        if input is not None:
            self._snapshot.input = input
        if last_error is not None:
            self._snapshot.last_error = last_error

        now = time.time()
        if not force and (now - self._snapshot.ts) < self._min_interval_s:
            return False

        self._snapshot.ts = now
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp.write_text(json.dumps(asdict(self._snapshot), ensure_ascii=False), encoding="utf-8")
        tmp.replace(self._path)
        return True


def read_status(path: Path) -> dict:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
