from __future__ import annotations

from pathlib import Path
from typing import Any

from ruamel.yaml import YAML


def _yaml() -> YAML:
    y = YAML()
    y.preserve_quotes = True
    y.indent(mapping=2, sequence=4, offset=2)
    return y


def _split_key(dotted_key: str) -> list[str]:
    parts = [p for p in (dotted_key or "").split(".") if p]
    if not parts:
        raise ValueError("dotted_key must be like 'section.key'")
    return parts


def read_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as f:
        data = _yaml().load(f)
    return data if isinstance(data, dict) else {}


def write_yaml(path: Path, data: dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    with tmp.open("w", encoding="utf-8") as f:
        _yaml().dump(data, f)
    tmp.replace(path)


def get_dotted(path: Path, dotted_key: str, default: Any = None) -> Any:
    cur: Any = read_yaml(path)
    for p in _split_key(dotted_key):
        if not isinstance(cur, dict) or p not in cur:
            return default
        cur = cur[p]
    return cur


def parse_scalar(s: str) -> Any:
    low = s.strip().lower()
    if low in ("null", "none", "~"):
        return None
    if low in ("true", "yes", "on"):
        return True
    if low in ("false", "no", "off"):
        return False
    try:
        return int(low)
    except ValueError:
        pass
    try:
        return float(low)
    except ValueError:
        return s


def set_dotted(path: Path, dotted_key: str, value: Any) -> None:
    parts = _split_key(dotted_key)
    data = read_yaml(path)
    cur: dict[str, Any] = data
    for p in parts[:-1]:
        nxt = cur.get(p)
        if not isinstance(nxt, dict):
            nxt = {}
            cur[p] = nxt
        cur = nxt
    cur[parts[-1]] = parse_scalar(value) if isinstance(value, str) else value
    write_yaml(path, data)


def toggle_dotted(path: Path, dotted_key: str) -> bool:
    new = not bool(get_dotted(path, dotted_key, default=False))
    set_dotted(path, dotted_key, new)
    return new
