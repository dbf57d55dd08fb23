from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_FORMAT = "%(asctime)s %(levelname)s [pid %(process)d] %(name)s: %(message)s"


def _level(requested: str | None) -> int:
    # $SUBLAUNCH_LOG_LEVEL overrides the configured level
    name = (os.environ.get("SUBLAUNCH_LOG_LEVEL") or requested or "INFO").upper().strip()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def setup_logging(
    *,
    level: str | None = None,
    log_path: Path | None = None,
    name: str = "sublaunch",
) -> logging.Logger:
    """Configure the root logger for the launcher.

    Safe to call again once the config is loaded: the level is updated and a
    rotating file handler is added for ``log_path`` if none writes there yet.
    One-shot subcommands pass no path and only log to stderr.
    """
    fmt = logging.Formatter(LOG_FORMAT)

    root = logging.getLogger()
    root.setLevel(_level(level))

    if not any(type(h) is logging.StreamHandler for h in root.handlers):
        sh = logging.StreamHandler()
        sh.setFormatter(fmt)
        root.addHandler(sh)

    if log_path is None:
        return logging.getLogger(name)

    target = str(log_path)
    if any(isinstance(h, RotatingFileHandler) and h.baseFilename == os.path.abspath(target) for h in root.handlers):
        return logging.getLogger(name)

    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(
            target,
            maxBytes=1_000_000,
            backupCount=3,
            encoding="utf-8",
        )
    except OSError as e:
        logging.getLogger(name).warning("File logging disabled: %s", e)
    else:
        fh.setFormatter(fmt)
        root.addHandler(fh)

    return logging.getLogger(name)
