"""Logging setup for molbridge runs (root logger, file + console)."""
from __future__ import annotations

import logging
import os
from logging.handlers import WatchedFileHandler
from pathlib import Path

FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def _env_level(default: str = "INFO") -> int:
    name = os.getenv("MOLBRIDGE_LOG_LEVEL", default).upper()
    return getattr(logging, name, logging.INFO)


def setup_logging(log_path, also_console: bool = True, level: str | None = None) -> None:
    """
    Ensure the root logger writes to ``log_path``.

    Idempotent: a second call with the same path keeps the existing handler; a call
    with a different path replaces the old file handler. At most one console handler
    is installed. ``MOLBRIDGE_LOG_LEVEL`` wins over ``level``.
    """
    path = Path(log_path).resolve()
    root = logging.getLogger()
    desired = _env_level(level or "INFO")
    root.setLevel(desired)
    fmt = logging.Formatter(FORMAT)

    existing_same = False
    for h in list(root.handlers):
        if isinstance(h, logging.FileHandler):
            if Path(h.baseFilename).resolve() == path:
                existing_same = True
            else:
                root.removeHandler(h)
                h.close()

    # exact type: leaves file handlers and foreign StreamHandler subclasses alone
    consoles = [h for h in root.handlers if type(h) is logging.StreamHandler]
    if also_console and not consoles:
        ch = logging.StreamHandler()
        ch.setLevel(desired)
        ch.setFormatter(fmt)
        root.addHandler(ch)
    elif not also_console:
        for h in consoles:
            root.removeHandler(h)
            h.close()

    if not existing_same:
        path.parent.mkdir(parents=True, exist_ok=True)
        fh = WatchedFileHandler(path, mode="a", encoding="utf-8", delay=False)
        fh.setLevel(desired)
        fh.setFormatter(fmt)
        root.addHandler(fh)
        root.info(f"Logging initialized. Log file: {path} (level={logging.getLevelName(desired)})")


def log_run_header(action: str):
    from molbridge import __version__

    logging.getLogger().info(f"molbridge {__version__} | action={action}")
