"""Scratch-directory scoping for adapter operations.

By default the scratch directory is handed to the wrapped operation (and to
``subprocess``) as an explicit working directory; the process-wide cwd is left
alone. ``chdir=True`` restores the older behaviour of really changing into the
scratch directory for mapping functions that rely on relative paths.
"""
from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
import logging
import os
import threading
import typing as t

T = t.TypeVar("T")

# cwd is one value per process; chdir-mode scopes take turns
_CWD_LOCK = threading.RLock()


@contextmanager
def _pushd(path: Path):
    with _CWD_LOCK:
        prev = os.getcwd()
        os.chdir(path)
        try:
            yield
        finally:
            os.chdir(prev)


class ScratchScope:
    def __init__(self, scratch: str | os.PathLike | None = None, chdir: bool = False):
        self.scratch: Path | None = Path(scratch).expanduser().resolve() if scratch else None
        self.chdir = chdir

    def __repr__(self) -> str:
        return f"ScratchScope(scratch={self.scratch!r}, chdir={self.chdir})"

    @property
    def active(self) -> bool:
        return self.scratch is not None

    @property
    def workdir(self) -> Path:
        return self.scratch if self.scratch is not None else Path.cwd()

    def ensure(self) -> Path | None:
        """Create the scratch directory (with parents) if it is configured and missing."""
        if self.scratch is None:
            return None
        if not self.scratch.is_dir():
            self.scratch.mkdir(parents=True, exist_ok=True)
            logging.info(f"[scratch] Created scratch directory: {self.scratch}")
        return self.scratch

    def resolve(self, path: str | os.PathLike | None) -> Path | None:
        """Absolute form of ``path``; relative paths are anchored at the working directory."""
        if path is None:
            return None
        p = Path(path).expanduser()
        return p if p.is_absolute() else self.workdir / p

    @contextmanager
    def entered(self):
        """Yield the effective working directory for the duration of the block."""
        if self.scratch is None:
            yield Path.cwd()
        elif not self.chdir:
            yield self.scratch
        else:
            logging.debug(f"[scratch] chdir -> {self.scratch}")
            with _pushd(self.scratch):
                yield self.scratch

    def run(self, operation: t.Callable[[Path], T]) -> T:
        with self.entered() as workdir:
            return operation(workdir)
