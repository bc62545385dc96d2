"""File-location attributes shared by adapters.

``in_fn``/``out_fn``/``log_fn`` are kept exactly as configured (relative paths stay
relative, they are interpreted against the working directory of the run). The
scratch directory is always stored absolute.
"""
from __future__ import annotations

from pathlib import Path
import os

from molbridge.infra.scratch import ScratchScope


def _as_path(value: str | os.PathLike | None) -> Path | None:
    if value is None or value == "":
        return None
    return Path(value).expanduser()


class PathAttributes:
    _in_fn: Path | None = None
    _out_fn: Path | None = None
    _log_fn: Path | None = None
    _scope: ScratchScope | None = None

    def _scratch_scope(self) -> ScratchScope:
        # per instance; mixin users that never configure scratch get a cwd-only scope
        if self._scope is None:
            self._scope = ScratchScope()
        return self._scope

    @property
    def in_fn(self) -> Path | None:
        return self._in_fn

    @in_fn.setter
    def in_fn(self, value):
        self._in_fn = _as_path(value)

    @property
    def out_fn(self) -> Path | None:
        return self._out_fn

    @out_fn.setter
    def out_fn(self, value):
        self._out_fn = _as_path(value)

    @property
    def log_fn(self) -> Path | None:
        return self._log_fn

    @log_fn.setter
    def log_fn(self, value):
        self._log_fn = _as_path(value)

    @property
    def scratch(self) -> Path | None:
        return self._scratch_scope().scratch

    @property
    def has_in_fn(self) -> bool:
        return self._in_fn is not None

    @property
    def has_out_fn(self) -> bool:
        return self._out_fn is not None

    @property
    def has_log_fn(self) -> bool:
        return self._log_fn is not None

    @property
    def has_scratch(self) -> bool:
        return self._scratch_scope().active

    # absolute accessors, resolved against scratch (or cwd when no scratch is set)
    def in_path(self) -> Path | None:
        return self._scratch_scope().resolve(self._in_fn)

    def out_path(self) -> Path | None:
        return self._scratch_scope().resolve(self._out_fn)

    def log_path(self) -> Path | None:
        return self._scratch_scope().resolve(self._log_fn)

    def in_fn_exists(self) -> bool:
        p = self.in_path()
        return p is not None and p.exists()

    def out_fn_exists(self) -> bool:
        p = self.out_path()
        return p is not None and p.exists()
