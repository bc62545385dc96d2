"""Executable attributes shared by adapters."""
from __future__ import annotations

import shlex
import shutil


class ExeAttributes:
    """``exe`` (program, possibly with leading options) and ``exe_endops`` (trailing options)."""

    exe: str | None = None
    exe_endops: str | None = None

    @property
    def has_exe(self) -> bool:
        return bool(self.exe)

    @property
    def has_exe_endops(self) -> bool:
        return bool(self.exe_endops)

    def exe_path(self) -> str | None:
        """Resolved location of the program named by the first word of ``exe``."""
        if not self.exe:
            return None
        try:
            program = shlex.split(self.exe)[0]
        except (ValueError, IndexError):
            return None
        return shutil.which(program)

    def exists_exe(self) -> bool:
        return self.exe_path() is not None
