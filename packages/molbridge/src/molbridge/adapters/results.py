"""Result objects returned by adapter operations.

Adapter steps never signal a missing configuration with an exception; they return
an ``Outcome`` instead. ``Success`` is always truthy (even when wrapping ``0`` or
``None``), ``NotConfigured`` and ``MappingError`` are always falsy, so callers
written against the old "0 means nothing happened" convention keep working.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import signal as _signal
import typing as t


class AdapterConfigError(Exception):
    """Raised when an adapter cannot be constructed (e.g. no mapping strategy)."""


class AdapterNotConfigured(Exception):
    """Raised by ``NotConfigured.unwrap`` to turn a soft failure into a hard one."""

    def __init__(self, reason: str, message: str = ""):
        self.reason = reason
        super().__init__(message or f"adapter not configured: {reason}")


@dataclass(frozen=True)
class Success:
    value: t.Any = None

    def __bool__(self) -> bool:
        return True

    def unwrap(self):
        return self.value


@dataclass(frozen=True)
class NotConfigured:
    """Precondition not met. ``reason`` names the missing piece."""

    reason: str
    message: str = ""

    def __bool__(self) -> bool:
        return False

    def unwrap(self):
        raise AdapterNotConfigured(self.reason, self.message)


@dataclass(frozen=True)
class MappingError:
    cause: BaseException

    def __bool__(self) -> bool:
        return False

    def unwrap(self):
        raise self.cause


Outcome = t.Union[Success, NotConfigured, MappingError]


@dataclass(frozen=True)
class ProcessResult:
    """Captured output and termination status of one external command."""

    command: str
    stdout: str
    stderr: str
    returncode: int
    workdir: Path | None = None
    new_items: tuple[str, ...] = field(default=(), compare=False)

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def signal(self) -> str | None:
        # subprocess reports death-by-signal as a negative return code
        if self.returncode >= 0:
            return None
        try:
            return _signal.Signals(-self.returncode).name
        except ValueError:
            return f"SIG{-self.returncode}"

    def __iter__(self):
        return iter((self.stdout, self.stderr, self.returncode))
