"""Base class for adapters that drive a file-based external program.

An adapter knows how to

* build the shell command (``exe [in_fn] [exe_endops] [> out_fn]``),
* write the program's input from a domain object (``map_input``),
* run the command and capture stdout/stderr/exit status (``run_command``),
* turn the program's output back into something useful (``map_output``).

Everything format-specific lives in the two mapping strategies. Subclasses
provide defaults by overriding ``default_map_in`` / ``default_map_out``; callers
can pass their own strategies to the constructor instead.

Example::

    calc = MyAdapter(exe="orca", in_fn="mol.inp", out_fn="mol.out",
                     scratch="/tmp/run1", mol=mol)
    calc.map_input()
    calc.run_command()
    energy = calc.map_output().unwrap()
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import logging
import os
import typing as t

from molbridge.adapters.results import (
    AdapterConfigError,
    MappingError,
    NotConfigured,
    Outcome,
    ProcessResult,
    Success,
)
from molbridge.cli.run_commands import capture_command
from molbridge.infra.scratch import ScratchScope
from molbridge.roles import ExeAttributes, PathAttributes

T = t.TypeVar("T")


@dataclass(frozen=True)
class MappingContext:
    """Everything a mapping strategy gets besides the domain object."""

    adapter: "ExternalAdapter"
    workdir: Path
    input_path: Path | None = None
    output_path: Path | None = None
    args: tuple = ()
    options: t.Mapping[str, t.Any] = field(default_factory=dict)


MapStrategy = t.Callable[[MappingContext, t.Any], t.Any]


class ExternalAdapter(ExeAttributes, PathAttributes):
    def __init__(
        self,
        exe: str | None = None,
        *,
        in_fn: str | os.PathLike | None = None,
        out_fn: str | os.PathLike | None = None,
        log_fn: str | os.PathLike | None = None,
        exe_endops: str | None = None,
        scratch: str | os.PathLike | None = None,
        chdir_scratch: bool = False,
        create_scratch: bool = True,
        mol: t.Any = None,
        map_in: MapStrategy | None = None,
        map_out: MapStrategy | None = None,
        capture_errors: bool = False,
    ):
        self.exe = exe
        self.exe_endops = exe_endops
        self.in_fn = in_fn
        self.out_fn = out_fn
        self.log_fn = log_fn
        self._scope = ScratchScope(scratch, chdir=chdir_scratch)
        self.mol = mol
        self.capture_errors = capture_errors
        self._command: str | None = None

        self._map_in = self._resolve_strategy("map_in", map_in, self.default_map_in)
        self._map_out = self._resolve_strategy("map_out", map_out, self.default_map_out)

        if create_scratch:
            self._scope.ensure()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(exe={self.exe!r}, in_fn={self.in_fn!r}, "
            f"out_fn={self.out_fn!r}, scratch={self.scratch!r})"
        )

    # ------------------------------------------------------------------
    # strategy resolution
    # ------------------------------------------------------------------
    @classmethod
    def default_map_in(cls) -> MapStrategy | None:
        return None

    @classmethod
    def default_map_out(cls) -> MapStrategy | None:
        return None

    def _resolve_strategy(self, name, explicit, factory):
        strategy = explicit if explicit is not None else factory()
        if strategy is None:
            raise AdapterConfigError(
                f"{type(self).__name__}: no {name} given and no default_{name}() factory available"
            )
        if not callable(strategy):
            raise AdapterConfigError(f"{type(self).__name__}: {name} must be callable, got {strategy!r}")
        return strategy

    @property
    def map_in(self) -> MapStrategy:
        return self._map_in

    @property
    def map_out(self) -> MapStrategy:
        return self._map_out

    @property
    def has_mol(self) -> bool:
        return self.mol is not None

    # ------------------------------------------------------------------
    # command
    # ------------------------------------------------------------------
    @property
    def command(self) -> str | None:
        return self._command

    @property
    def has_command(self) -> bool:
        return bool(self._command)

    def build_command(self) -> str | None:
        # exe -options file.inp -moreoptions > file.out
        if not self.exe:
            logging.debug(f"[adapter] {type(self).__name__}: no executable configured; no command built")
            return None
        cmd = str(self.exe)
        if self.has_in_fn:
            cmd += " " + str(self.in_fn)
        if self.has_exe_endops:
            cmd += " " + self.exe_endops
        if self.has_out_fn:
            cmd += " > " + str(self.out_fn)
        # reading out_fn back is map_out's job
        self._command = cmd
        return cmd

    # ------------------------------------------------------------------
    # scoped execution
    # ------------------------------------------------------------------
    def scoped(self, operation: t.Callable[[Path], T]) -> T:
        """Run ``operation(workdir)`` with the scratch directory as working directory."""
        return self._scope.run(operation)

    def _context(self, workdir: Path, args: tuple, options: dict) -> MappingContext:
        return MappingContext(
            adapter=self,
            workdir=workdir,
            input_path=self.in_path(),
            output_path=self.out_path(),
            args=args,
            options=options,
        )

    def _map(self, side: str, strategy: MapStrategy, has_path: bool, args, options) -> Outcome:
        fn_attr = f"{side}_fn"
        if not has_path:
            msg = f"{fn_attr} and map_{side} attrs required to map {side}put"
            logging.warning(f"[adapter] {type(self).__name__}: {msg}")
            return NotConfigured(fn_attr, msg)

        def _call(workdir: Path):
            return strategy(self._context(workdir, tuple(args), dict(options)), self.mol)

        try:
            return Success(self.scoped(_call))
        except Exception as exc:
            if not self.capture_errors:
                raise
            logging.error(f"[adapter] map_{side} raised", exc_info=True)
            return MappingError(exc)

    def map_input(self, *args, **options) -> Outcome:
        """Write the program's input via ``map_in``. Extra arguments reach the strategy via its context."""
        return self._map("in", self._map_in, self.has_in_fn, args, options)

    def map_output(self, *args, **options) -> Outcome:
        """Read the program's output via ``map_out``."""
        return self._map("out", self._map_out, self.has_out_fn, args, options)

    # ------------------------------------------------------------------
    # process
    # ------------------------------------------------------------------
    def run_command(self, command: str | None = None) -> Outcome:
        """
        Run ``command`` (default: the last built command) and capture its output.

        Returns ``Success(ProcessResult)`` whatever the exit status is, or
        ``NotConfigured("command")`` when there is nothing to run.
        """
        if command is None:
            if not self.has_command:
                reason = "command" if self.exe else "executable"
                logging.warning(f"[adapter] {type(self).__name__}: no command to run ({reason} missing)")
                return NotConfigured(reason, "no command built or given")
            command = self._command
        try:
            result: ProcessResult = self.scoped(lambda workdir: capture_command(command, cwd=workdir))
        except Exception as exc:
            if not self.capture_errors:
                raise
            logging.error(f"[adapter] running '{command}' failed", exc_info=True)
            return MappingError(exc)
        return Success(result)

    capture_sys_command = run_command
