# packages/molbridge/src/molbridge/cli/app.py
import argparse
import logging
import sys
from pathlib import Path

from molbridge.adapters.calculator import Calculator
from molbridge.config.loader import load_config
from molbridge.infra.logging import log_run_header, setup_logging
from molbridge.io.xyz import read_xyz

EXIT_NOT_CONFIGURED = 2

DESCRIPTIONS = {
    "command": "Print the shell command assembled from the [adapter] config section.",
    "run": "Map input (optional), run the external program in its scratch directory, map output.",
}


def _build_parser():
    p = argparse.ArgumentParser("molbridge")
    sub = p.add_subparsers(dest="cmd", required=True)

    def add_cmd(name: str):
        sp = sub.add_parser(name, help=DESCRIPTIONS[name], description=DESCRIPTIONS[name])
        sp.add_argument("--project", default=".", help="Project folder holding molbridge.toml")
        sp.add_argument("--config", help="Optional extra molbridge.toml (overrides the project file)")
        return sp

    add_cmd("command")
    run = add_cmd("run")
    run.add_argument("--molecule", help="XYZ file written to in_fn before the run")
    run.add_argument("--command", dest="command_override", help="Run this instead of the built command")
    return p


def _exit_code(returncode: int) -> int:
    # shell convention for children killed by a signal
    return 128 - returncode if returncode < 0 else returncode


def _cmd_command(cfg) -> int:
    calc = Calculator(**{**cfg.adapter_kwargs(), "create_scratch": False})
    cmd = calc.build_command()
    if not cmd:
        logging.warning("No executable configured ([adapter] exe); nothing to print.")
        return EXIT_NOT_CONFIGURED
    print(cmd)
    return 0


def _cmd_run(cfg, args) -> int:
    setup_logging(cfg.log_path(), also_console=cfg.logging.console, level=cfg.logging.level)
    log_run_header("run")

    mol = read_xyz(args.molecule) if args.molecule else None
    calc = Calculator(**cfg.adapter_kwargs(), mol=mol)

    if mol is not None:
        if not calc.map_input():
            return EXIT_NOT_CONFIGURED

    outcome = calc.run_command(args.command_override)
    if not outcome:
        return EXIT_NOT_CONFIGURED
    result = outcome.value
    sys.stdout.write(result.stdout)
    sys.stderr.write(result.stderr)
    if result.signal:
        logging.error(f"'{result.command}' terminated by {result.signal}")

    if result.ok and calc.has_out_fn:
        mapped = calc.map_output()
        if mapped:
            sys.stdout.write(mapped.value)
    return _exit_code(result.returncode)


def main(argv=None):
    # Be talkative by default unless caller configured logging already
    if not logging.getLogger().handlers:
        logging.basicConfig(level=logging.INFO, format="%(message)s")

    args = _build_parser().parse_args(argv)
    cfg = load_config(Path(args.project), args.config)
    logging.info(
        f"Dispatching {args.cmd} | project={cfg.project_root}"
        + (f" | config={', '.join(str(s) for s in cfg.sources)}" if cfg.sources else " | config=<none>")
    )

    if args.cmd == "command":
        return _cmd_command(cfg)
    return _cmd_run(cfg, args)


if __name__ == "__main__":
    sys.exit(main())
