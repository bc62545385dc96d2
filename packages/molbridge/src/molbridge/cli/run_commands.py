import logging
import os
import subprocess
from pathlib import Path

from molbridge.adapters.results import ProcessResult


def _listing(path):
    try:
        return set(os.listdir(path))
    except FileNotFoundError:
        return set()


def capture_command(command, cwd=None):
    """
    Runs a shell command, capturing everything it writes, and logs any new files
    or directories created in the working directory.

    Parameters:
    - command (str): The shell command to execute.
    - cwd (str | Path, optional): The working directory in which to execute the command.

    Returns:
    - ProcessResult: stdout, stderr and the return code. A non-zero exit status is
      reported, not raised; deciding whether it is a failure is up to the caller.
    """
    workdir = Path(cwd) if cwd else Path.cwd()
    logging.info(f"[run] Executing command: {command} (cwd={workdir})")

    before_items = _listing(workdir)
    proc = subprocess.run(
        command,
        shell=True,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        # legacy codes print Latin-1 or binary junk; keep it as data
        errors="replace",
        cwd=cwd,
    )
    after_items = _listing(workdir)

    new_items = tuple(sorted(after_items - before_items))
    if new_items:
        logging.info(f"[run] New files/folders created by '{command}': {', '.join(new_items)}")
    else:
        logging.debug(f"[run] No new files/folders created by '{command}'.")

    if proc.returncode != 0:
        logging.warning(f"[run] '{command}' exited with status {proc.returncode}")
    if proc.stderr:
        logging.debug(proc.stderr.rstrip())

    return ProcessResult(
        command=command,
        stdout=proc.stdout,
        stderr=proc.stderr,
        returncode=proc.returncode,
        workdir=workdir,
        new_items=new_items,
    )
