import logging
import os
import stat
import textwrap

import pytest


FAKECALC = textwrap.dedent(
    """\
    #!/bin/sh
    # fake external program: reads an XYZ file, reports atom count and a dummy energy
    if [ ! -f "$1" ]; then
        echo "fakecalc: cannot open '$1'" >&2
        exit 3
    fi
    n=$(head -n 1 "$1" | tr -d ' ')
    echo "natoms=$n"
    echo "energy=-1.5"
    echo "fakecalc done" >&2
    """
)


@pytest.fixture
def shim_bin(tmp_path):
    """Directory with a fake `fakecalc` executable; put it on PATH in the test."""
    d = tmp_path / "shim_bin"
    d.mkdir()
    exe = d / "fakecalc"
    exe.write_text(FAKECALC)
    exe.chmod(exe.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return d


@pytest.fixture(autouse=True)
def _restore_cwd_and_logging():
    cwd = os.getcwd()
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in [h for h in root.handlers if h not in handlers]:
        root.removeHandler(h)
        h.close()
    root.setLevel(level)
    os.chdir(cwd)
