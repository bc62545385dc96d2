import logging
from pathlib import Path

import numpy as np

from molbridge.domain.molecule import Molecule


class XYZFormatError(ValueError):
    """Domain-specific exception for malformed XYZ files."""


def format_xyz(mol, comment=None):
    """
    Render a Molecule in XYZ format.

    The comment line defaults to the molecule name; coordinates are written with
    eight decimals.
    """
    comment = mol.name if comment is None else comment
    lines = [str(mol.natoms), comment.replace("\n", " ")]
    for sym, (x, y, z) in zip(mol.symbols, mol.coords):
        lines.append(f"{sym:<3s} {x:16.8f} {y:16.8f} {z:16.8f}")
    return "\n".join(lines) + "\n"


def write_xyz(mol, path, comment=None):
    text = format_xyz(mol, comment)
    Path(path).write_text(text)
    logging.debug(f"[xyz] Wrote {mol.natoms} atoms to {path}")
    return text


def parse_xyz(text, name=""):
    """
    Parse the first frame of an XYZ document.

    Parameters:
    - text (str): File contents.
    - name (str, optional): Molecule name; falls back to the comment line.

    Returns:
    - Molecule

    Raises:
    - XYZFormatError: On a bad atom count or a short/garbled atom line.
    """
    lines = text.splitlines()
    if not lines:
        raise XYZFormatError("Empty XYZ document")
    try:
        natoms = int(lines[0].split()[0])
    except (ValueError, IndexError) as e:
        raise XYZFormatError(f"Bad atom count line: {lines[0]!r}") from e
    if len(lines) < natoms + 2:
        raise XYZFormatError(f"Expected {natoms} atom lines, found {max(len(lines) - 2, 0)}")

    comment = lines[1].strip()
    symbols = []
    coords = np.zeros((natoms, 3))
    for i, line in enumerate(lines[2 : natoms + 2]):
        parts = line.split()
        if len(parts) < 4:
            raise XYZFormatError(f"Atom line {i + 1} too short: {line!r}")
        symbols.append(parts[0])
        try:
            coords[i] = [float(v) for v in parts[1:4]]
        except ValueError as e:
            raise XYZFormatError(f"Non-numeric coordinate on atom line {i + 1}: {line!r}") from e
    return Molecule(symbols=symbols, coords=coords, name=name or comment)


def read_xyz(path, name=""):
    path = Path(path)
    return parse_xyz(path.read_text(), name=name or path.stem)
