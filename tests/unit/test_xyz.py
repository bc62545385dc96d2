import numpy as np
import pytest

from molbridge.domain.molecule import Molecule
from molbridge.io.xyz import XYZFormatError, format_xyz, parse_xyz, read_xyz, write_xyz


def _water():
    return Molecule(
        symbols=["O", "H", "H"],
        coords=[[0.0, 0.0, 0.1173], [0.0, 0.7572, -0.4692], [0.0, -0.7572, -0.4692]],
        name="water",
    )


def test_format_xyz_layout():
    text = format_xyz(_water())
    lines = text.splitlines()
    assert lines[0] == "3"
    assert lines[1] == "water"
    assert lines[2].split()[0] == "O"
    assert float(lines[3].split()[2]) == pytest.approx(0.7572)
    assert text.endswith("\n")


def test_write_then_read_file(tmp_path):
    path = tmp_path / "w.xyz"
    write_xyz(_water(), path, comment="a comment")
    mol = read_xyz(path)
    assert mol.name == "w"
    assert mol.symbols == ["O", "H", "H"]
    np.testing.assert_allclose(mol.coords, _water().coords)


def test_parse_uses_comment_as_name():
    mol = parse_xyz("1\nhelium atom\nHe 0 0 0\n")
    assert mol.name == "helium atom"
    assert mol.natoms == 1


@pytest.mark.parametrize(
    "text",
    [
        "",
        "x\n\nH 0 0 0\n",
        "2\n\nH 0 0 0\n",
        "1\n\nH 0 0\n",
        "1\n\nH 0 a 0\n",
    ],
)
def test_parse_errors(text):
    with pytest.raises(XYZFormatError):
        parse_xyz(text)


def test_molecule_checks_shapes():
    with pytest.raises(ValueError):
        Molecule(symbols=["H"], coords=np.zeros((2, 3)))
    m = Molecule(symbols=["H", "H"], coords=[[0, 0, 0], [0, 0, 2]])
    np.testing.assert_allclose(m.centroid(), [0, 0, 1])
