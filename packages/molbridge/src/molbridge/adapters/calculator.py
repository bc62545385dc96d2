"""Generic calculator adapter.

Writes the molecule as an XYZ file to ``in_fn`` and hands back the raw text of
``out_fn``. Good enough for any program that accepts XYZ input; anything more
specific should pass its own ``map_in``/``map_out``.
"""
from __future__ import annotations

import logging

from molbridge.adapters.base import ExternalAdapter, MappingContext
from molbridge.domain.molecule import Molecule
from molbridge.io.xyz import write_xyz


def xyz_map_in(ctx: MappingContext, mol):
    if not isinstance(mol, Molecule):
        raise TypeError(f"xyz_map_in needs a Molecule, got {type(mol).__name__}")
    return write_xyz(mol, ctx.input_path, comment=ctx.options.get("comment"))


def text_map_out(ctx: MappingContext, mol):
    path = ctx.output_path
    if not path.is_file():
        raise FileNotFoundError(f"Output file '{path}' was not created")
    return path.read_text()


class Calculator(ExternalAdapter):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        if self.exe:
            self.build_command()
            logging.info(f"[calculator] command: {self.command}")

    @classmethod
    def default_map_in(cls):
        return xyz_map_in

    @classmethod
    def default_map_out(cls):
        return text_map_out
