from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np


@dataclass
class Molecule:
    """Minimal molecule record: element symbols plus cartesian coordinates (Angstrom)."""

    symbols: list[str]
    coords: np.ndarray
    name: str = ""
    charge: int = 0
    multiplicity: int = 1
    properties: dict = field(default_factory=dict)

    def __post_init__(self):
        self.symbols = [str(s) for s in self.symbols]
        self.coords = np.asarray(self.coords, dtype=float).reshape(-1, 3)
        if len(self.symbols) != self.coords.shape[0]:
            raise ValueError(
                f"Symbol/coordinate count mismatch: symbols={len(self.symbols)} coords={self.coords.shape[0]}"
            )

    @property
    def natoms(self) -> int:
        return len(self.symbols)

    def centroid(self) -> np.ndarray:
        return self.coords.mean(axis=0) if self.natoms else np.zeros(3)
