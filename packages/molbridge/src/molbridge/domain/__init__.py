"""Molecule records passed through adapters as opaque domain objects."""

from molbridge.domain.molecule import Molecule

__all__ = ["Molecule"]
