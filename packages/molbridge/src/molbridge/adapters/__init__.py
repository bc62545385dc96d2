"""Adapters for external programs.

Guidelines:
- Adapters never parse tool formats themselves; mapping strategies do.
- Soft failures come back as ``Outcome`` values, real errors propagate.
"""

from molbridge.adapters.base import ExternalAdapter, MappingContext, MapStrategy
from molbridge.adapters.results import (
    AdapterConfigError,
    AdapterNotConfigured,
    MappingError,
    NotConfigured,
    Outcome,
    ProcessResult,
    Success,
)

__all__ = [
    "ExternalAdapter",
    "MappingContext",
    "MapStrategy",
    "AdapterConfigError",
    "AdapterNotConfigured",
    "MappingError",
    "NotConfigured",
    "Outcome",
    "ProcessResult",
    "Success",
]
