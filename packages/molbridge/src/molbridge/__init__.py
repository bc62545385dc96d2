"""molbridge: drive file-based external programs from Python.

Build a command, write the input, run it in a scratch directory, read the output.
"""

__version__ = "0.1.0"

from molbridge.adapters import (  # noqa: E402
    ExternalAdapter,
    MappingContext,
    NotConfigured,
    ProcessResult,
    Success,
)
from molbridge.adapters.calculator import Calculator  # noqa: E402

__all__ = [
    "__version__",
    "Calculator",
    "ExternalAdapter",
    "MappingContext",
    "NotConfigured",
    "ProcessResult",
    "Success",
]
