"""Capability mixins (executable + file locations) consumed by the adapters."""

from molbridge.roles.exe import ExeAttributes
from molbridge.roles.paths import PathAttributes

__all__ = ["ExeAttributes", "PathAttributes"]
