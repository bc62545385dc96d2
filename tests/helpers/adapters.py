# tests/helpers/adapters.py
from molbridge.adapters.base import ExternalAdapter


class Recorder:
    """Mapping strategy that remembers every call."""

    def __init__(self, result="mapped"):
        self.calls = []
        self.result = result

    def __call__(self, ctx, mol):
        self.calls.append((ctx, mol))
        return self.result


class EchoAdapter(ExternalAdapter):
    """Adapter whose default strategies just hand back their context."""

    @classmethod
    def default_map_in(cls):
        return lambda ctx, mol: ctx

    @classmethod
    def default_map_out(cls):
        return lambda ctx, mol: ctx
