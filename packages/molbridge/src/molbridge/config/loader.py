# packages/molbridge/src/molbridge/config/loader.py
from __future__ import annotations

from dataclasses import asdict, dataclass, field, is_dataclass
from pathlib import Path
import typing as t

try:
    import tomllib  # py>=3.11
except ModuleNotFoundError:  # pragma: no cover
    import tomli as tomllib

CONFIG_NAME = "molbridge.toml"


class ConfigError(ValueError):
    """A config file holds a value of the wrong type."""

# -----------------
# Dataclass schema
# -----------------

@dataclass
class AdapterSection:
    exe: str | None = None
    exe_endops: str | None = None
    in_fn: str | None = None
    out_fn: str | None = None
    log_fn: str | None = None
    scratch: str | None = None
    chdir_scratch: bool = False
    create_scratch: bool = True
    capture_errors: bool = False

@dataclass
class LoggingSection:
    level: str = "INFO"
    log_file: str = "molbridge.log"
    console: bool = True

@dataclass
class Config:
    project_root: Path
    adapter: AdapterSection = field(default_factory=AdapterSection)
    logging: LoggingSection = field(default_factory=LoggingSection)
    sources: list[Path] = field(default_factory=list)

    def scratch_path(self) -> Path | None:
        if not self.adapter.scratch:
            return None
        p = Path(self.adapter.scratch).expanduser()
        return p if p.is_absolute() else self.project_root / p

    def log_path(self) -> Path:
        p = Path(self.logging.log_file).expanduser()
        return p if p.is_absolute() else self.project_root / p

    def adapter_kwargs(self) -> dict:
        """Keyword arguments for an ``ExternalAdapter`` subclass."""
        kw = asdict(self.adapter)
        kw["scratch"] = self.scratch_path()
        return kw

# -----------------
# Helpers
# -----------------

def _load_toml(path: Path) -> dict:
    with path.open("rb") as f:
        return tomllib.load(f)

def _deep_merge(base: dict, override: dict) -> dict:
    out = dict(base)
    for k, v in override.items():
        if k in out and isinstance(out[k], dict) and isinstance(v, dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out

def _check_type(section, key: str, value, hints: dict):
    hint = hints.get(key)
    if hint is None:
        return
    allowed = tuple(a for a in (t.get_args(hint) or (hint,)) if isinstance(a, type) and a is not type(None))
    if allowed and not isinstance(value, allowed):
        names = " or ".join(a.__name__ for a in allowed)
        raise ConfigError(
            f"[{type(section).__name__}] '{key}' must be {names}, got {type(value).__name__} {value!r}"
        )

def _merge_into_dataclass(section, payload: dict):
    """Recursively merge a dict into a (possibly nested) dataclass instance, checking value types."""
    hints = t.get_type_hints(type(section))
    for k, v in payload.items():
        if not hasattr(section, k):
            continue
        current = getattr(section, k)
        if is_dataclass(current) and isinstance(v, dict):
            _merge_into_dataclass(current, v)
        elif v is not None:
            _check_type(section, k, v, hints)
            setattr(section, k, v)

# -----------------
# Loader
# -----------------

def load_config(
    project_root: t.Union[str, Path],
    config_path: t.Union[str, Path, None] = None,
) -> Config:
    """
    Build a Config from ``<project_root>/molbridge.toml`` overlaid with ``config_path``.

    Later files win key by key. A missing explicit ``config_path`` is an error; a
    missing project file is not.
    """
    root = Path(project_root).resolve()
    tomls: list[Path] = []

    project_toml = root / CONFIG_NAME
    if project_toml.is_file():
        tomls.append(project_toml)

    if config_path:
        provided = Path(config_path).resolve()
        if not provided.is_file():
            raise FileNotFoundError(f"Config file '{provided}' not found")
        if provided not in tomls:
            tomls.append(provided)

    data: dict = {}
    for p in tomls:
        data = _deep_merge(data, _load_toml(p))

    cfg = Config(project_root=root, sources=tomls)
    for section_name in ("adapter", "logging"):
        payload = data.get(section_name, {})
        if isinstance(payload, dict):
            _merge_into_dataclass(getattr(cfg, section_name), payload)
    return cfg
