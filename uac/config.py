"""
Optional YAML configuration.

Looked up as .unfuck-ai-comments.yaml in the working directory unless an
explicit path is given. Command-line flags are applied on top by the CLI.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .errors import ConfigError

DEFAULT_CFG_FILE = ".unfuck-ai-comments.yaml"

_yaml = YAML(typ="safe")


@dataclass
class Config:
    title: bool = False
    backup: bool = False
    fmt: bool = False
    skip: List[str] = field(default_factory=list)

    @staticmethod
    def from_dict(d: Optional[Dict[str, Any]], source: str = "config") -> Config:
        """Build and validate configuration from a YAML mapping."""
        if not d:
            return Config()

        known = {f.name for f in fields(Config)}
        unknown = sorted(set(d) - known)
        if unknown:
            raise ConfigError(f"{source}: unknown key(s): {', '.join(map(str, unknown))}")

        cfg = Config()
        for name in ("title", "backup", "fmt"):
            if name in d:
                value = d[name]
                if not isinstance(value, bool):
                    raise ConfigError(f"{source}: '{name}' must be a boolean, got {type(value).__name__}")
                setattr(cfg, name, value)

        if "skip" in d:
            skip = d["skip"]
            if skip is None:
                skip = []
            if isinstance(skip, str):
                skip = [skip]
            if not isinstance(skip, list) or not all(isinstance(s, str) for s in skip):
                raise ConfigError(f"{source}: 'skip' must be a list of strings")
            cfg.skip = list(skip)

        return cfg


def _read_yaml_map(path: Path) -> dict:
    try:
        raw = _yaml.load(path.read_text(encoding="utf-8")) or {}
    except (OSError, YAMLError) as e:
        raise ConfigError(f"Failed to read config {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"YAML must be a mapping: {path}")
    return raw


def load_config(path: Optional[Path] = None, root: Optional[Path] = None) -> Config:
    """
    Load configuration.

    • Explicit path: must exist.
    • Otherwise DEFAULT_CFG_FILE under root (or cwd); missing file means defaults.
    """
    if path is not None:
        if not path.is_file():
            raise ConfigError(f"Config file not found: {path}")
        return Config.from_dict(_read_yaml_map(path), str(path))

    default = (root or Path.cwd()) / DEFAULT_CFG_FILE
    if not default.is_file():
        return Config()
    return Config.from_dict(_read_yaml_map(default), str(default))


__all__ = ["Config", "DEFAULT_CFG_FILE", "load_config"]
