"""
Source file selection: pattern resolution, recursive walks and skip lists.

Pattern forms:
- "./..." or "<dir>/...": every .go file below the directory (vendor excluded)
- a directory: its .go files, non-recursive
- anything else: a glob
"""

from __future__ import annotations

import glob
import logging
import os
from pathlib import Path
from typing import Iterable, List, Optional, Set

from pathspec import PathSpec

logger = logging.getLogger(__name__)

GO_EXTENSION = ".go"
VENDOR_DIR = "vendor"
RECURSIVE_SUFFIX = "..."


class SkipList:
    """
    Gitignore-style skip patterns matched relative to a root directory.

    Usage:
        skip = SkipList(["*_test.go", "gen/"], Path.cwd())
        if skip.is_skipped(Path("gen/api.go")):
            pass
    """

    def __init__(self, patterns: Iterable[str], root: Optional[Path] = None):
        self.root = (root or Path.cwd()).resolve()
        self.patterns = [p for p in patterns if p and p.strip()]
        self._spec: Optional[PathSpec] = (
            PathSpec.from_lines("gitwildmatch", self.patterns) if self.patterns else None
        )

    def _relative(self, path: Path) -> str:
        resolved = path.resolve()
        try:
            return resolved.relative_to(self.root).as_posix()
        except ValueError:
            return resolved.as_posix().lstrip("/")

    def is_skipped(self, path: Path, is_dir: bool = False) -> bool:
        if self._spec is None:
            return False
        rel = self._relative(path)
        if not rel or rel == ".":
            return False
        if is_dir:
            return self._spec.match_file(rel) or self._spec.match_file(rel + "/")
        return self._spec.match_file(rel)


def default_patterns(patterns: Optional[List[str]]) -> List[str]:
    """Patterns to process, defaulting to the current directory."""
    return list(patterns) if patterns else ["."]


def walk_dir(directory: Path, skip: SkipList) -> List[Path]:
    """All .go files below a directory, vendor and skipped directories excluded."""
    found: List[Path] = []
    for current, dirnames, filenames in os.walk(directory):
        current_path = Path(current)
        dirnames[:] = sorted(
            d for d in dirnames
            if d != VENDOR_DIR and not skip.is_skipped(current_path / d, is_dir=True)
        )
        for name in sorted(filenames):
            if name.endswith(GO_EXTENSION):
                found.append(current_path / name)
    return sorted(found)


def resolve_pattern(pattern: str, skip: SkipList) -> List[Path]:
    """Expand one pattern into .go files (skip list applied)."""
    if pattern.endswith(RECURSIVE_SUFFIX):
        base = pattern[: -len(RECURSIVE_SUFFIX)].rstrip("/") or "."
        if not Path(base).is_dir():
            logger.error(f"Error walking directory {base}: not a directory")
            return []
        candidates = walk_dir(Path(base), skip)
    elif Path(pattern).is_dir():
        candidates = sorted(Path(pattern).glob(f"*{GO_EXTENSION}"))
    else:
        candidates = [Path(p) for p in sorted(glob.glob(pattern))]

    files = [
        p for p in candidates
        if p.suffix == GO_EXTENSION and p.is_file() and not skip.is_skipped(p)
    ]
    if not files:
        logger.info(f"No Go files found matching pattern: {pattern}")
    return files


def resolve_patterns(patterns: Optional[List[str]], skip: SkipList) -> List[Path]:
    """Expand all patterns, keeping first-seen order and dropping duplicates."""
    seen: Set[Path] = set()
    result: List[Path] = []
    for pattern in default_patterns(patterns):
        for path in resolve_pattern(pattern, skip):
            key = path.resolve()
            if key in seen:
                continue
            seen.add(key)
            result.append(path)
    return result


__all__ = [
    "SkipList",
    "default_patterns",
    "walk_dir",
    "resolve_pattern",
    "resolve_patterns",
]
