"""
Per-file pipeline: read, parse, process comments, then rewrite, diff or print.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List, Optional, TextIO, Tuple

from rich.console import Console

from .adapters.go import GO_STYLE_COMMENTS, parse_go_source
from .adapters.range_edits import RangeEditor
from .core import CaseMode, ParsedSource, ProcessStats, process_comments
from .core.transform import decode_text
from .errors import FormatterError, UACUserError
from .files import SkipList, resolve_patterns
from .formatter import format_file
from .output import render_diff

logger = logging.getLogger(__name__)

BACKUP_SUFFIX = ".bak"


class OutputMode(str, Enum):
    INPLACE = "inplace"
    DIFF = "diff"
    PRINT = "print"


@dataclass
class RunOptions:
    output: OutputMode = OutputMode.INPLACE
    mode: CaseMode = CaseMode.FULL_LOWERCASE
    backup: bool = False
    fmt: bool = False


@dataclass
class FileResult:
    path: Path
    changed: int
    modified: bool


def render_source(source: ParsedSource) -> str:
    """Write modified comments back into the original text."""
    editor = RangeEditor(source.text)
    for comment in source.modified_comments():
        editor.add_replacement(comment.start_char, comment.end_char, comment.text, edit_type="comment")
    text, _stats = editor.apply_edits()
    return text


def process_text(text: str, mode: CaseMode, path: Optional[str] = None) -> Tuple[str, ProcessStats]:
    """
    Process Go source text.

    Returns:
        (processed text, stats); the text is returned as is when nothing changed
    """
    source = parse_go_source(text, path)
    stats = process_comments(source, mode, GO_STYLE_COMMENTS)
    if not stats.modified:
        return text, stats
    return render_source(source), stats


def _write_backup(path: Path, data: bytes) -> Path:
    backup = path.with_name(path.name + BACKUP_SUFFIX)
    backup.write_bytes(data)
    logger.debug(f"Backup written to {backup}")
    return backup


def process_file(
        path: Path,
        options: RunOptions,
        out: Optional[TextIO] = None,
        console: Optional[Console] = None,
) -> FileResult:
    """
    Process one file according to the output mode.

    Raises:
        UACUserError: If the file cannot be read, parsed or written
    """
    out = out or sys.stdout
    try:
        data = path.read_bytes()
    except OSError as e:
        raise UACUserError(f"Error reading {path}: {e}") from e

    original = decode_text(data)
    processed, stats = process_text(original, options.mode, str(path))
    result = FileResult(path, stats.changed, stats.modified)

    if options.output is OutputMode.PRINT:
        out.write(processed)
        return result

    if not stats.modified:
        return result

    if options.output is OutputMode.DIFF:
        render_diff(str(path), original, processed, console or Console(file=out, highlight=False))
        return result

    try:
        if options.backup:
            _write_backup(path, data)
        path.write_bytes(processed.encode("utf-8"))
    except OSError as e:
        raise UACUserError(f"Error writing to file {path}: {e}") from e
    print(f"Updated: {path}", file=out)

    if options.fmt:
        try:
            format_file(path)
        except FormatterError as e:
            logger.warning(str(e))

    return result


def run(
        patterns: Optional[List[str]],
        options: RunOptions,
        skip: Optional[SkipList] = None,
        out: Optional[TextIO] = None,
) -> int:
    """
    Process every file matched by the patterns.

    Returns:
        Exit code: 1 if any file failed, 0 otherwise
    """
    skip = skip or SkipList([])
    out = out or sys.stdout
    console = Console(file=out, highlight=False)

    failed = 0
    changed = 0
    files = resolve_patterns(patterns, skip)
    for path in files:
        try:
            result = process_file(path, options, out=out, console=console)
        except UACUserError as e:
            logger.error(str(e))
            failed += 1
            continue
        changed += result.changed

    logger.debug(f"Processed {len(files)} file(s), {changed} comment(s) changed, {failed} failed")
    return 1 if failed else 0


__all__ = [
    "OutputMode",
    "RunOptions",
    "FileResult",
    "render_source",
    "process_text",
    "process_file",
    "run",
]
