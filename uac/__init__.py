"""
Normalize the casing of comments inside Go functions, structs and grouped
var/const blocks, leaving documentation and top-level comments alone.
"""

from __future__ import annotations

from .core import (
    CaseMode,
    ParsedSource,
    ProcessStats,
    classify_comment,
    process_comments,
    transform_comment,
)

__all__ = [
    "CaseMode",
    "ParsedSource",
    "ProcessStats",
    "classify_comment",
    "process_comments",
    "transform_comment",
]
