from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CommentStyle:
    """Comment style description for a language."""

    single_line: str
    """Single-line comment marker (e.g., '//' or '#')."""

    multi_line: tuple[str, str]
    """Multi-line comment markers (e.g., ('/*', '*/'))."""


# Go: // line comments and /* */ block comments; doc comments use the same markers
GO_STYLE_COMMENTS = CommentStyle(
    single_line="//",
    multi_line=("/*", "*/"),
)
