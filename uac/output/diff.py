"""
Colored line diff between original and processed sources.
"""

from __future__ import annotations

import difflib
from typing import List, Optional, Tuple

from rich.console import Console
from rich.text import Text

REMOVED_STYLE = "bold red"
ADDED_STYLE = "bold green"
HEADER_STYLE = "bold cyan"


def diff_lines(original: str, modified: str) -> List[Tuple[str, str]]:
    """
    Changed lines only, no context.

    Returns:
        List of ("-" | "+", line) pairs in output order
    """
    orig_lines = original.splitlines()
    mod_lines = modified.splitlines()

    result: List[Tuple[str, str]] = []
    matcher = difflib.SequenceMatcher(a=orig_lines, b=mod_lines, autojunk=False)
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            continue
        # Replacements are printed pairwise so each old line sits above its new version
        removed = orig_lines[i1:i2]
        added = mod_lines[j1:j2]
        for k in range(max(len(removed), len(added))):
            if k < len(removed):
                result.append(("-", removed[k]))
            if k < len(added):
                result.append(("+", added[k]))
    return result


def render_diff(path: str, original: str, modified: str, console: Optional[Console] = None) -> None:
    """Print a file header followed by the changed lines."""
    console = console or Console(highlight=False)

    console.print(Text(f"--- {path} (original)", style=HEADER_STYLE), soft_wrap=True)
    console.print(Text(f"+++ {path} (modified)", style=HEADER_STYLE), soft_wrap=True)
    for sign, line in diff_lines(original, modified):
        style = REMOVED_STYLE if sign == "-" else ADDED_STYLE
        console.print(Text(f"{sign} {line}", style=style), soft_wrap=True)


__all__ = ["diff_lines", "render_diff"]
