from __future__ import annotations

from .diff import diff_lines, render_diff

__all__ = ["diff_lines", "render_diff"]
