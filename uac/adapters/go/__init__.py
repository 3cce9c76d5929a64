from __future__ import annotations

from ...core.comment_style import GO_STYLE_COMMENTS
from .document import GoDocument, parse_go_source

__all__ = ["GO_STYLE_COMMENTS", "GoDocument", "parse_go_source"]
