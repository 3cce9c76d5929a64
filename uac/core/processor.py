"""
Comment processing orchestrator: classify, transform, count.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from .model import ParsedSource
from .scope import classify_comment
from .transform import CaseMode, transform_comment
from .comment_style import CommentStyle, GO_STYLE_COMMENTS

logger = logging.getLogger(__name__)


class ProcessStats(NamedTuple):
    changed: int
    modified: bool


def process_comments(
        source: ParsedSource,
        mode: CaseMode,
        style: CommentStyle = GO_STYLE_COMMENTS,
) -> ProcessStats:
    """
    Rewrite every in-scope comment of a parsed source in place.

    Returns:
        (number of changed comments, whether anything changed)
    """
    changed = 0
    modified = False

    for comment in source.comments:
        if not classify_comment(source, comment):
            continue

        result = transform_comment(comment.text, mode, style)
        if result != comment.text:
            comment.text = result
            changed += 1
            modified = True

    logger.debug("%s: %d comment(s) changed", source.path or "<source>", changed)
    return ProcessStats(changed, modified)


__all__ = ["ProcessStats", "process_comments"]
