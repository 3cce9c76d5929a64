from __future__ import annotations

# Public API of the core:
#  • classify_comment / is_in_scope: scope classification
#  • transform_comment: case transformation of one comment
#  • process_comments: in-place processing of a parsed source
from .comment_style import CommentStyle, GO_STYLE_COMMENTS
from .model import Comment, ContainerKind, ContainerSpan, ParsedSource
from .processor import ProcessStats, process_comments
from .scope import ContainerIndex, classify_comment, is_in_scope
from .transform import CaseMode, transform_comment

__all__ = [
    "CommentStyle",
    "GO_STYLE_COMMENTS",
    "Comment",
    "ContainerKind",
    "ContainerSpan",
    "ParsedSource",
    "ProcessStats",
    "process_comments",
    "ContainerIndex",
    "classify_comment",
    "is_in_scope",
    "CaseMode",
    "transform_comment",
]
