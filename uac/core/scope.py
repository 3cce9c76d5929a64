"""
Scope Classifier.

Decides whether a comment lies inside a function body, a struct body or
a grouped var/const block. Container spans of a file are indexed once:
since containers are well-nested, only the outermost spans matter for a
yes/no answer, and those are disjoint, so a binary search over their
opening offsets answers each query in logarithmic time.
"""

from __future__ import annotations

import logging
from bisect import bisect_right
from typing import Iterable, List, Optional

from .model import Comment, ContainerSpan, ParsedSource

logger = logging.getLogger(__name__)


class ContainerIndex:
    """Sorted, disjoint outermost container spans of one file."""

    def __init__(self, spans: Iterable[ContainerSpan]):
        ordered = sorted(spans, key=lambda s: (s.open, -s.close))

        self._outer: List[ContainerSpan] = []
        for span in ordered:
            if self._outer and self._outer[-1].encloses(span):
                continue
            if self._outer and span.open <= self._outer[-1].close:
                # Partial overlap can only come from a damaged tree; merge it
                last = self._outer.pop()
                span = ContainerSpan(last.kind, last.open, max(last.close, span.close))
            self._outer.append(span)

        self._opens = [span.open for span in self._outer]

    def __len__(self) -> int:
        return len(self._outer)

    def find(self, position: int) -> Optional[ContainerSpan]:
        """Return the outermost container holding the position, if any."""
        idx = bisect_right(self._opens, position) - 1
        if idx < 0:
            return None
        span = self._outer[idx]
        return span if span.contains(position) else None

    def contains(self, position: int) -> bool:
        return self.find(position) is not None


def is_in_scope(source: ParsedSource, position: int) -> bool:
    """Check whether a byte position lies within [open, close] of any container."""
    return source.index.contains(position)


def classify_comment(source: ParsedSource, comment: Comment) -> bool:
    """Check whether a comment is eligible for case transformation."""
    span = source.index.find(comment.position)
    if span is None:
        logger.debug("Comment [%d, %d) is outside every container", comment.position, comment.end_byte)
        return False
    logger.debug(
        "Comment [%d, %d) is inside %s [%d, %d]",
        comment.position, comment.end_byte, span.kind.value, span.open, span.close,
    )
    return True


__all__ = ["ContainerIndex", "is_in_scope", "classify_comment"]
