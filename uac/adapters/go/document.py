"""
Go parser adapter: builds a ParsedSource from Go source text.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

from tree_sitter import Language

from ..tree_sitter_support import TreeSitterDocument, Node
from ...core.model import Comment, ContainerKind, ContainerSpan, ParsedSource
from ...errors import SourceParseError

logger = logging.getLogger(__name__)


# Capture name -> container kind
CAPTURE_KINDS: Dict[str, ContainerKind] = {
    "function_body": ContainerKind.FUNCTION,
    "struct_body": ContainerKind.STRUCT,
    "var_declaration": ContainerKind.VAR_BLOCK,
    "const_declaration": ContainerKind.CONST_BLOCK,
}


class GoDocument(TreeSitterDocument):

    def get_language(self) -> Language:
        import tree_sitter_go as tsgo
        return Language(tsgo.language())

    def get_query_definitions(self) -> Dict[str, str]:
        from .queries import QUERIES
        return QUERIES

    def collect_comments(self) -> List[Comment]:
        """All comments in source order."""
        comments = []
        for node, _ in self.query("comments"):
            start_char, end_char = self.get_node_range(node)
            comments.append(Comment(
                text=self.get_node_text(node),
                start_byte=node.start_byte,
                end_byte=node.end_byte,
                start_char=start_char,
                end_char=end_char,
            ))
        return comments

    def collect_containers(self) -> List[ContainerSpan]:
        """Spans of function bodies, struct bodies and grouped var/const blocks."""
        spans = []
        for node, capture_name in self.query("containers"):
            kind = CAPTURE_KINDS.get(capture_name)
            if kind is None:
                continue

            if kind in (ContainerKind.VAR_BLOCK, ContainerKind.CONST_BLOCK):
                bounds = self._group_bounds(node)
            else:
                bounds = self._delimited_bounds(node, "{", "}")

            if bounds is not None:
                spans.append(ContainerSpan(kind, bounds[0], bounds[1]))
        return spans

    def _delimited_bounds(self, node: Node, open_token: str, close_token: str) -> Optional[Tuple[int, int]]:
        opens = self.get_children_by_type(node, open_token)
        closes = [c for c in self.get_children_by_type(node, close_token) if not c.is_missing]
        if not opens or not closes:
            return None
        return opens[0].start_byte, closes[-1].start_byte

    def _group_bounds(self, declaration: Node) -> Optional[Tuple[int, int]]:
        """
        Bounds of "var ( ... )" / "const ( ... )".

        Depending on the grammar version the parentheses hang either directly
        off the declaration or off a *_spec_list child. A single declaration
        without parentheses has no group and yields None.
        """
        spec_list = declaration.type.replace("_declaration", "_spec_list")
        for holder in [declaration, *self.get_children_by_type(declaration, spec_list)]:
            bounds = self._delimited_bounds(holder, "(", ")")
            if bounds is not None:
                return bounds
        return None

    def describe_errors(self) -> str:
        """Human-readable location of the first syntax errors."""
        parts = []
        for node in self.get_errors()[:3]:
            line, column = node.start_point
            what = f"missing {node.type}" if node.is_missing else "syntax error"
            parts.append(f"{line + 1}:{column + 1}: {what}")
        return "; ".join(parts) or "syntax error"


def parse_go_source(text: str, path: Optional[str] = None, strict: bool = True) -> ParsedSource:
    """
    Parse Go source text into comments and container spans.

    Args:
        text: Decoded source text
        path: Source path, used in messages only
        strict: Reject sources whose tree contains syntax errors

    Raises:
        SourceParseError: If strict and the source does not parse cleanly
    """
    doc = GoDocument(text)
    if strict and doc.has_error():
        raise SourceParseError(f"Error parsing {path or '<source>'}: {doc.describe_errors()}")

    source = ParsedSource(
        text=text,
        comments=doc.collect_comments(),
        containers=doc.collect_containers(),
        path=path,
    )
    logger.debug(
        "%s: %d comment(s), %d container(s)",
        path or "<source>", len(source.comments), len(source.containers),
    )
    return source


__all__ = ["GoDocument", "parse_go_source", "CAPTURE_KINDS"]
