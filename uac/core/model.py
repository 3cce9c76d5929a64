"""
Data model shared by the parser adapter and the core algorithms.

A ParsedSource is what the core calls "the tree": the comments of one
file in source order plus the spans of every eligible container.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from .scope import ContainerIndex


class ContainerKind(str, Enum):
    """Closed set of syntactic regions whose interior comments are eligible."""
    FUNCTION = "function"
    STRUCT = "struct"
    VAR_BLOCK = "var_block"
    CONST_BLOCK = "const_block"


@dataclass(frozen=True)
class ContainerSpan:
    """Container boundaries as byte offsets of its opening and closing delimiters (both inclusive)."""
    kind: ContainerKind
    open: int
    close: int

    def __post_init__(self):
        if self.open > self.close:
            raise ValueError(f"Invalid container span: open ({self.open}) > close ({self.close})")

    def contains(self, position: int) -> bool:
        return self.open <= position <= self.close

    def encloses(self, other: ContainerSpan) -> bool:
        return self.open <= other.open and other.close <= self.close


@dataclass
class Comment:
    """
    A comment with its markers.

    Byte offsets address the comment in the parsed tree, character offsets
    address it in the decoded text used for rewriting.
    """
    text: str
    start_byte: int
    end_byte: int
    start_char: int
    end_char: int
    original: str = field(init=False)

    def __post_init__(self):
        self.original = self.text

    @property
    def position(self) -> int:
        return self.start_byte

    @property
    def modified(self) -> bool:
        return self.text != self.original


@dataclass
class ParsedSource:
    """Comments and container spans of one source file."""
    text: str
    comments: List[Comment] = field(default_factory=list)
    containers: List[ContainerSpan] = field(default_factory=list)
    path: Optional[str] = None
    _index: Optional[ContainerIndex] = field(default=None, init=False, repr=False)

    @property
    def index(self) -> ContainerIndex:
        """One-time container index, built on first use."""
        if self._index is None:
            from .scope import ContainerIndex
            self._index = ContainerIndex(self.containers)
        return self._index

    def modified_comments(self) -> List[Comment]:
        return [c for c in self.comments if c.modified]


__all__ = ["ContainerKind", "ContainerSpan", "Comment", "ParsedSource"]
