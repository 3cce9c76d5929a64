"""
Case Transformer: rewrites the casing of a single comment.

The transformation is a pure function of the raw comment text (markers
included) and the casing mode. Special-indicator comments are returned
untouched, tool directives in front of a secondary "//" are preserved,
and PascalCase/camelCase identifiers keep their original casing.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Dict, Set, Union

from .identifiers import extract_protected, is_all_uppercase, split_token
from .vocabulary import ABBREVIATION_MIN_LENGTH, DIRECTIVE_SEPARATORS, starts_with_indicator
from .comment_style import CommentStyle, GO_STYLE_COMMENTS


class CaseMode(str, Enum):
    FULL_LOWERCASE = "lower"
    TITLE_CASE = "title"


_WHITESPACE_SPLIT = re.compile(r"(\s+)")
_FIRST_VISIBLE = re.compile(r"\S")


def decode_text(data: Union[str, bytes]) -> str:
    """Decode UTF-8 input, substituting U+FFFD for malformed sequences."""
    if isinstance(data, bytes):
        return data.decode("utf-8", errors="replace")
    return data


def transform_comment(
        text: Union[str, bytes],
        mode: CaseMode,
        style: CommentStyle = GO_STYLE_COMMENTS,
) -> str:
    """
    Apply the casing policy to one comment.

    Args:
        text: Raw comment including its markers ("// ..." or "/* ... */")
        mode: Casing policy
        style: Comment markers of the source language

    Returns:
        Transformed comment; unrecognized markers yield the input unchanged
    """
    text = decode_text(text)
    mode = CaseMode(mode)

    if text.startswith(style.single_line):
        return _transform_line_comment(text, mode, style.single_line)

    block_open, block_close = style.multi_line
    if (
        len(text) >= len(block_open) + len(block_close)
        and text.startswith(block_open)
        and text.endswith(block_close)
    ):
        return _transform_block_comment(text, mode, block_open, block_close)

    return text


def _transform_line_comment(text: str, mode: CaseMode, marker: str) -> str:
    body = text[len(marker):]
    if starts_with_indicator(body):
        return text

    # "//nolint:gosec // explanation": directive prefix stays as is
    for separator in DIRECTIVE_SEPARATORS:
        idx = body.find(separator)
        if idx != -1:
            prefix = body[:idx]
            part = body[idx + len(separator):]
            return marker + prefix + separator + transform_part(part, mode)

    return marker + transform_part(body, mode)


def _transform_block_comment(text: str, mode: CaseMode, block_open: str, block_close: str) -> str:
    interior = text[len(block_open):len(text) - len(block_close)]
    first_line = interior.split("\n", 1)[0]
    if starts_with_indicator(first_line):
        return text

    return block_open + transform_part(interior, mode) + block_close


def transform_part(part: str, mode: CaseMode) -> str:
    """Transform comment text with markers already removed."""
    protected = extract_protected(part)
    if mode is CaseMode.FULL_LOWERCASE:
        return _lowercase(part, protected)
    return _title_case(part, protected)


def _restore_map(protected: Set[str]) -> Dict[str, str]:
    # sorted() keeps the choice stable when two identifiers differ only in case
    restore: Dict[str, str] = {}
    for ident in sorted(protected):
        restore.setdefault(ident.lower(), ident)
    return restore


def _lowercase(part: str, protected: Set[str]) -> str:
    restore = _restore_map(protected)
    pieces = []
    for piece in _WHITESPACE_SPLIT.split(part):
        if not piece or piece.isspace():
            pieces.append(piece)
            continue
        lead, core, trail = split_token(piece)
        # A protected word keeps its own casing even if another protected word differs only in case
        original = core if core in protected else restore.get(core.lower())
        if original is not None:
            pieces.append(lead.lower() + original + trail.lower())
        else:
            pieces.append(piece.lower())
    return "".join(pieces)


def _leading_letters(text: str, start: int) -> str:
    end = start
    while end < len(text) and text[end].isalpha():
        end += 1
    return text[start:end]


def _title_case(part: str, protected: Set[str]) -> str:
    first_line = part.split("\n", 1)[0]
    m = _FIRST_VISIBLE.search(first_line)
    if not m:
        return part

    # Abbreviation glued to the marker, as in "//API handler". Only letters
    # right at the start of the part count: "// THIS is" still becomes "// tHIS is".
    attached_word = _leading_letters(part, 0)
    if len(attached_word) >= ABBREVIATION_MIN_LENGTH and is_all_uppercase(attached_word):
        return part

    start = m.start()
    leading_word = _leading_letters(part, start)
    protected_lower = {ident.lower() for ident in protected}
    _, leading_core, _ = split_token(first_line[start:].split(None, 1)[0])
    if leading_word.lower() in protected_lower or leading_core.lower() in protected_lower:
        return part

    return part[:start] + part[start].lower() + part[start + 1:]


__all__ = ["CaseMode", "decode_text", "transform_comment", "transform_part"]
