"""
Surface-level identifier grammar for words inside comments.

Words are whitespace-delimited tokens; surrounding punctuation such as
parentheses, quotes or trailing commas is peeled off before a word is
classified, so "(UserService)," still protects "UserService".
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Set, Tuple

from .vocabulary import PASCAL_MIN_LENGTH


class IdentifierKind(str, Enum):
    ALL_UPPERCASE = "all_uppercase"
    PASCAL_CASE = "pascal_case"
    CAMEL_CASE = "camel_case"
    PLAIN = "plain"

    @property
    def protected(self) -> bool:
        """Only code-like identifiers keep their original casing."""
        return self in (IdentifierKind.PASCAL_CASE, IdentifierKind.CAMEL_CASE)


_TOKEN_EDGES = re.compile(r"^(\W*)(.*?)(\W*)$", re.DOTALL)


def split_token(token: str) -> Tuple[str, str, str]:
    """Split a token into (leading punctuation, word core, trailing punctuation)."""
    m = _TOKEN_EDGES.match(token)
    if not m:
        return "", token, ""
    return m.group(1), m.group(2), m.group(3)


def is_all_uppercase(word: str) -> bool:
    letters = [ch for ch in word if ch.isalpha()]
    return bool(letters) and all(ch.isupper() for ch in letters)


def is_pascal_case(word: str) -> bool:
    """
    PascalCase: starts with an uppercase letter, has a later
    uppercase-to-lowercase transition and never two uppercase runes in a row.

    Acronym-led words such as "APIClient" are rejected on purpose.
    """
    if len(word) < PASCAL_MIN_LENGTH or not word[0].isupper():
        return False

    has_transition = False
    for i in range(len(word) - 1):
        current, following = word[i], word[i + 1]
        if current.isupper() and following.isupper():
            return False
        if i >= 1 and current.isupper() and following.islower():
            has_transition = True

    return has_transition


def is_camel_case(word: str) -> bool:
    """camelCase: starts with a lowercase letter and contains a later uppercase rune."""
    if not word or not word[0].islower():
        return False
    return any(ch.isupper() for ch in word[1:])


def classify_word(word: str) -> IdentifierKind:
    """Classify a bare word (no surrounding punctuation)."""
    if is_pascal_case(word):
        return IdentifierKind.PASCAL_CASE
    if is_camel_case(word):
        return IdentifierKind.CAMEL_CASE
    if is_all_uppercase(word):
        return IdentifierKind.ALL_UPPERCASE
    return IdentifierKind.PLAIN


def extract_protected(text: str) -> Set[str]:
    """
    Collect the protected identifiers of a comment part.

    Returns:
        Word cores (original casing) classified as PascalCase or camelCase
    """
    protected: Set[str] = set()
    for token in text.split():
        _, core, _ = split_token(token)
        if core and classify_word(core).protected:
            protected.add(core)
    return protected


__all__ = [
    "IdentifierKind",
    "split_token",
    "is_all_uppercase",
    "is_pascal_case",
    "is_camel_case",
    "classify_word",
    "extract_protected",
]
