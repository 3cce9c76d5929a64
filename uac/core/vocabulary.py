"""
Declarative vocabulary shared by the scope and case-transformation logic.

Keeping these tables in one place means the transformer, the identifier
grammar and the tests all agree on the same closed sets.
"""

from __future__ import annotations

from typing import Tuple

# Keywords that exempt a whole comment from transformation when its
# trimmed body starts with one of them. Matching is a case-sensitive prefix test.
SPECIAL_INDICATORS: Tuple[str, ...] = (
    "TODO",
    "FIXME",
    "HACK",
    "XXX",
    "NOTE",
    "BUG",
    "IDEA",
    "OPTIMIZE",
    "REVIEW",
    "TEMP",
    "DEBUG",
    "NB",
    "WARNING",
    "DEPRECATED",
    "NOTICE",
)

# Secondary comment markers separating a tool directive from prose,
# in priority order (e.g. "//nolint:gosec // explanation").
DIRECTIVE_SEPARATORS: Tuple[str, ...] = (" // ", "//", " //")

# Minimum length of an all-uppercase leading word treated as an abbreviation.
ABBREVIATION_MIN_LENGTH = 2

# Minimum length of a PascalCase identifier.
PASCAL_MIN_LENGTH = 2


def starts_with_indicator(body: str) -> bool:
    """Check whether a comment body (leading whitespace ignored) opens with a special indicator."""
    trimmed = body.lstrip()
    return any(trimmed.startswith(keyword) for keyword in SPECIAL_INDICATORS)


__all__ = [
    "SPECIAL_INDICATORS",
    "DIRECTIVE_SEPARATORS",
    "ABBREVIATION_MIN_LENGTH",
    "PASCAL_MIN_LENGTH",
    "starts_with_indicator",
]
