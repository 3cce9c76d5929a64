"""
Base exception for user-facing errors.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from UACUserError.

Programming errors and bugs should NOT inherit from UACUserError:
they will propagate with full tracebacks.
"""

from __future__ import annotations


class UACUserError(Exception):
    """
    Base class for all user-facing errors.

    These errors indicate problems that the user can fix:
    configuration issues, unparsable sources, a missing formatter, etc.
    """
    pass


class ConfigError(UACUserError):
    """Invalid or unreadable configuration file."""
    pass


class SourceParseError(UACUserError):
    """Source file does not parse cleanly."""
    pass


class FormatterError(UACUserError):
    """External source formatter is missing or failed."""
    pass


__all__ = ["UACUserError", "ConfigError", "SourceParseError", "FormatterError"]
