from __future__ import annotations

from importlib import metadata

DIST_NAME = "unfuck-ai-comments"


def tool_version() -> str:
    """Installed distribution version; "0.0.0" when running from a source checkout."""
    try:
        return metadata.version(DIST_NAME)
    except metadata.PackageNotFoundError:
        return "0.0.0"


__all__ = ["DIST_NAME", "tool_version"]
