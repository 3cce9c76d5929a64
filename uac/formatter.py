from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

from .errors import FormatterError

logger = logging.getLogger(__name__)

GOFMT = "gofmt"


def format_file(path: Path, binary: str = GOFMT) -> None:
    """
    Run `gofmt -s -w` on a file that was rewritten in place.

    Raises:
        FormatterError: If the formatter is not installed or exits with an error
    """
    exe = shutil.which(binary)
    if exe is None:
        raise FormatterError(f"{binary} not found in PATH")

    try:
        subprocess.run(
            [exe, "-s", "-w", str(path)],
            check=True, capture_output=True, text=True, encoding="utf-8", errors="replace",
        )
    except subprocess.CalledProcessError as e:
        detail = (e.stderr or "").strip() or f"exit code {e.returncode}"
        raise FormatterError(f"{binary} failed on {path}: {detail}") from e

    logger.debug(f"Formatted {path} with {binary}")


__all__ = ["GOFMT", "format_file"]
