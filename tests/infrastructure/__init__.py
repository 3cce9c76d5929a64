"""
Shared test infrastructure.

Modules:
- file_utils: creating files and directories
- go_utils: parsing Go snippets and locating comments
- cli_utils: running the CLI as a subprocess
"""

from .file_utils import write, write_bytes
from .go_utils import parse, comment_containing, classification, DATA_DIR, load_sample
from .cli_utils import run_cli

__all__ = [
    "write", "write_bytes",
    "parse", "comment_containing", "classification", "DATA_DIR", "load_sample",
    "run_cli",
]
