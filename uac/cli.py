from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from .config import Config, load_config
from .core import CaseMode
from .errors import ConfigError
from .files import SkipList
from .runner import OutputMode, RunOptions, run
from .version import tool_version

COMMANDS = {
    "run": OutputMode.INPLACE,
    "diff": OutputMode.DIFF,
    "print": OutputMode.PRINT,
}

_LOG = logging.getLogger("uac")
_handler: Optional[logging.Handler] = None


def _setup_logging(verbose: bool) -> None:
    """One stderr handler for the package logger; re-bound on every call."""
    global _handler
    if _handler is not None:
        _LOG.removeHandler(_handler)
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    _LOG.addHandler(_handler)
    _LOG.propagate = False
    debug = verbose or bool(os.environ.get("UAC_DEBUG"))
    _LOG.setLevel(logging.DEBUG if debug else logging.INFO)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="unfuck-ai-comments",
        description="Normalize the casing of comments inside functions, structs and grouped var/const blocks",
        add_help=True,
    )
    p.add_argument("-V", "--version", action="version", version=f"%(prog)s {tool_version()}")
    sub = p.add_subparsers(dest="cmd", required=True)

    # Shared by run/diff/print
    def add_common(sp: argparse.ArgumentParser) -> None:
        sp.add_argument(
            "patterns",
            nargs="*",
            metavar="FILE/PATTERN",
            help="files or patterns to process (default: current directory); 'dir/...' walks recursively",
        )
        sp.add_argument("--dry", action="store_true", help="don't modify files, just show what would be changed")
        sp.add_argument("--title", action="store_true", default=None, help="lowercase only the first letter of each comment")
        sp.add_argument(
            "--skip",
            action="append",
            default=[],
            metavar="PATTERN",
            help="skip matching files or directories (gitignore syntax, repeatable)",
        )
        sp.add_argument("--backup", action="store_true", default=None, help="keep a .bak copy of every rewritten file")
        sp.add_argument("--fmt", action="store_true", default=None, help="run gofmt on rewritten files")
        sp.add_argument("--config", metavar="PATH", help="configuration file (default: ./.unfuck-ai-comments.yaml)")
        sp.add_argument("-v", "--verbose", action="store_true", help="debug logging")

    add_common(sub.add_parser("run", help="process files in-place (default)"))
    add_common(sub.add_parser("diff", help="show diff without modifying files"))
    print_help = "print processed content of every matched file to stdout, unchanged files included"
    add_common(sub.add_parser("print", help=print_help, description=print_help))

    return p


def _normalize_argv(argv: List[str]) -> List[str]:
    """Without an explicit command, behave like `run`."""
    if argv and (argv[0] in COMMANDS or argv[0] in ("-h", "--help", "-V", "--version")):
        return argv
    return ["run", *argv]


def _opts(ns: argparse.Namespace, cfg: Config) -> RunOptions:
    output = COMMANDS[ns.cmd]
    if ns.dry:
        output = OutputMode.DIFF

    title = cfg.title if ns.title is None else ns.title
    return RunOptions(
        output=output,
        mode=CaseMode.TITLE_CASE if title else CaseMode.FULL_LOWERCASE,
        backup=cfg.backup if ns.backup is None else ns.backup,
        fmt=cfg.fmt if ns.fmt is None else ns.fmt,
    )


def main(argv: list[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    ns = _build_parser().parse_args(_normalize_argv(args))
    _setup_logging(ns.verbose)

    try:
        cfg = load_config(Path(ns.config) if ns.config else None)
    except ConfigError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2

    skip = SkipList([*cfg.skip, *ns.skip])
    return run(ns.patterns, _opts(ns, cfg), skip=skip)


if __name__ == "__main__":
    raise SystemExit(main())
