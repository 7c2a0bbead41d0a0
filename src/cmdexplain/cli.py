"""CLI argument parsing and application startup."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn

from colorama import just_fix_windows_console

from .console import ExplainConsole
from .constants import ENV_NO_COLOR
from .decorator import Decorator
from .errors import CmdExplainError, KnowledgeLoadError, StartupValidationError
from .knowledge import Knowledge, load_default_knowledge, load_knowledge
from .logging_utils import log_event, setup_logging
from .path_mapping import map_path
from .repl import explain_query, run_repl

_USAGE = """\
Usage: cmdexplain [--query <command>] [--knowledge <path>] [--log <path>] [--no-color]

Options:
  --query <command>   Explain one command and exit.
                      Without it, commands are read interactively.
  --knowledge <path>  JSON file with program, subcommand and option summaries.
                      Defaults to the file shipped with cmdexplain.
  --log <path>        Write structured log events to this file.
  --no-color          Disable terminal colors (also: NO_COLOR=1).
  --help, -h          Show this help message and exit.

Paths accept absolute paths, ~ (home), or @ (app root).

Examples:
  cmdexplain --query "ls -la | grep txt"
  cmdexplain --knowledge ~/cmdexplain/commands.json --log ~/cmdexplain/run.log
"""


@dataclass
class AppArgs:
    query: str | None = None
    knowledge_path: Path | None = None
    log_path: Path | None = None
    color: bool = True


def parse_args(argv: list[str] | None = None) -> AppArgs | None:
    """Parse CLI arguments. Returns None if --help was requested."""
    args = argv if argv is not None else sys.argv[1:]

    if "--help" in args or "-h" in args:
        print(_USAGE, end="")
        return None

    app_args = AppArgs(color=not os.environ.get(ENV_NO_COLOR))

    i = 0
    while i < len(args):
        if args[i] == "--query":
            app_args.query = _option_value(args, i)
            i += 2
        elif args[i] == "--knowledge":
            app_args.knowledge_path = _resolve_path(_option_value(args, i), "--knowledge")
            i += 2
        elif args[i] == "--log":
            app_args.log_path = _resolve_path(_option_value(args, i), "--log")
            i += 2
        elif args[i] == "--no-color":
            app_args.color = False
            i += 1
        else:
            _die(f"Unknown argument: {args[i]}")

    if app_args.query is not None and not app_args.query.strip():
        _die("--query requires a non-empty command.")

    return app_args


def main() -> None:
    """Application entry point."""
    try:
        app_args = parse_args()
    except StartupValidationError as exc:
        _die(str(exc))
    if app_args is None:
        sys.exit(0)

    try:
        setup_logging(app_args.log_path)
    except OSError as exc:
        print(f"ERROR: Could not open log file: {exc}", file=sys.stderr)
        sys.exit(1)

    try:
        knowledge = _load_knowledge(app_args.knowledge_path)
    except KnowledgeLoadError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(1)

    just_fix_windows_console()
    console = ExplainConsole(Decorator(enabled=app_args.color))
    log_event(
        "app_start",
        mode="query" if app_args.query is not None else "interactive",
        knowledge=app_args.knowledge_path or "builtin",
        commands=len(knowledge.commands),
        color=app_args.color,
    )

    try:
        if app_args.query is not None:
            explain_query(console, app_args.query.strip(), knowledge)
        else:
            run_repl(console, knowledge)
    except KeyboardInterrupt:
        print()
        print("Interrupted.")
    except CmdExplainError as exc:
        print(f"ERROR: Fatal: {exc}", file=sys.stderr)
        sys.exit(1)
    except Exception as exc:  # noqa: BLE001
        print(f"ERROR: Unexpected: {exc}", file=sys.stderr)
        sys.exit(1)
    finally:
        log_event("app_exit")


def _load_knowledge(path: Path | None) -> Knowledge:
    if path is None:
        return load_default_knowledge()
    return load_knowledge(path)


def _option_value(args: list[str], i: int) -> str:
    if i + 1 >= len(args):
        _die(f"{args[i]} requires a value.")
    return args[i + 1]


def _resolve_path(raw: str, arg_name: str) -> Path:
    try:
        return map_path(raw, app_root_abs=Path(__file__).resolve().parent)
    except Exception as exc:
        raise StartupValidationError(f"{arg_name} path is invalid: {exc}") from exc


def _die(message: str) -> NoReturn:
    print(f"ERROR: {message}", file=sys.stderr)
    print("Run 'cmdexplain --help' for usage.", file=sys.stderr)
    sys.exit(1)
