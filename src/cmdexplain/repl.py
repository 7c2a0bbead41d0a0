"""Prompt loop that explains one command per request."""

from __future__ import annotations

from .console import ExplainConsole
from .knowledge import Knowledge
from .logging_utils import log_event
from .models import ExplainCommandResponse
from .parser import parse_command

_EXIT_COMMANDS = frozenset({"exit", "quit"})


def explain_query(
    console: ExplainConsole, query: str, knowledge: Knowledge
) -> ExplainCommandResponse:
    """Parse query, render it, and return the parse result."""
    log_event("explain_request", query=query)
    response = parse_command(query, knowledge)
    if response.leaf_nodes is None:
        log_event("parse_failed", query=query)
    else:
        log_event(
            "explain_rendered",
            query=query,
            units=len(response.leaf_nodes),
            nodes=sum(len(unit) for unit in response.leaf_nodes),
        )
    console.render(response)
    return response


def run_repl(console: ExplainConsole, knowledge: Knowledge) -> None:
    """Prompt until exit/quit, EOF or Ctrl+C."""
    console.print_banner()
    while True:
        try:
            raw = console.prompt()
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

        query = raw.strip()
        if not query:
            continue
        if query.lower() in _EXIT_COMMANDS:
            break
        explain_query(console, query, knowledge)
