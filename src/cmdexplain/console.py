"""Terminal console: banner, errors, the explain prompt and rendering."""

from __future__ import annotations

import sys
from collections.abc import Iterable

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory

from .constants import (
    BANNER_LINES,
    EXPLAIN_PROMPT_MESSAGE,
    EXPLAIN_PROMPT_PREFIX,
    NO_RESULT_MESSAGE,
)
from .decorator import Decorator
from .explanation import make_help
from .highlight import highlight
from .models import ExplainCommandResponse


class Console:
    """Plain-text output shared by every console."""

    def __init__(self, banner_lines: Iterable[str] = BANNER_LINES) -> None:
        self._banner_lines = tuple(banner_lines)

    def print(self, *lines: str) -> None:
        """Print each line; with no arguments print one blank line."""
        if not lines:
            print()
            return
        for line in lines:
            print(line)

    def print_block(self, text: str) -> None:
        """Print pre-terminated text as-is."""
        print(text, end="")

    def print_banner(self) -> None:
        """Print the welcome lines, then one trailing blank."""
        for line in self._banner_lines:
            print(line)
        print()

    def error(self, message: str) -> None:
        print(f"ERROR: {message}", file=sys.stderr)


def create_prompt_session() -> PromptSession:
    """Create the prompt-toolkit session used for explain requests."""
    return PromptSession(history=InMemoryHistory())


class ExplainConsole(Console):
    def __init__(
        self,
        decorator: Decorator,
        *,
        prompt_prefix: str = EXPLAIN_PROMPT_PREFIX,
        session: PromptSession | None = None,
        banner_lines: Iterable[str] = BANNER_LINES,
    ) -> None:
        super().__init__(banner_lines)
        self._decorator = decorator
        self._prompt_prefix = prompt_prefix
        self._session = session

    @property
    def prompt_message(self) -> str:
        if not self._prompt_prefix:
            return f"{EXPLAIN_PROMPT_MESSAGE} "
        return f"{self._prompt_prefix} {EXPLAIN_PROMPT_MESSAGE} "

    def prompt(self) -> str:
        """Ask for one command. EOFError and KeyboardInterrupt propagate."""
        if self._session is None:
            self._session = create_prompt_session()
        return self._session.prompt(self.prompt_message)

    def render(self, response: ExplainCommandResponse) -> None:
        self.print()
        if response.leaf_nodes:
            decorated_query = highlight(response.query, response.leaf_nodes, self._decorator)
            self.print(f"  {decorated_query}")
            self.print()
            self.print_block(make_help(response.leaf_nodes, self._decorator))
        else:
            self.error(NO_RESULT_MESSAGE)
        self.print()
