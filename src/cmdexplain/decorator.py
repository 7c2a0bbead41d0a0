"""Kind-aware terminal styling for labels and query spans."""

from __future__ import annotations

import re
from collections.abc import Mapping

from colorama import Fore, Style

from .models import AstNode, NodeKind, is_recognized

# Matches every SGR sequence colorama emits (colors, brightness, reset).
_SGR_RE = re.compile(r"\x1b\[[0-9;]*m")

DEFAULT_PALETTE: Mapping[NodeKind, str] = {
    NodeKind.PROGRAM: Style.BRIGHT + Fore.GREEN,
    NodeKind.SUBCOMMAND: Style.BRIGHT + Fore.CYAN,
    NodeKind.SUDO: Style.BRIGHT + Fore.RED,
    NodeKind.OPTION: Fore.YELLOW,
    NodeKind.STICKY_OPTION: Fore.YELLOW,
    NodeKind.ASSIGNMENT: Fore.MAGENTA,
    NodeKind.ARGUMENT: Fore.BLUE,
    NodeKind.OPERATOR: Style.BRIGHT + Fore.WHITE,
    NodeKind.PIPE: Style.BRIGHT + Fore.MAGENTA,
}


class Decorator:
    """Wrap text in the style registered for a node's kind."""

    def __init__(
        self,
        palette: Mapping[NodeKind, str] | None = None,
        *,
        enabled: bool = True,
    ) -> None:
        self._palette = dict(DEFAULT_PALETTE if palette is None else palette)
        self._enabled = enabled

    @property
    def enabled(self) -> bool:
        return self._enabled

    def decorate(self, text: str, node: AstNode | object) -> str:
        if not self._enabled or not text or not is_recognized(node):
            return text
        style = self._palette.get(NodeKind(node.kind))  # type: ignore[union-attr]
        if not style:
            return text
        return f"{style}{text}{Style.RESET_ALL}"


def strip_decoration(text: str) -> str:
    """Remove every ANSI SGR sequence from text.

    Sequences are not told apart by origin: an SGR sequence typed into the query
    itself is removed as well, so stripping a highlighted query only gives the
    query back when the query holds no ESC characters.
    """
    return _SGR_RE.sub("", text)
