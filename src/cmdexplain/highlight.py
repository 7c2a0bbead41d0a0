"""Decorate a query string span by span."""

from __future__ import annotations

import logging

from .decorator import Decorator
from .models import AstNode, ParsedUnits, is_recognized, iter_nodes

logger = logging.getLogger(__name__)


def highlight(query: str, units: ParsedUnits, decorator: Decorator) -> str:
    """Return query with every recognized node's span decorated.

    Spans are applied in increasing start order. Text between spans, and the
    span of anything that is not a known node type, is copied unchanged, so
    stripping the decoration gives back the query exactly, as long as the
    query holds no ESC characters of its own.
    """
    nodes: list[AstNode] = sorted(
        (node for node in iter_nodes(units) if is_recognized(node)),
        key=lambda node: (node.start, node.end),
    )

    pieces: list[str] = []
    cursor = 0
    for node in nodes:
        start = min(node.start, len(query))
        end = min(node.end, len(query))
        if start < cursor:
            logger.debug(
                "skipping overlapping span %d-%d (cursor at %d)", node.start, node.end, cursor
            )
            continue
        pieces.append(query[cursor:start])
        pieces.append(decorator.decorate(query[start:end], node))
        cursor = end
    pieces.append(query[cursor:])
    return "".join(pieces)
