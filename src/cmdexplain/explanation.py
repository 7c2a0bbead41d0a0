"""Per-node explanation records and their text rendering."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import assert_never

from .decorator import Decorator
from .models import (
    ArgumentNode,
    AssignmentNode,
    AstNode,
    NodeKind,
    OperatorNode,
    OptionNode,
    OptionSchema,
    ParsedUnits,
    PipeNode,
    ProgramNode,
    StickyOptionNode,
    SubcommandNode,
    SudoNode,
    is_recognized,
    iter_nodes,
)

ASSIGNMENT_TEXT = "A variable passed to the program process"
ARGUMENT_TEXT = "an argument"
PIPE_TEXT = "A pipe connects the STDOUT of the first process to the STDIN of the second"
OPERATOR_TEXTS = {
    "&&": "command2 is executed if, and only if, command1 returns an exit status of zero",
    "||": "command2 is executed if and only if command1 returns a non-zero exit status",
}

_ALIAS_SEPARATOR = ", "
_SUDO_LABEL = "sudo"


@dataclass(frozen=True)
class Explanation:
    node: AstNode
    label: str
    # None for operators without known wording.
    text: str | None

    @property
    def kind(self) -> NodeKind:
        return NodeKind(self.node.kind)


def option_label(option: OptionSchema) -> str:
    """Join short then long aliases, skipping a missing or empty group."""
    groups = [
        _ALIAS_SEPARATOR.join(aliases)
        for aliases in (option.short, option.long)
        if aliases
    ]
    return _ALIAS_SEPARATOR.join(groups)


def explain_node(node: AstNode) -> Explanation:
    match node:
        case ProgramNode() | SubcommandNode():
            return Explanation(node, node.command.name, node.command.summary)
        case SudoNode():
            return Explanation(node, _SUDO_LABEL, node.command.summary)
        case OptionNode() | StickyOptionNode():
            return Explanation(node, option_label(node.option), node.option.summary)
        case AssignmentNode():
            return Explanation(node, node.word, ASSIGNMENT_TEXT)
        case ArgumentNode():
            return Explanation(node, node.word, ARGUMENT_TEXT)
        case PipeNode():
            return Explanation(node, node.pipe, PIPE_TEXT)
        case OperatorNode():
            return Explanation(node, node.op, OPERATOR_TEXTS.get(node.op))
        case _:
            assert_never(node)


def build_explanations(units: ParsedUnits) -> list[Explanation]:
    """Explain every recognized node in document order.

    Objects that are not one of the known node types contribute nothing.
    """
    return [explain_node(node) for node in iter_nodes(units) if is_recognized(node)]


def format_explanation(record: Explanation, decorator: Decorator) -> str:
    """Render one record as a newline-terminated help line."""
    label = decorator.decorate(record.label, record.node)
    if record.kind == NodeKind.OPERATOR:
        return f"  {label} - {record.text or ''}\n"
    return f"  {label}: {record.text}\n"


def render_explanations(records: Iterable[Explanation], decorator: Decorator) -> str:
    return "".join(format_explanation(record, decorator) for record in records)


def make_help(units: ParsedUnits, decorator: Decorator) -> str:
    """Build the explanation block shown under the highlighted query."""
    return render_explanations(build_explanations(units), decorator)
