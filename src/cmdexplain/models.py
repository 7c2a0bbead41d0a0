"""AST node models for explained commands."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from enum import StrEnum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class NodeKind(StrEnum):
    PROGRAM = "program"
    OPTION = "option"
    STICKY_OPTION = "sticky_option"
    SUBCOMMAND = "subcommand"
    ASSIGNMENT = "assignment"
    OPERATOR = "operator"
    SUDO = "sudo"
    ARGUMENT = "argument"
    PIPE = "pipe"


class CommandSchema(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    summary: str


class OptionSchema(BaseModel):
    model_config = ConfigDict(frozen=True)

    summary: str
    short: tuple[str, ...] | None = None
    long: tuple[str, ...] | None = None


class _NodeBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    # Half-open offsets into the original query.
    start: int = Field(ge=0)
    end: int = Field(ge=0)

    @model_validator(mode="after")
    def _check_span(self) -> _NodeBase:
        if self.end < self.start:
            raise ValueError(f"span end {self.end} precedes start {self.start}")
        return self


class ProgramNode(_NodeBase):
    kind: Literal["program"] = "program"
    command: CommandSchema


class SubcommandNode(_NodeBase):
    kind: Literal["subcommand"] = "subcommand"
    command: CommandSchema


class SudoNode(_NodeBase):
    kind: Literal["sudo"] = "sudo"
    command: CommandSchema


class OptionNode(_NodeBase):
    kind: Literal["option"] = "option"
    option: OptionSchema


class StickyOptionNode(_NodeBase):
    kind: Literal["sticky_option"] = "sticky_option"
    option: OptionSchema


class AssignmentNode(_NodeBase):
    kind: Literal["assignment"] = "assignment"
    word: str


class ArgumentNode(_NodeBase):
    kind: Literal["argument"] = "argument"
    word: str


class OperatorNode(_NodeBase):
    kind: Literal["operator"] = "operator"
    op: str


class PipeNode(_NodeBase):
    kind: Literal["pipe"] = "pipe"
    pipe: str


AstNode = Annotated[
    ProgramNode
    | SubcommandNode
    | SudoNode
    | OptionNode
    | StickyOptionNode
    | AssignmentNode
    | ArgumentNode
    | OperatorNode
    | PipeNode,
    Field(discriminator="kind"),
]

NODE_TYPES: tuple[type[_NodeBase], ...] = (
    ProgramNode,
    SubcommandNode,
    SudoNode,
    OptionNode,
    StickyOptionNode,
    AssignmentNode,
    ArgumentNode,
    OperatorNode,
    PipeNode,
)

# Outer order is document order; each inner group is one lexical unit.
ParsedUnits = Sequence[Sequence[AstNode]]


class ExplainCommandResponse(BaseModel):
    """What the upstream parser hands to the console for one query."""

    query: str
    leaf_nodes: list[list[AstNode]] | None = None


def is_recognized(node: object) -> bool:
    """Return True if node is one of the nine known AST node types."""
    return isinstance(node, NODE_TYPES)


def iter_nodes(units: ParsedUnits) -> Iterator[AstNode]:
    """Yield every node in document order with groups flattened."""
    for unit in units:
        yield from unit
