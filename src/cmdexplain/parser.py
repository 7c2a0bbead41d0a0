"""Local command parser producing leaf-node groups with source spans.

The parser is deliberately shallow: it knows about control operators, pipes,
leading variable assignments, ``sudo``, subcommands and option clusters. It does
not expand, evaluate or validate anything.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from .constants import UNKNOWN_SUMMARY
from .errors import TokenizeError
from .knowledge import CommandEntry, Knowledge, OptionEntry
from .models import (
    ArgumentNode,
    AssignmentNode,
    AstNode,
    CommandSchema,
    ExplainCommandResponse,
    OperatorNode,
    OptionNode,
    OptionSchema,
    PipeNode,
    ProgramNode,
    StickyOptionNode,
    SubcommandNode,
    SudoNode,
)

logger = logging.getLogger(__name__)

# Longest first so "&&" wins over "&".
_CONTROL_OPERATORS = ("&&", "||", ";", "&", "|")
_PIPE = "|"
_QUOTES = "'\""
_ESCAPE = "\\"
_REDIRECTS = "<>"
_SUDO = "sudo"
_END_OF_OPTIONS = "--"
_ASSIGNMENT_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*=")


@dataclass(frozen=True)
class Token:
    text: str
    start: int
    end: int
    control: bool = False


def tokenize(query: str) -> list[Token]:
    """Split query into words and control operators, keeping offsets.

    Raises TokenizeError on an unterminated quote or a trailing escape.
    """
    tokens: list[Token] = []
    i = 0
    length = len(query)
    while i < length:
        if query[i].isspace():
            i += 1
            continue
        operator = _control_at(query, i)
        if operator is not None:
            tokens.append(Token(operator, i, i + len(operator), control=True))
            i += len(operator)
            continue
        end = _scan_word(query, i)
        tokens.append(Token(query[i:end], i, end))
        i = end
    return tokens


def parse_command(query: str, knowledge: Knowledge) -> ExplainCommandResponse:
    """Parse query into leaf-node groups.

    A query that cannot be tokenized, or that holds no words at all, comes back
    with ``leaf_nodes`` set to None.
    """
    try:
        tokens = tokenize(query)
    except TokenizeError as exc:
        logger.debug("tokenize failed: %s", exc)
        return ExplainCommandResponse(query=query, leaf_nodes=None)

    if not any(not token.control for token in tokens):
        return ExplainCommandResponse(query=query, leaf_nodes=None)

    units: list[list[AstNode]] = []
    words: list[Token] = []
    for token in tokens:
        if not token.control:
            words.append(token)
            continue
        units.extend(_parse_simple_command(words, knowledge))
        words = []
        units.append([_control_node(token)])
    units.extend(_parse_simple_command(words, knowledge))
    return ExplainCommandResponse(query=query, leaf_nodes=units)


def _control_at(query: str, index: int) -> str | None:
    for operator in _CONTROL_OPERATORS:
        if query.startswith(operator, index):
            return operator
    return None


def _scan_word(query: str, start: int) -> int:
    i = start
    length = len(query)
    while i < length:
        char = query[i]
        # "2>&1" and "<&3" duplicate descriptors; the "&" is not a control operator.
        if char in _REDIRECTS and query.startswith("&", i + 1):
            i += 2
            continue
        if char.isspace() or _control_at(query, i) is not None:
            break
        if char == _ESCAPE:
            if i + 1 >= length:
                raise TokenizeError("Trailing escape character", i)
            i += 2
            continue
        if char in _QUOTES:
            i = _scan_quoted(query, i)
            continue
        i += 1
    return i


def _scan_quoted(query: str, open_index: int) -> int:
    quote = query[open_index]
    i = open_index + 1
    while i < len(query):
        char = query[i]
        # Backslash escapes only inside double quotes.
        if char == _ESCAPE and quote == '"':
            i += 2
            continue
        if char == quote:
            return i + 1
        i += 1
    raise TokenizeError("Unterminated quote", open_index)


def _control_node(token: Token) -> AstNode:
    if token.text == _PIPE:
        return PipeNode(start=token.start, end=token.end, pipe=token.text)
    return OperatorNode(start=token.start, end=token.end, op=token.text)


def _parse_simple_command(words: list[Token], knowledge: Knowledge) -> list[list[AstNode]]:
    units: list[list[AstNode]] = []
    index = _parse_assignments(words, 0, units)

    if index < len(words) and words[index].text == _SUDO:
        word = words[index]
        sudo_entry = knowledge.find_command(_SUDO)
        units.append(
            [SudoNode(start=word.start, end=word.end, command=_command_schema(sudo_entry, _SUDO))]
        )
        index = _parse_words(words, index + 1, sudo_entry, units, stop_at_argument=True)
        # sudo passes VAR=value words on to the command's environment.
        index = _parse_assignments(words, index, units)

    if index < len(words):
        word = words[index]
        entry = knowledge.find_command(word.text)
        units.append(
            [ProgramNode(start=word.start, end=word.end, command=_command_schema(entry, word.text))]
        )
        _parse_words(words, index + 1, entry, units, stop_at_argument=False)

    return units


def _parse_assignments(words: list[Token], index: int, units: list[list[AstNode]]) -> int:
    while index < len(words) and _ASSIGNMENT_RE.match(words[index].text):
        word = words[index]
        units.append([AssignmentNode(start=word.start, end=word.end, word=word.text)])
        index += 1
    return index


def _parse_words(
    words: list[Token],
    index: int,
    entry: CommandEntry | None,
    units: list[list[AstNode]],
    *,
    stop_at_argument: bool,
) -> int:
    """Consume option, subcommand and argument words; return the next index."""
    seen_argument = False
    options_ended = False
    while index < len(words):
        word = words[index]
        text = word.text

        if not options_ended and text == _END_OF_OPTIONS:
            options_ended = True
            seen_argument = True
            units.append([_argument(word)])
            index += 1
            continue

        if not options_ended and text.startswith("-") and len(text) > 1:
            if text.startswith("--"):
                group, needs_value = _parse_long_option(word, entry)
            else:
                group, needs_value = _parse_short_options(word, entry)
            units.append(group)
            index += 1
            if needs_value and index < len(words):
                units.append([_argument(words[index])])
                index += 1
            continue

        if stop_at_argument:
            break

        if not seen_argument and entry is not None:
            subcommand = entry.find_subcommand(text)
            if subcommand is not None:
                units.append(
                    [
                        SubcommandNode(
                            start=word.start,
                            end=word.end,
                            command=_command_schema(subcommand, text),
                        )
                    ]
                )
                entry = subcommand
                index += 1
                continue

        seen_argument = True
        units.append([_argument(word)])
        index += 1
    return index


def _parse_long_option(word: Token, entry: CommandEntry | None) -> tuple[list[AstNode], bool]:
    name, equals, _value = word.text.partition("=")
    option = entry.find_option(name) if entry is not None else None
    node = OptionNode(start=word.start, end=word.end, option=_option_schema(option, name))
    needs_value = option is not None and option.takes_value and not equals
    return [node], needs_value


def _parse_short_options(word: Token, entry: CommandEntry | None) -> tuple[list[AstNode], bool]:
    """Split a short-option cluster such as ``-la`` into one node per letter.

    The first letter's span includes the dash. A letter whose option takes a
    value absorbs the rest of the cluster as a sticky option; if nothing
    follows it, the value is expected in the next word.
    """
    text = word.text
    whole = entry.find_option(text) if entry is not None else None
    if whole is not None:
        node = OptionNode(start=word.start, end=word.end, option=_option_schema(whole, text))
        return [node], whole.takes_value

    group: list[AstNode] = []
    for offset in range(1, len(text)):
        alias = f"-{text[offset]}"
        node_start = word.start if offset == 1 else word.start + offset
        option = entry.find_option(alias) if entry is not None else None
        schema = _option_schema(option, alias)
        if option is not None and option.takes_value:
            if offset + 1 < len(text):
                group.append(StickyOptionNode(start=node_start, end=word.end, option=schema))
                return group, False
            group.append(OptionNode(start=node_start, end=word.end, option=schema))
            return group, True
        group.append(OptionNode(start=node_start, end=word.start + offset + 1, option=schema))
    return group, False


def _argument(word: Token) -> ArgumentNode:
    return ArgumentNode(start=word.start, end=word.end, word=word.text)


def _command_schema(entry: CommandEntry | None, fallback_name: str) -> CommandSchema:
    if entry is None:
        return CommandSchema(name=fallback_name, summary=UNKNOWN_SUMMARY)
    return CommandSchema(name=entry.name, summary=entry.summary)


def _option_schema(option: OptionEntry | None, alias: str) -> OptionSchema:
    if option is None:
        if alias.startswith("--"):
            return OptionSchema(summary=UNKNOWN_SUMMARY, long=(alias,))
        return OptionSchema(summary=UNKNOWN_SUMMARY, short=(alias,))
    return OptionSchema(
        summary=option.summary,
        short=tuple(option.short) or None,
        long=tuple(option.long) or None,
    )
