"""Command knowledge: program, subcommand and option summaries."""

from __future__ import annotations

import json
from importlib import resources
from pathlib import Path

from pydantic import BaseModel, ValidationError

from .constants import DEFAULT_KNOWLEDGE_RESOURCE
from .errors import KnowledgeLoadError


class OptionEntry(BaseModel):
    summary: str
    short: list[str] = []
    long: list[str] = []
    takes_value: bool = False

    def matches(self, alias: str) -> bool:
        return alias in self.short or alias in self.long


class CommandEntry(BaseModel):
    name: str
    summary: str
    options: list[OptionEntry] = []
    subcommands: list[CommandEntry] = []

    def find_option(self, alias: str) -> OptionEntry | None:
        for option in self.options:
            if option.matches(alias):
                return option
        return None

    def find_subcommand(self, name: str) -> CommandEntry | None:
        for subcommand in self.subcommands:
            if subcommand.name == name:
                return subcommand
        return None


class Knowledge(BaseModel):
    commands: list[CommandEntry] = []

    def find_command(self, name: str) -> CommandEntry | None:
        # Match on the basename so "/usr/bin/ls" resolves like "ls".
        basename = name.rsplit("/", 1)[-1]
        for command in self.commands:
            if command.name == basename:
                return command
        return None


def load_knowledge(path: Path) -> Knowledge:
    """Load and validate a knowledge JSON file."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise KnowledgeLoadError(str(path), str(exc)) from exc
    return _parse_knowledge(text, str(path))


def load_default_knowledge() -> Knowledge:
    """Load the knowledge file shipped with the package."""
    text = (
        resources.files("cmdexplain")
        .joinpath("data", DEFAULT_KNOWLEDGE_RESOURCE)
        .read_text(encoding="utf-8")
    )
    return _parse_knowledge(text, DEFAULT_KNOWLEDGE_RESOURCE)


def _parse_knowledge(text: str, source: str) -> Knowledge:
    try:
        data = json.loads(text)
        return Knowledge.model_validate(data)
    except json.JSONDecodeError as exc:
        raise KnowledgeLoadError(source, f"invalid JSON: {exc}") from exc
    except ValidationError as exc:
        raise KnowledgeLoadError(source, f"invalid structure: {exc}") from exc
