"""Pytest configuration and fixtures for cmdexplain tests."""

import pytest

from cmdexplain.decorator import Decorator
from cmdexplain.knowledge import CommandEntry, Knowledge, OptionEntry
from cmdexplain.models import CommandSchema, OptionNode, OptionSchema, ProgramNode


@pytest.fixture
def plain() -> Decorator:
    """Decorator that leaves text untouched, for exact string assertions."""
    return Decorator(enabled=False)


@pytest.fixture
def colored() -> Decorator:
    return Decorator()


@pytest.fixture
def ls_units() -> list[list]:
    """Leaf nodes for "ls -la" as a remote parser would report them."""
    return [
        [
            ProgramNode(
                start=0,
                end=2,
                command=CommandSchema(name="ls", summary="list directory contents"),
            )
        ],
        [
            OptionNode(
                start=3,
                end=6,
                option=OptionSchema(summary="long, all", short=["-l", "-a"]),
            )
        ],
    ]


@pytest.fixture
def knowledge() -> Knowledge:
    return Knowledge(
        commands=[
            CommandEntry(
                name="sudo",
                summary="execute a command as another user",
                options=[OptionEntry(short=["-u"], summary="target user", takes_value=True)],
            ),
            CommandEntry(
                name="ls",
                summary="list directory contents",
                options=[
                    OptionEntry(short=["-l"], summary="use a long listing format"),
                    OptionEntry(short=["-a"], long=["--all"], summary="show hidden entries"),
                    OptionEntry(short=["-I"], long=["--ignore"], summary="ignore PATTERN", takes_value=True),
                ],
            ),
            CommandEntry(
                name="git",
                summary="the stupid content tracker",
                subcommands=[
                    CommandEntry(
                        name="commit",
                        summary="record changes to the repository",
                        options=[
                            OptionEntry(short=["-m"], long=["--message"], summary="commit message", takes_value=True),
                        ],
                    )
                ],
            ),
            CommandEntry(name="grep", summary="print lines that match patterns"),
        ]
    )
