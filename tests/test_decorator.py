"""Tests for kind-aware decoration."""

from colorama import Fore, Style

from cmdexplain.decorator import DEFAULT_PALETTE, Decorator, strip_decoration
from cmdexplain.models import ArgumentNode, CommandSchema, NodeKind, ProgramNode


def test_palette_covers_every_kind() -> None:
    assert set(DEFAULT_PALETTE) == set(NodeKind)


def test_decorate_wraps_with_kind_style_and_reset() -> None:
    node = ProgramNode(start=0, end=2, command=CommandSchema(name="ls", summary="s"))
    decorated = Decorator().decorate("ls", node)
    assert decorated == f"{DEFAULT_PALETTE[NodeKind.PROGRAM]}ls{Style.RESET_ALL}"


def test_custom_palette_is_used() -> None:
    node = ArgumentNode(start=0, end=1, word="x")
    decorator = Decorator({NodeKind.ARGUMENT: Fore.RED})
    assert decorator.decorate("x", node) == f"{Fore.RED}x{Style.RESET_ALL}"


def test_kind_missing_from_palette_passes_through() -> None:
    node = ArgumentNode(start=0, end=1, word="x")
    assert Decorator({NodeKind.PROGRAM: Fore.RED}).decorate("x", node) == "x"


def test_disabled_decorator_is_identity() -> None:
    node = ArgumentNode(start=0, end=1, word="x")
    decorator = Decorator(enabled=False)
    assert not decorator.enabled
    assert decorator.decorate("x", node) == "x"


def test_empty_text_and_unknown_objects_pass_through() -> None:
    node = ArgumentNode(start=0, end=0, word="")
    decorator = Decorator()
    assert decorator.decorate("", node) == ""
    assert decorator.decorate("x", object()) == "x"


def test_strip_decoration_removes_sgr_sequences() -> None:
    text = f"{Style.BRIGHT}{Fore.GREEN}ls{Style.RESET_ALL} -la"
    assert strip_decoration(text) == "ls -la"


def test_strip_decoration_also_removes_sequences_typed_into_text() -> None:
    typed = "echo \x1b[31mred"
    decorated = f"{Fore.GREEN}echo{Style.RESET_ALL} \x1b[31mred"
    assert strip_decoration(decorated) == "echo red"
    assert strip_decoration(decorated) != typed
