"""Tests for command knowledge loading and lookup."""

import json
from pathlib import Path

import pytest

from cmdexplain.errors import KnowledgeLoadError
from cmdexplain.knowledge import Knowledge, load_default_knowledge, load_knowledge


def test_default_knowledge_loads_and_knows_common_commands() -> None:
    knowledge = load_default_knowledge()
    ls = knowledge.find_command("ls")
    assert ls is not None
    assert ls.summary == "list directory contents"
    assert ls.find_option("-l") is not None
    git = knowledge.find_command("git")
    assert git is not None
    assert git.find_subcommand("commit") is not None


def test_load_knowledge_from_file(tmp_path: Path) -> None:
    path = tmp_path / "commands.json"
    data = {
        "commands": [
            {
                "name": "frob",
                "summary": "frobnicate things",
                "options": [{"long": ["--hard"], "summary": "frobnicate harder"}],
            }
        ]
    }
    path.write_text(json.dumps(data), encoding="utf-8")

    knowledge = load_knowledge(path)

    frob = knowledge.find_command("frob")
    assert frob is not None
    option = frob.find_option("--hard")
    assert option is not None
    assert option.short == []
    assert option.takes_value is False
    assert frob.find_option("-h") is None


def test_load_knowledge_missing_file(tmp_path: Path) -> None:
    with pytest.raises(KnowledgeLoadError, match="Could not load command knowledge"):
        load_knowledge(tmp_path / "missing.json")


def test_load_knowledge_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(KnowledgeLoadError, match="invalid JSON"):
        load_knowledge(path)


def test_load_knowledge_invalid_structure(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"commands": [{"name": "x"}]}), encoding="utf-8")
    with pytest.raises(KnowledgeLoadError, match="invalid structure"):
        load_knowledge(path)


def test_find_command_matches_basename(knowledge: Knowledge) -> None:
    assert knowledge.find_command("/usr/bin/ls") is knowledge.find_command("ls")
    assert knowledge.find_command("nope") is None
