"""Application-wide constants."""

from __future__ import annotations

EXPLAIN_PROMPT_MESSAGE = "Explain a command:"
EXPLAIN_PROMPT_PREFIX = "\N{ELECTRIC LIGHT BULB}"

BANNER_LINES = (
    "cmdexplain - read a shell command piece by piece",
    "Type 'exit' or 'quit' to leave.",
)

NO_RESULT_MESSAGE = "No result"
UNKNOWN_SUMMARY = "No description available"

ENV_NO_COLOR = "NO_COLOR"
DEFAULT_KNOWLEDGE_RESOURCE = "commands.json"
