"""Custom exception types for cmdexplain."""

from __future__ import annotations


class CmdExplainError(Exception):
    """Base class for all cmdexplain errors."""


class StartupValidationError(CmdExplainError):
    def __init__(self, message: str) -> None:
        super().__init__(message)


class PathMappingError(CmdExplainError):
    def __init__(self, message: str) -> None:
        super().__init__(message)


class KnowledgeLoadError(CmdExplainError):
    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"Could not load command knowledge from {source}: {reason}")


class TokenizeError(CmdExplainError):
    def __init__(self, message: str, position: int) -> None:
        super().__init__(f"{message} (at offset {position})")
        self.position = position
