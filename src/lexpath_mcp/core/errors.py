from __future__ import annotations


class LexPathError(Exception):
    """Base error for the project."""


class UnrelatedPathsError(LexPathError, ValueError):
    """No lexical relative path exists between the two inputs."""

    def __init__(self, path: str, base: str, reason: str) -> None:
        super().__init__(f"{path!r} is not relative to {base!r}: {reason}")
        self.path = path
        self.base = base
        self.reason = reason


class EnvironmentUnavailableError(LexPathError):
    pass


class InvalidCurrentDirError(LexPathError, ValueError):
    pass


class PlatformMismatchError(LexPathError, ValueError):
    pass
