"""Errors raised by the generation engine."""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for every failure raised while generating a project."""


class ScaffoldWriteError(ScaffoldError):
    """Raised when a directory cannot be created or a file cannot be written."""

    def __init__(self, path: str | Path, operation: str, cause: OSError) -> None:
        self.path = Path(path)
        self.operation = operation
        self.cause = cause
        super().__init__(f"Failed to {operation} {self.path}: {cause}")


class GitInitError(ScaffoldError):
    """Raised when ``git init`` cannot be run or exits with a non-zero code."""

    def __init__(self, message: str, command: str = "", returncode: int | None = None, stderr: str = ""):
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(message)
