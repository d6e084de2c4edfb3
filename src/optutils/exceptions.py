"""Exception types raised by optutils."""

from typing import Optional


class OptUtilsError(Exception):
    """Base class for all optutils errors."""


class InvalidPathError(OptUtilsError, ValueError):
    """Raised when a path tries to ascend above the filesystem root."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Bad path: {path}")


class DirectoryCreationError(OptUtilsError, OSError):
    """Raised when a directory cannot be created for a reason other than existing already."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot create directory '{path}': {reason}")

    def __str__(self) -> str:
        return self.args[0]


class WorkingDirectoryError(OptUtilsError, OSError):
    """Raised when the current working directory cannot be retrieved."""

    def __str__(self) -> str:
        return self.args[0] if self.args else "Cannot retrieve working directory"


class PreconditionError(OptUtilsError, RuntimeError):
    """Raised by check_invariant/enforce when a condition does not hold."""

    def __init__(self, message: str, filename: Optional[str] = None, lineno: Optional[int] = None):
        self.message = message
        self.filename = filename
        self.lineno = lineno
        locus = f"{filename}, line: {lineno}" if filename else "unknown location"
        super().__init__(f"{message}\n{locus}" if message else locus)
