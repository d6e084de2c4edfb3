"""
Path value type.

PathValue wraps a path string and keeps it in canonical form: every
construction and every concatenation goes through PathUtils.normalize_path.
"""

from typing import Union

from ..utils.enforce import check_invariant
from ..utils.filesystem import DEFAULT_DIRECTORY_MODE, create_directory, get_working_directory
from ..utils.path_utils import SEPARATOR, PathUtils


class PathValue:
    """A normalized POSIX-style path.

    The text is read-only; only append (and '/=') changes it, and always
    renormalizes. Paths hash by text, so do not append to a path while it is
    used as a set member or dict key.
    """

    def __init__(self, text: str = ""):
        check_invariant(isinstance(text, str), f"Path must be a string, got {type(text).__name__}")
        self._text = PathUtils.normalize_path(text)

    @property
    def text(self) -> str:
        return self._text

    @classmethod
    def from_string(cls, path: str) -> "PathValue":
        """Build a PathValue from a raw path string."""
        return cls(path)

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"PathValue(text={self._text!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathValue):
            return NotImplemented
        return self._text == other._text

    def __hash__(self) -> int:
        return hash(self._text)

    def __fspath__(self) -> str:
        return self.text

    def join(self, other: Union[str, "PathValue"]) -> "PathValue":
        """Return a new path with other appended; self is left untouched."""
        ret = PathValue(self.text)
        ret.append(other)
        return ret

    def append(self, other: Union[str, "PathValue"]) -> "PathValue":
        """
        Append other in place and renormalize.

        Other is concatenated directly when it starts with a separator or
        when this path is empty, otherwise a separator is inserted.

        Raises:
            InvalidPathError: If the joined path ascends above the root
        """
        if isinstance(other, PathValue):
            other = other.text
        check_invariant(isinstance(other, str), f"Cannot append {type(other).__name__} to a path")
        if other:
            if other[0] == SEPARATOR or not self.text:
                joined = self.text + other
            else:
                joined = self.text + SEPARATOR + other
            self._text = PathUtils.normalize_path(joined)
        return self

    def __truediv__(self, other: Union[str, "PathValue"]) -> "PathValue":
        return self.join(other)

    def __itruediv__(self, other: Union[str, "PathValue"]) -> "PathValue":
        return self.append(other)

    def is_empty(self) -> bool:
        """Check if the path is empty."""
        return not self.text

    def is_absolute(self) -> bool:
        """Check if the path starts at the root. False for the empty path."""
        return not self.is_empty() and self.text[0] == SEPARATOR

    def is_relative(self) -> bool:
        """Check if the path is relative. False for the empty path."""
        return not self.is_empty() and self.text[0] != SEPARATOR

    def get_absolute_path(self, strict: bool = True) -> str:
        """
        Resolve the path against the current working directory.

        Args:
            strict: Forwarded to get_working_directory

        Returns:
            The path unchanged if absolute, else the normalized cwd-joined path
        """
        if self.is_absolute():
            return self.text
        return PathUtils.normalize_path(get_working_directory(strict) + SEPARATOR + self.text)

    def get_basename(self) -> str:
        """Return the last segment of the path."""
        if self.is_empty():
            return ""
        return self.text.rsplit(SEPARATOR, 1)[-1]

    def mkdir(self, recursive: bool = False, mode: int = DEFAULT_DIRECTORY_MODE) -> None:
        """Create the directory named by this path. See create_directory."""
        create_directory(self, recursive=recursive, mode=mode)
