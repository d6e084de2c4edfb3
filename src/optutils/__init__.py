"""Path handling and small utilities for optimization applications."""

from .exceptions import (
    OptUtilsError,
    InvalidPathError,
    DirectoryCreationError,
    WorkingDirectoryError,
    PreconditionError,
)
from .core import PathValue, extract_problem_name
from .utils import PathUtils, create_directory, get_working_directory

__version__ = "0.1.0"

__all__ = [
    "OptUtilsError",
    "InvalidPathError",
    "DirectoryCreationError",
    "WorkingDirectoryError",
    "PreconditionError",
    "PathValue",
    "extract_problem_name",
    "PathUtils",
    "create_directory",
    "get_working_directory",
]
