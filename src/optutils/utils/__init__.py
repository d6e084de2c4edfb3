"""Utility modules for optutils."""

from .path_utils import PathUtils
from .filesystem import create_directory, get_working_directory
from .enforce import check_invariant, enforce
from .registry import Registry
from .iteration_display import IterationDisplay

__all__ = [
    "PathUtils",
    "create_directory",
    "get_working_directory",
    "check_invariant",
    "enforce",
    "Registry",
    "IterationDisplay",
]
