"""Core components for optutils."""

from .models import Config
from .path import PathValue
from .problem import DEFAULT_PROBLEM_EXTENSIONS, extract_problem_name

__all__ = [
    "Config",
    "PathValue",
    "DEFAULT_PROBLEM_EXTENSIONS",
    "extract_problem_name",
]
