"""Problem name extraction from instance file paths."""

from typing import Optional, Sequence

from .path import PathValue
from ..utils.enforce import check_invariant

DEFAULT_PROBLEM_EXTENSIONS = ('.gz', '.bz2', '.mps', '.lp')


def extract_problem_name(file_name: str, extensions: Optional[Sequence[str]] = None) -> str:
    """
    Strip known extensions from the basename of file_name.

    Each extension is removed at most once, case-insensitively, in the given
    order, so compressed instances lose both suffixes:
    'dir/inst.mps.gz' -> 'inst'.

    Args:
        file_name: Path of the instance file
        extensions: Suffixes to strip (defaults to DEFAULT_PROBLEM_EXTENSIONS)

    Returns:
        The problem name
    """
    if extensions is None:
        extensions = DEFAULT_PROBLEM_EXTENSIONS
    check_invariant(not isinstance(extensions, str), "extensions must be a sequence of strings, not a string")

    name = PathValue(file_name).get_basename()
    for ext in extensions:
        if ext and name.lower().endswith(ext.lower()):
            name = name[:-len(ext)]
    return name
