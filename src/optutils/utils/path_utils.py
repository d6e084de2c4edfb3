"""Lexical path normalization for POSIX-style path strings."""

import logging
from typing import List

from ..exceptions import InvalidPathError

SEPARATOR = '/'
CURRENT_DIR = '.'
PARENT_DIR = '..'

logger = logging.getLogger(__name__)


class PathUtils:
    """Utilities for keeping path strings in canonical form."""

    @staticmethod
    def normalize_path(path: str) -> str:
        """
        Rewrite a raw path into canonical form.

        Redundant separators and '.' segments are dropped, and every '..'
        preceded by a real segment cancels with it. A '..' with nothing to
        cancel against is kept, so relative paths may start with '../'.

        Args:
            path: Raw path string

        Returns:
            Canonical path ('/' for an empty rooted path, '' for an empty one)

        Raises:
            InvalidPathError: If a rooted path ascends above the root
        """
        if not path:
            return ""

        has_root = path[0] == SEPARATOR
        segments = [s for s in path.split(SEPARATOR) if s and s != CURRENT_DIR]

        if has_root and segments and segments[0] == PARENT_DIR:
            logger.debug(f"Rejected path ascending above root: {path}")
            raise InvalidPathError(path)

        # Pairwise cancellation, left to right
        resolved: List[str] = []
        for segment in segments:
            if segment == PARENT_DIR and resolved and resolved[-1] != PARENT_DIR:
                resolved.pop()
            else:
                resolved.append(segment)

        if has_root and resolved and resolved[0] == PARENT_DIR:
            logger.debug(f"Rejected path resolving above root: {path}")
            raise InvalidPathError(path)

        joined = PathUtils.join_path_components(resolved)
        return SEPARATOR + joined if has_root else joined

    @staticmethod
    def normalize_and_split(path: str) -> List[str]:
        """
        Normalize path and split into its segments.

        Args:
            path: Path to split

        Returns:
            List of canonical segments (the root marker is not a segment)
        """
        normalized = PathUtils.normalize_path(path)
        return [s for s in normalized.split(SEPARATOR) if s]

    @staticmethod
    def join_path_components(components: List[str]) -> str:
        """
        Join path components with forward slashes.

        Args:
            components: List of path components

        Returns:
            Joined path with forward slashes
        """
        return SEPARATOR.join(components)
