"""
Filesystem helpers: working directory lookup and directory creation.

These are the only functions in optutils that touch process-external state.
No locking is done; "already exists" counts as success at every level, so
overlapping recursive creations do not fail each other.
"""

import os
import logging
from typing import Union

from ..exceptions import DirectoryCreationError, WorkingDirectoryError
from .path_utils import SEPARATOR, PathUtils

DEFAULT_DIRECTORY_MODE = 0o777

logger = logging.getLogger(__name__)


def get_working_directory(strict: bool = True) -> str:
    """
    Return the absolute current working directory.

    Args:
        strict: Raise on failure. When False, log a warning and return ''.

    Returns:
        Current working directory

    Raises:
        WorkingDirectoryError: If the directory cannot be retrieved and strict is set
    """
    try:
        return os.getcwd()
    except OSError as e:
        if strict:
            raise WorkingDirectoryError(f"Cannot retrieve working directory: {e.strerror or e}") from e
        logger.warning(f"Cannot retrieve working directory, using empty path: {e}")
        return ""


def _make_one(path: str, mode: int) -> None:
    try:
        os.mkdir(path, mode)
        logger.debug(f"Created directory {path}")
    except FileExistsError:
        if not os.path.isdir(path):
            raise DirectoryCreationError(path, "File exists and is not a directory")
    except OSError as e:
        raise DirectoryCreationError(path, e.strerror or str(e)) from e


def create_directory(path: Union[str, "os.PathLike[str]"], recursive: bool = False,
                     mode: int = DEFAULT_DIRECTORY_MODE) -> None:
    """
    Create the directory named by path.

    A path string is normalized first, so segments cancelled by a later
    '..' are never created. An existing directory counts as success; an
    existing file of the same name does not. In recursive mode every
    ancestor is created first, left to right. A failure stops the walk;
    ancestors created so far are left in place.

    Args:
        path: Directory to create (a PathValue or a path string)
        recursive: Also create missing ancestors
        mode: Access mode passed to mkdir

    Raises:
        DirectoryCreationError: If a directory cannot be created
        InvalidPathError: If a path string ascends above the root
    """
    data = PathUtils.normalize_path(os.fspath(path))
    if not data:
        return

    if recursive:
        index = data.find(SEPARATOR)
        while index != -1:
            # index 0 is the root marker of an absolute path
            if index > 0:
                _make_one(data[:index], mode)
            index = data.find(SEPARATOR, index + 1)

    _make_one(data, mode)
