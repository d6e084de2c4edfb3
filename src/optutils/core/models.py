"""
Configuration for optutils.

Defaults can be overridden through environment variables, which are also
read from a .env file in the working directory.
"""

import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

from .problem import DEFAULT_PROBLEM_EXTENSIONS
from ..utils.filesystem import DEFAULT_DIRECTORY_MODE
from ..utils.iteration_display import DEFAULT_HEADER_INTERVAL, DEFAULT_ITERATION_INTERVAL

# Load environment variables from .env file
load_dotenv()


def _env_list(name: str, default: List[str]) -> List[str]:
    raw = os.getenv(name)
    if not raw:
        return list(default)
    return [item.strip() for item in raw.split(',') if item.strip()]


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in ('1', 'true', 'yes', 'on')


def _env_mode(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw, 8)
    except ValueError:
        raise ValueError(f"{name} must be an octal mode such as 755, got '{raw}'") from None


@dataclass
class Config:
    """Configuration settings for optutils."""

    # Suffixes stripped by extract_problem_name, in order
    problem_extensions: List[str] = field(
        default_factory=lambda: _env_list('OPTUTILS_PROBLEM_EXTENSIONS', list(DEFAULT_PROBLEM_EXTENSIONS))
    )

    directory_mode: int = field(default_factory=lambda: _env_mode('OPTUTILS_DIRECTORY_MODE', DEFAULT_DIRECTORY_MODE))

    # Raise instead of returning '' when the working directory is unavailable
    strict_working_directory: bool = field(default_factory=lambda: _env_bool('OPTUTILS_STRICT_CWD', True))

    header_interval: int = DEFAULT_HEADER_INTERVAL
    iteration_interval: int = DEFAULT_ITERATION_INTERVAL
