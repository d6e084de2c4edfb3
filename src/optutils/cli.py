"""Command-line interface for optutils."""
import sys
import logging
from typing import Tuple

import click
from rich.console import Console
from rich.markup import escape

from .core.models import Config
from .core.path import PathValue
from .core.problem import extract_problem_name
from .exceptions import OptUtilsError


def setup_logging(debug: bool) -> None:
    """Configure logging based on debug flag."""
    level = logging.DEBUG if debug else logging.WARNING
    format_string = '[%(levelname)s] %(message)s'

    logging.basicConfig(
        level=level,
        format=format_string,
        handlers=[logging.StreamHandler(sys.stderr)]
    )


def _fail(error: Exception) -> None:
    Console(stderr=True, highlight=False, soft_wrap=True).print(f"[bold red]error:[/bold red] {escape(str(error))}")
    sys.exit(1)


@click.group()
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.version_option(package_name='optutils')
@click.pass_context
def main(ctx: click.Context, debug: bool) -> None:
    """
    Path helpers for optimization runs.

    Examples:

        optutils normalize ./runs/../out//x

        optutils probname instances/air04.mps.gz

        optutils mkdir -p out/air04/logs
    """
    setup_logging(debug)
    try:
        ctx.obj = Config()
    except ValueError as e:
        _fail(e)


@main.command()
@click.argument('paths', nargs=-1, required=True)
def normalize(paths: Tuple[str, ...]) -> None:
    """Print the canonical form of each PATH."""
    try:
        for path in paths:
            click.echo(PathValue(path).text)
    except OptUtilsError as e:
        _fail(e)


@main.command()
@click.argument('path')
@click.pass_obj
def abspath(config: Config, path: str) -> None:
    """Print PATH resolved against the working directory."""
    try:
        click.echo(PathValue(path).get_absolute_path(strict=config.strict_working_directory))
    except OptUtilsError as e:
        _fail(e)


@main.command()
@click.argument('path')
def basename(path: str) -> None:
    """Print the last segment of PATH."""
    try:
        click.echo(PathValue(path).get_basename())
    except OptUtilsError as e:
        _fail(e)


@main.command()
@click.argument('file_name')
@click.option('--ext', '-e', 'extensions', multiple=True,
              help='Extension to strip (repeatable, replaces the configured list)')
@click.pass_obj
def probname(config: Config, file_name: str, extensions: Tuple[str, ...]) -> None:
    """Print the problem name of FILE_NAME."""
    try:
        click.echo(extract_problem_name(file_name, list(extensions) or config.problem_extensions))
    except OptUtilsError as e:
        _fail(e)


@main.command()
@click.argument('path')
@click.option('--parents', '-p', is_flag=True, help='Create missing parent directories')
@click.pass_obj
def mkdir(config: Config, path: str, parents: bool) -> None:
    """Create the directory PATH."""
    try:
        PathValue(path).mkdir(recursive=parents, mode=config.directory_mode)
    except OptUtilsError as e:
        _fail(e)


if __name__ == '__main__':
    main()
