# SPDX-License-Identifier: MIT
"""CLI entry point for the semver command."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from .config import ConfigError, SemverConfig, load_config
from .semver import SemverError, Version
from .storage import find_version_file, load_version


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[SemverConfig] = None
        self.verbose: bool = False
        self.directory: Optional[Path] = None

    @property
    def working_dir(self) -> Path:
        return self.directory if self.directory is not None else Path.cwd()

    def load_config(self) -> SemverConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config(self.working_dir)
        return self.config

    def find_version(self) -> tuple[Path, Version]:
        """Locate and load the version file for the working directory."""
        path = find_version_file(self.working_dir, self.load_config().file_name)
        return path, load_version(path)


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


@click.group()
@click.version_option(package_name="semver-tribe")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Run as if started in this directory.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Semantic version file management.

    Keeps a project's version in a .semver file and renders it with
    %M (major), %m (minor), %p (patch) and %s (-special) formats.

    \b
    Examples:
        semver init
        semver inc minor
        semver special rc.1
        semver format "%M.%m"
        semver tag
        semver parse "release 1.4.x" -f "%M.%m.%p"
    """
    ctx.verbose = verbose
    ctx.directory = directory
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


# Import and register commands
from .commands import init, inc, special, show, parse

cli.add_command(init.init)
cli.add_command(inc.inc)
cli.add_command(special.special)
cli.add_command(show.format_version)
cli.add_command(show.tag)
cli.add_command(parse.parse)
cli.add_command(parse.next_version)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except (SemverError, ConfigError) as e:
        echo_error(str(e))
        sys.exit(1)
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
