# SPDX-License-Identifier: MIT
"""Print the project version."""

from __future__ import annotations

import click

from ..config import ConfigError
from ..semver import SemverError

from ..main import Context, echo_error, echo_info, pass_context


@click.command("format")
@click.argument("fmt")
@pass_context
def format_version(ctx: Context, fmt: str) -> None:
    """Print the version rendered with FMT.

    \b
    Placeholders:
        %M  major
        %m  minor
        %p  patch
        %s  "-special", or nothing when there is no pre-release label
    """
    try:
        _, version = ctx.find_version()
    except (SemverError, ConfigError) as e:
        echo_error(str(e))
        raise SystemExit(1)

    echo_info(version.format(fmt))


@click.command()
@pass_context
def tag(ctx: Context) -> None:
    """Print the version rendered with the configured tag format."""
    try:
        _, version = ctx.find_version()
    except (SemverError, ConfigError) as e:
        echo_error(str(e))
        raise SystemExit(1)

    echo_info(version.format(ctx.load_config().tag_format))
