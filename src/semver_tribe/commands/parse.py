# SPDX-License-Identifier: MIT
"""Parse version strings given on the command line."""

from __future__ import annotations

from typing import Optional

import click

from ..config import ConfigError
from ..pattern import parse_version
from ..semver import VersionRange

from ..main import Context, echo_error, echo_info, pass_context


def _tag_format(ctx: Context) -> str:
    try:
        return ctx.load_config().tag_format
    except ConfigError as e:
        echo_error(str(e))
        raise SystemExit(1)


@click.command()
@click.argument("text")
@click.option(
    "--format",
    "-f",
    "fmt",
    help="Format to parse with (defaults to the configured tag format).",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Fail when the format leaves out major, minor or patch.",
)
@pass_context
def parse(ctx: Context, text: str, fmt: Optional[str], strict: bool) -> None:
    """Parse TEXT and print it in the configured tag format.

    \b
    Examples:
        semver parse v1.2.3
        semver parse "version:3-0-45" -f "version:%M-%m-%p"
        semver parse v1.x.x
    """
    tag_format = _tag_format(ctx)
    fmt = fmt or tag_format

    version = parse_version(text, fmt, allow_missing=not strict)
    if version is None:
        echo_error(f"Could not parse {text!r} with format {fmt!r}")
        raise SystemExit(1)

    echo_info(version.format(tag_format))


@click.command("next")
@click.argument("text")
@pass_context
def next_version(ctx: Context, text: str) -> None:
    """Print the first version above the range TEXT.

    \b
    Examples:
        semver next v1.2.x    # v1.3.0
        semver next v1.x.x    # v2.0.0
    """
    tag_format = _tag_format(ctx)

    version = parse_version(text, tag_format)
    if not isinstance(version, VersionRange):
        echo_error(f"{text!r} is not a version range")
        raise SystemExit(1)

    bound = version.upper_bound()
    if bound is None:
        echo_error(f"{text!r} has no upper bound")
        raise SystemExit(1)

    echo_info(bound.format(tag_format))
