# SPDX-License-Identifier: MIT
"""Increment the project version."""

from __future__ import annotations

import click

from ..config import ConfigError
from ..semver import PARTS, SemverError
from ..storage import save_version

from ..main import Context, echo_error, echo_info, pass_context


@click.command()
@click.argument("part", type=click.Choice(PARTS))
@pass_context
def inc(ctx: Context, part: str) -> None:
    """Increment the major, minor or patch version.

    Less significant components reset to zero and the pre-release label
    is cleared.

    \b
    Examples:
        semver inc patch     # v1.2.3 -> v1.2.4
        semver inc minor     # v1.2.3 -> v1.3.0
        semver inc major     # v1.2.3-rc.1 -> v2.0.0
    """
    try:
        path, version = ctx.find_version()
    except (SemverError, ConfigError) as e:
        echo_error(str(e))
        raise SystemExit(1)

    version = version.bump(part)
    save_version(version, path)
    echo_info(version.format(ctx.load_config().tag_format))
