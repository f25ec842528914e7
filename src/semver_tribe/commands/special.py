# SPDX-License-Identifier: MIT
"""Set or clear the pre-release label."""

from __future__ import annotations

import click

from ..config import ConfigError
from ..semver import SemverError
from ..storage import save_version

from ..main import Context, echo_error, echo_info, pass_context


@click.command()
@click.argument("label", default="")
@pass_context
def special(ctx: Context, label: str) -> None:
    """Set the pre-release label, or clear it when LABEL is omitted.

    LABEL must start with a letter followed by letters, digits or dots,
    for example "beta" or "rc.1".
    """
    try:
        path, version = ctx.find_version()
        version = version.with_special(label)
    except (SemverError, ConfigError) as e:
        echo_error(str(e))
        raise SystemExit(1)

    save_version(version, path)
    echo_info(version.format(ctx.load_config().tag_format))
