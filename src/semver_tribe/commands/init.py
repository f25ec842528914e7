# SPDX-License-Identifier: MIT
"""Create a new version file."""

from __future__ import annotations

import click

from ..config import ConfigError
from ..semver import Version
from ..storage import save_version

from ..main import Context, echo_error, echo_success, pass_context


@click.command()
@click.option(
    "--force",
    is_flag=True,
    help="Overwrite an existing version file.",
)
@pass_context
def init(ctx: Context, force: bool) -> None:
    """Write version 0.0.0 to a new version file in the working directory."""
    try:
        config = ctx.load_config()
    except ConfigError as e:
        echo_error(str(e))
        raise SystemExit(1)

    path = ctx.working_dir / config.file_name
    if path.exists() and not force:
        echo_error(f"{path} already exists. Use --force to overwrite.")
        raise SystemExit(1)

    version = Version()
    save_version(version, path)
    echo_success(f"Initialized {path} at {version.format(config.tag_format)}")
