# SPDX-License-Identifier: MIT
"""Project configuration loaded from the ``[tool.semver]`` table of pyproject.toml.

Example::

    [tool.semver]
    format = "release-%M.%m.%p%s"
    file = ".semver"
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .semver import TAG_FORMAT
from .storage import FILE_NAME


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass
class SemverConfig:
    """Settings for locating and rendering a project's version.

    Attributes:
        project_dir: Directory containing pyproject.toml, or None when the
            defaults are used because no pyproject.toml was found
        tag_format: Format string used for tags and command output
        file_name: Name of the version file
    """

    project_dir: Optional[Path] = None
    tag_format: str = TAG_FORMAT
    file_name: str = FILE_NAME

    @classmethod
    def from_pyproject(cls, pyproject_path: str | Path) -> "SemverConfig":
        """Load configuration from a pyproject.toml file.

        Args:
            pyproject_path: Path to pyproject.toml

        Returns:
            SemverConfig instance, with defaults for any unset key

        Raises:
            ConfigError: If the file is not valid TOML or a setting has the
                wrong type
            FileNotFoundError: If pyproject.toml doesn't exist
        """
        pyproject_path = Path(pyproject_path)

        try:
            with open(pyproject_path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML in {pyproject_path}: {e}") from e

        tool = pyproject.get("tool", {})
        settings: Any = tool.get("semver", {}) if isinstance(tool, dict) else {}
        if not isinstance(settings, dict):
            raise ConfigError(f"[tool.semver] in {pyproject_path} must be a table")

        return cls(
            project_dir=pyproject_path.parent,
            tag_format=_get_string(settings, "format", TAG_FORMAT, pyproject_path),
            file_name=_get_string(settings, "file", FILE_NAME, pyproject_path),
        )


def _get_string(settings: dict[str, Any], key: str, default: str, source: Path) -> str:
    value = settings.get(key, default)
    if not isinstance(value, str) or not value:
        raise ConfigError(f"tool.semver.{key} in {source} must be a non-empty string")
    return value


def find_pyproject(start_dir: Optional[str | Path] = None) -> Optional[Path]:
    """Find the nearest pyproject.toml in a directory or its ancestors.

    Args:
        start_dir: Directory to start searching from (defaults to cwd)

    Returns:
        Path to pyproject.toml, or None if there is none up to the root
    """
    current = Path(start_dir) if start_dir else Path.cwd()
    current = current.resolve()

    while True:
        candidate = current / "pyproject.toml"
        if candidate.is_file():
            return candidate
        if current == current.parent:
            return None
        current = current.parent


def load_config(start_dir: Optional[str | Path] = None) -> SemverConfig:
    """Load configuration for the project containing ``start_dir``.

    Falls back to the defaults when no pyproject.toml is found.
    """
    pyproject_path = find_pyproject(start_dir)
    if pyproject_path is None:
        return SemverConfig()
    return SemverConfig.from_pyproject(pyproject_path)
