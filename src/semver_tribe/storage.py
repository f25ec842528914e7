# SPDX-License-Identifier: MIT
"""Reading, writing and locating ``.semver`` version files.

A version file is a YAML mapping with four keys::

    ---
    :major: 1
    :minor: 10
    :patch: 33
    :special: ''

The leading colons match files written by the Ruby ``semver`` tools; keys
without them are accepted as well.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from .semver import (
    InvalidComponentError,
    InvalidFileError,
    NotVersionedError,
    Version,
)

logger = logging.getLogger(__name__)

FILE_NAME = ".semver"

DOCUMENT_KEYS = ("major", "minor", "patch", "special")


class VersionDocument(BaseModel):
    """Schema of a persisted version file.

    Types are strict: ``major: "1"`` or ``special: 5`` are rejected rather
    than coerced. Keys other than the four fields are ignored.
    """

    model_config = ConfigDict(strict=True, extra="ignore", frozen=True)

    major: int
    minor: int
    patch: int
    special: str

    @classmethod
    def from_mapping(cls, data: dict[Any, Any]) -> "VersionDocument":
        """Validate a loaded YAML mapping, accepting ``:key`` and ``key`` spellings."""
        normalized = {}
        for key, value in data.items():
            name = str(key)
            if name.startswith(":"):
                name = name[1:]
            normalized[name] = value
        return cls.model_validate(normalized)

    @classmethod
    def from_version(cls, version: Version) -> "VersionDocument":
        return cls(
            major=version.major,
            minor=version.minor,
            patch=version.patch,
            special=version.special,
        )

    def to_version(self) -> Version:
        return Version(self.major, self.minor, self.patch, self.special)

    def to_yaml_mapping(self) -> dict[str, Any]:
        """Return the mapping written to disk, keyed in the Ruby symbol style."""
        return {f":{key}": getattr(self, key) for key in DOCUMENT_KEYS}


def _describe_validation_error(error: ValidationError) -> str:
    messages = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"])
        if item["type"] == "missing":
            messages.append(f"missing key '{location}'")
        else:
            messages.append(f"{location}: {item['msg']}")
    return "; ".join(messages)


def load_version(path: Union[str, Path]) -> Version:
    """Load a version from a version file.

    Args:
        path: Path to the version file

    Returns:
        The stored Version

    Raises:
        InvalidFileError: If the file cannot be read, is not a YAML mapping,
            lacks one of the four keys, or holds invalid values
    """
    path = Path(path)
    logger.debug("Loading version from %s", path)

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise InvalidFileError(path, f"Cannot read semver file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise InvalidFileError(path, f"Invalid YAML in semver file {path}: {e}") from e

    if not isinstance(data, dict):
        raise InvalidFileError(path, f"Invalid semver file {path}: expected a mapping")

    try:
        return VersionDocument.from_mapping(data).to_version()
    except ValidationError as e:
        raise InvalidFileError(
            path, f"Invalid semver file {path}: {_describe_validation_error(e)}"
        ) from e
    except InvalidComponentError as e:
        raise InvalidFileError(path, f"Invalid semver file {path}: {e}") from e


def save_version(version: Version, path: Union[str, Path]) -> None:
    """Write a version to a version file, replacing any existing content.

    Raises:
        TypeError: If ``version`` is a range rather than a concrete Version
    """
    if not isinstance(version, Version):
        raise TypeError(f"Only a Version can be saved, got {type(version).__name__}")

    path = Path(path)
    document = VersionDocument.from_version(version)
    logger.debug("Saving %s to %s", version, path)

    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(
            document.to_yaml_mapping(),
            f,
            explicit_start=True,
            default_flow_style=False,
            sort_keys=False,
        )


def find_version_file(
    start_dir: Optional[Union[str, Path]] = None,
    file_name: str = FILE_NAME,
) -> Path:
    """Find the version file in a directory or its nearest ancestor.

    Args:
        start_dir: Directory to start searching from (defaults to cwd)
        file_name: Name of the version file

    Returns:
        Path to the version file

    Raises:
        NotVersionedError: If ``start_dir`` is not a directory, or no
            version file exists up to the filesystem root
    """
    start = Path(start_dir) if start_dir is not None else Path.cwd()
    if not start.is_dir():
        raise NotVersionedError(start, f"{start} is not a directory")

    current = start.resolve()
    while True:
        candidate = current / file_name
        logger.debug("Looking for version file at %s", candidate)
        if candidate.is_file():
            return candidate
        if current == current.parent:
            raise NotVersionedError(start)
        current = current.parent


def find_version(
    start_dir: Optional[Union[str, Path]] = None,
    file_name: str = FILE_NAME,
) -> Version:
    """Locate the nearest version file and load it."""
    return load_version(find_version_file(start_dir, file_name))
