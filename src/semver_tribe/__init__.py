# SPDX-License-Identifier: MIT
"""Semantic version values, wildcard ranges and format-driven parsing.

Example:
    >>> from semver_tribe import Version, VersionRange, WILDCARD, parse_version
    >>>
    >>> version = parse_version("v1.2.3-beta")
    >>> version.format("%M.%m.%p%s")
    '1.2.3-beta'
    >>>
    >>> parse_version("release-4_7", "release-%M_%m")
    Version(major=4, minor=7, patch=0, special='')
    >>>
    >>> series = parse_version("v1.2.x")
    >>> series.upper_bound()
    Version(major=1, minor=3, patch=0, special='')
    >>> Version(1, 2, 9) in series
    True
"""

__version__ = "0.1.0"

from .semver import (
    PARTS,
    PREFIX_FORMAT,
    SPECIAL_PATTERN,
    TAG_FORMAT,
    WILDCARD,
    AnyVersion,
    InvalidComponentError,
    InvalidFileError,
    InvalidRangeError,
    NotVersionedError,
    Part,
    SemverError,
    Version,
    VersionRange,
    Wildcard,
    compare_parts,
    compare_versions,
    format_parts,
    version_key,
)
from .pattern import (
    PLACEHOLDERS,
    compile_pattern,
    parse_version,
)
from .storage import (
    FILE_NAME,
    VersionDocument,
    find_version,
    find_version_file,
    load_version,
    save_version,
)
from .config import (
    ConfigError,
    SemverConfig,
    find_pyproject,
    load_config,
)

__all__ = [
    # Values
    "Version",
    "VersionRange",
    "Wildcard",
    "WILDCARD",
    "Part",
    "AnyVersion",
    "PARTS",
    "TAG_FORMAT",
    "PREFIX_FORMAT",
    "SPECIAL_PATTERN",
    "format_parts",
    # Ordering
    "compare_parts",
    "compare_versions",
    "version_key",
    # Parsing
    "PLACEHOLDERS",
    "compile_pattern",
    "parse_version",
    # Storage
    "FILE_NAME",
    "VersionDocument",
    "find_version",
    "find_version_file",
    "load_version",
    "save_version",
    # Config
    "ConfigError",
    "SemverConfig",
    "find_pyproject",
    "load_config",
    # Errors
    "SemverError",
    "InvalidComponentError",
    "InvalidRangeError",
    "InvalidFileError",
    "NotVersionedError",
]
