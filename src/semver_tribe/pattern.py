# SPDX-License-Identifier: MIT
"""Format-string driven version parsing.

A format string such as ``v%M.%m.%p%s`` is compiled into a regular
expression with one named group per placeholder:

- ``%M``, ``%m``, ``%p``: decimal digits, or ``x``/``X`` for a wildcard
- ``%s``: optional ``-label`` suffix; only ``label`` is captured

Every other character of the format is matched literally, so separators
like ``:``, ``$`` or ``^`` need no special handling.
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import Optional

from .semver import (
    PARTS,
    TAG_FORMAT,
    WILDCARD,
    AnyVersion,
    Part,
    Version,
    VersionRange,
)

logger = logging.getLogger(__name__)

PLACEHOLDERS = {
    "%M": "major",
    "%m": "minor",
    "%p": "patch",
    "%s": "special",
}

_PLACEHOLDER_SPLIT = re.compile(r"(%[Mmps])")
_PART_REGEX = r"(?P<{name}>[0-9]+|[xX])"
_SPECIAL_REGEX = r"(?:-(?P<special>[A-Za-z][0-9A-Za-z.]+))?"
_REPEATED_SPECIAL_REGEX = r"(?:-(?P=special))?"


@lru_cache(maxsize=128)
def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a version format string into a regular expression.

    A placeholder that appears more than once must capture the same text
    each time; later occurrences become back-references to the first.

    Args:
        pattern: Format string using ``%M``, ``%m``, ``%p`` and ``%s``

    Returns:
        Compiled pattern with ``major``, ``minor``, ``patch`` and
        ``special`` groups for the placeholders present

    Examples:
        >>> compile_pattern("v%M.%m").pattern
        'v(?P<major>[0-9]+|[xX])\\\\.(?P<minor>[0-9]+|[xX])'
    """
    chunks = []
    seen: set[str] = set()

    for token in _PLACEHOLDER_SPLIT.split(pattern):
        name = PLACEHOLDERS.get(token)
        if name is None:
            chunks.append(re.escape(token))
        elif name in seen:
            chunks.append(_REPEATED_SPECIAL_REGEX if name == "special" else f"(?P={name})")
        else:
            seen.add(name)
            chunks.append(_SPECIAL_REGEX if name == "special" else _PART_REGEX.format(name=name))

    return re.compile("".join(chunks))


def _extract_part(groups: dict[str, Optional[str]], name: str) -> Optional[Part]:
    if name not in groups or groups[name] is None:
        return None
    value = groups[name]
    if value in ("x", "X"):
        return WILDCARD
    return int(value)


def parse_version(
    version_string: str,
    pattern: Optional[str] = None,
    allow_missing: bool = True,
) -> Optional[AnyVersion]:
    """Parse a version or version range out of a string.

    The compiled pattern is searched for anywhere in ``version_string``, so
    ``"release v1.2.3 (final)"`` parses with the default format.

    Args:
        version_string: Text to parse
        pattern: Format string (defaults to ``v%M.%m.%p%s``)
        allow_missing: When True, components whose placeholder is absent
            from ``pattern`` default to 0. When False, such a pattern
            cannot produce a result.

    Returns:
        A VersionRange if any component is a wildcard, otherwise a Version.
        None if the string does not match, or if a component is missing
        and ``allow_missing`` is False.

    Examples:
        >>> parse_version("v1.2.3")
        Version(major=1, minor=2, patch=3, special='')
        >>> parse_version("v1.x.x-beta")
        VersionRange(major=1, minor=WILDCARD, patch=WILDCARD, special='beta')
        >>> parse_version("v1.2", "v%m.%p")
        Version(major=0, minor=1, patch=2, special='')
        >>> parse_version("v1.2", "v%m.%p", allow_missing=False) is None
        True
    """
    pattern = pattern or TAG_FORMAT
    match = compile_pattern(pattern).search(version_string)
    if match is None:
        logger.debug("%r does not match format %r", version_string, pattern)
        return None

    groups = match.groupdict()
    major, minor, patch = (_extract_part(groups, name) for name in PARTS)

    if not allow_missing and None in (major, minor, patch):
        missing = [name for name, part in zip(PARTS, (major, minor, patch)) if part is None]
        logger.debug(
            "Format %r has no placeholder for %s of %r",
            pattern,
            ", ".join(missing),
            version_string,
        )
        return None

    major = 0 if major is None else major
    minor = 0 if minor is None else minor
    patch = 0 if patch is None else patch
    special = groups.get("special") or ""

    if WILDCARD in (major, minor, patch):
        return VersionRange(major, minor, patch, special)
    return Version(major, minor, patch, special)  # type: ignore[arg-type]
