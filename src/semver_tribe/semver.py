# SPDX-License-Identifier: MIT
"""Version and version range values.

A :class:`Version` is three non-negative integers plus an optional
pre-release label ("special"). A :class:`VersionRange` has the same shape,
but one or more of its numeric components is the :data:`WILDCARD` marker,
so ``1.2.x`` stands for every ``1.2`` patch release.

Both types share one total order (see :func:`compare_versions`). A wildcard
component sorts above every integer, which places a range after all the
versions it can match.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Union

# Default format used by str() and tag naming
TAG_FORMAT = "v%M.%m.%p%s"

# Default format for VersionRange.non_wildcard_prefix
PREFIX_FORMAT = "%M.%m"

# Pre-release label: a letter followed by one or more letters, digits or dots
SPECIAL_PATTERN = re.compile(r"[A-Za-z][0-9A-Za-z.]+")

PARTS = ("major", "minor", "patch")


class Wildcard(Enum):
    """Marker for a range component that matches any value."""

    WILDCARD = "x"

    def __repr__(self) -> str:
        return "WILDCARD"

    def __str__(self) -> str:
        return self.value


WILDCARD = Wildcard.WILDCARD

# A numeric slot of a range: a concrete integer or the wildcard marker
Part = Union[int, Wildcard]


class SemverError(Exception):
    """Base class for all semver errors."""


class InvalidComponentError(SemverError, ValueError):
    """Raised when a version component or pre-release label is malformed."""

    def __init__(self, name: str, value: object, message: str = ""):
        self.name = name
        self.value = value
        self.message = message or f"Invalid {name}: {value!r}"
        super().__init__(self.message)


class InvalidRangeError(SemverError, ValueError):
    """Raised when a range is built without any wildcard component."""

    def __init__(self, parts: tuple, message: str = ""):
        self.parts = parts
        self.message = message or "Invalid version range: " + ".".join(str(p) for p in parts)
        super().__init__(self.message)


class InvalidFileError(SemverError):
    """Raised when a persisted version document cannot be loaded."""

    def __init__(self, path: object, message: str = ""):
        self.path = path
        self.message = message or f"Invalid semver file: {path}"
        super().__init__(self.message)


class NotVersionedError(SemverError):
    """Raised when no version file exists in a directory or its ancestors."""

    def __init__(self, path: object, message: str = ""):
        self.path = path
        self.message = message or f"{path} is not semantic versioned"
        super().__init__(self.message)


def _is_number(part: object) -> bool:
    return isinstance(part, int) and not isinstance(part, bool) and part >= 0


def _validate_special(special: object) -> None:
    if not isinstance(special, str):
        raise InvalidComponentError(
            "special", special, f"special must be a string, got {type(special).__name__}"
        )
    if special and SPECIAL_PATTERN.fullmatch(special) is None:
        raise InvalidComponentError("special", special)


def format_parts(fmt: str, major: Part, minor: Part, patch: Part, special: str) -> str:
    """Substitute version components into a format string.

    Args:
        fmt: Format string using the ``%M``, ``%m``, ``%p`` and ``%s``
            placeholders. Any other text is copied through unchanged.
        major: Major component (an integer or WILDCARD)
        minor: Minor component (an integer or WILDCARD)
        patch: Patch component (an integer or WILDCARD)
        special: Pre-release label, rendered as ``-label`` when non-empty

    Returns:
        The formatted string

    Examples:
        >>> format_parts("v%M.%m.%p%s", 1, 2, 3, "beta")
        'v1.2.3-beta'
        >>> format_parts("%M.%m", 4, WILDCARD, WILDCARD, "")
        '4.x'
    """
    fmt = fmt.replace("%M", str(major))
    fmt = fmt.replace("%m", str(minor))
    fmt = fmt.replace("%p", str(patch))
    return fmt.replace("%s", f"-{special}" if special else "")


def compare_parts(left: Part, right: Part) -> int:
    """Compare two numeric slots, ranking WILDCARD above every integer.

    Returns:
        -1 if left < right, 0 if equal, 1 if left > right
    """
    if left is WILDCARD and right is WILDCARD:
        return 0
    if left is WILDCARD:
        return 1
    if right is WILDCARD:
        return -1
    return (left > right) - (left < right)


def compare_versions(left: AnyVersion, right: AnyVersion) -> int:
    """Compare two versions or ranges.

    Components are compared most significant first with
    :func:`compare_parts`; ties are broken by plain string ordering of the
    pre-release label, so ``1.0.0`` sorts before ``1.0.0-beta``.

    Returns:
        -1 if left < right, 0 if equal, 1 if left > right

    Examples:
        >>> compare_versions(Version(1, 0, 0), Version(1, 0, 1))
        -1
        >>> compare_versions(VersionRange(1, 2, WILDCARD), Version(1, 2, 99))
        1
    """
    for attr in PARTS:
        result = compare_parts(getattr(left, attr), getattr(right, attr))
        if result != 0:
            return result
    return (left.special > right.special) - (left.special < right.special)


def version_key(version: AnyVersion) -> tuple:
    """Return a sort key that orders exactly like :func:`compare_versions`.

    Examples:
        >>> sorted([Version(2), VersionRange(1, WILDCARD, WILDCARD), Version(1, 9)], key=version_key)
        [Version(major=1, minor=9, patch=0, special=''), VersionRange(major=1, minor=WILDCARD, patch=WILDCARD, special=''), Version(major=2, minor=0, patch=0, special='')]
    """
    parts = tuple((1, 0) if part is WILDCARD else (0, part) for part in version.parts)
    return parts + (version.special,)


class _Ordered:
    """Rich comparisons shared by Version and VersionRange."""

    __slots__ = ()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, (Version, VersionRange)):
            return NotImplemented
        return compare_versions(self, other) < 0  # type: ignore[arg-type]

    def __le__(self, other: object) -> bool:
        if not isinstance(other, (Version, VersionRange)):
            return NotImplemented
        return compare_versions(self, other) <= 0  # type: ignore[arg-type]

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, (Version, VersionRange)):
            return NotImplemented
        return compare_versions(self, other) > 0  # type: ignore[arg-type]

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, (Version, VersionRange)):
            return NotImplemented
        return compare_versions(self, other) >= 0  # type: ignore[arg-type]


@dataclass(frozen=True, slots=True)
class Version(_Ordered):
    """A concrete semantic version.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch version number
        special: Pre-release label (e.g. "beta", "rc.1"), empty for releases

    Raises:
        InvalidComponentError: If a numeric component is not a non-negative
            integer, or ``special`` is non-empty and not a valid label
    """

    major: int = 0
    minor: int = 0
    patch: int = 0
    special: str = ""

    def __post_init__(self) -> None:
        for name in PARTS:
            value = getattr(self, name)
            if not _is_number(value):
                raise InvalidComponentError(
                    name, value, f"{name} must be a non-negative integer, got {value!r}"
                )
        _validate_special(self.special)

    def __str__(self) -> str:
        return self.format(TAG_FORMAT)

    @property
    def parts(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    @property
    def is_wildcard(self) -> bool:
        return False

    def format(self, fmt: str) -> str:
        """Render the version with a ``%M %m %p %s`` format string."""
        return format_parts(fmt, self.major, self.minor, self.patch, self.special)

    def non_wildcard_prefix(self, fmt: str = PREFIX_FORMAT) -> None:
        """A concrete version has no wildcard boundary, so this is always None."""
        return None

    def bump(self, part: str) -> Version:
        """Return the next release after incrementing one component.

        Less significant components reset to zero and the pre-release label
        is dropped.

        Args:
            part: One of "major", "minor" or "patch"

        Raises:
            ValueError: If ``part`` is not a component name
        """
        if part == "major":
            return Version(self.major + 1, 0, 0)
        if part == "minor":
            return Version(self.major, self.minor + 1, 0)
        if part == "patch":
            return Version(self.major, self.minor, self.patch + 1)
        raise ValueError(f"Unknown version part {part!r}, expected one of: {', '.join(PARTS)}")

    def with_special(self, special: str = "") -> Version:
        """Return a copy carrying a different pre-release label."""
        return replace(self, special=special)


@dataclass(frozen=True, slots=True)
class VersionRange(_Ordered):
    """A version with one or more wildcard components.

    ``VersionRange(1, 2, WILDCARD)`` matches every ``1.2`` patch release and
    ``VersionRange(1, WILDCARD, WILDCARD)`` every ``1.x`` release.

    The most significant wildcard defines the range's boundary for
    :meth:`upper_bound`, :meth:`lower_bound` and :meth:`non_wildcard_prefix`.
    Concrete components below it, as in ``1.x.5``, still take part in
    ordering and :meth:`contains`.

    Raises:
        InvalidComponentError: If a component is neither a non-negative
            integer nor WILDCARD, or ``special`` is not a valid label
        InvalidRangeError: If no component is WILDCARD
    """

    major: Part
    minor: Part
    patch: Part
    special: str = ""

    def __post_init__(self) -> None:
        for name in PARTS:
            value = getattr(self, name)
            if value is not WILDCARD and not _is_number(value):
                raise InvalidComponentError(
                    name, value, f"{name} must be a non-negative integer or WILDCARD, got {value!r}"
                )
        _validate_special(self.special)

        if WILDCARD not in self.parts:
            raise InvalidRangeError(
                self.parts,
                f"Invalid version range {self.format('%M.%m.%p')}: no wildcard component",
            )

    def __str__(self) -> str:
        return self.format(TAG_FORMAT)

    def __contains__(self, other: object) -> bool:
        return self.contains(other)  # type: ignore[arg-type]

    @property
    def parts(self) -> tuple[Part, Part, Part]:
        return (self.major, self.minor, self.patch)

    @property
    def is_wildcard(self) -> bool:
        return True

    @property
    def is_complete_wildcard(self) -> bool:
        """True if the range matches every version unconditionally."""
        return all(part is WILDCARD for part in self.parts) and not self.special

    def format(self, fmt: str) -> str:
        """Render the range, writing wildcard components as ``x``."""
        return format_parts(fmt, self.major, self.minor, self.patch, self.special)

    def upper_bound(self) -> Optional[Version]:
        """Return the smallest version above everything the range matches.

        Returns:
            ``major+1.0.0`` when minor is the first wildcard,
            ``major.minor+1.0`` when patch is, and None when major is a
            wildcard (the range is unbounded). The range's label is kept.

        Examples:
            >>> VersionRange(1, 2, WILDCARD).upper_bound()
            Version(major=1, minor=3, patch=0, special='')
        """
        if self.major is WILDCARD:
            return None
        if self.minor is WILDCARD:
            return Version(self.major + 1, 0, 0, self.special)
        return Version(self.major, self.minor + 1, 0, self.special)

    def lower_bound(self) -> Optional[Version]:
        """Return the smallest version the range matches, or None if major is a wildcard."""
        if self.major is WILDCARD:
            return None
        if self.minor is WILDCARD:
            return Version(self.major, 0, 0, self.special)
        return Version(self.major, self.minor, 0, self.special)

    def non_wildcard_prefix(self, fmt: str = PREFIX_FORMAT) -> Optional[str]:
        """Return the concrete leading part of the range.

        Examples:
            >>> VersionRange(1, 2, WILDCARD).non_wildcard_prefix()
            '1.2'
            >>> VersionRange(2, WILDCARD, WILDCARD).non_wildcard_prefix()
            '2'
            >>> VersionRange(WILDCARD, WILDCARD, WILDCARD).non_wildcard_prefix() is None
            True
        """
        if self.major is WILDCARD:
            return None
        if self.minor is WILDCARD:
            return str(self.major)
        return fmt.replace("%M", str(self.major)).replace("%m", str(self.minor))

    def contains(self, other: AnyVersion) -> bool:
        """Check whether a version (or a narrower range) falls inside this range.

        Every concrete component of the range must equal the matching
        component of ``other``; a wildcard in ``other`` never equals a
        concrete component. A non-empty label on the range must equal
        ``other.special``, while an empty one accepts any label.

        Examples:
            >>> VersionRange(1, 2, WILDCARD).contains(Version(1, 2, 5))
            True
            >>> Version(1, 3, 0) in VersionRange(1, 2, WILDCARD)
            False

        Raises:
            TypeError: If ``other`` is not a Version or VersionRange
        """
        if not isinstance(other, (Version, VersionRange)):
            raise TypeError(
                f"Expected Version or VersionRange, got {type(other).__name__}"
            )
        for mine, theirs in zip(self.parts, other.parts):
            if mine is not WILDCARD and mine != theirs:
                return False
        return not self.special or self.special == other.special


AnyVersion = Union[Version, VersionRange]
