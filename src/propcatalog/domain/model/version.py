"""Release version model.

A raw version string is parsed into one of three variants, tried in order:

1. :class:`SemanticVersion` for ``v?MAJOR.MINOR.PATCH(-PRERELEASE)?(+BUILD)?``
2. :class:`CalendarVersion` for ``YEAR.PRIMARY(.SECONDARY)?(-MODIFIER)?`` style
   strings (``.``, ``-`` and ``_`` are all accepted as separators)
3. :class:`UnknownVersion` for anything else

Parsing only fails for blank input. Versions order within their own variant;
comparing two different variants yields "equal" (``compare_to`` returns ``0``).
Use :meth:`Version.comparable_with` to detect that case.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import total_ordering
from typing import ClassVar, Final

_INT32_MAX: Final[int] = 2**31 - 1
_WHITESPACE = re.compile(r"\s+")
_NUMERIC = re.compile(r"\d+", re.ASCII)
_IDENTIFIERS = r"[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*"

_SEMANTIC = re.compile(
    r"v?(?P<major>\d+)\.(?P<minor>\d+)\.(?P<patch>\d+)"
    rf"(?:-(?P<pre_release>{_IDENTIFIERS}))?"
    rf"(?:\+(?P<build>{_IDENTIFIERS}))?",
    re.ASCII,
)
_CALENDAR = re.compile(
    r"(?P<year>\d{1,4})[._-](?P<primary>\d{1,4})"
    r"(?:[._-](?P<secondary>\d{1,4}))?"
    r"(?:[._-]?(?P<modifier>[0-9A-Za-z]+))?",
    re.ASCII,
)

NO_SECONDARY: Final[int] = -1


class InvalidVersionError(ValueError):
    """Raised when a version string is missing or blank."""


def _cmp(left: object, right: object) -> int:
    return (left > right) - (left < right)  # type: ignore[operator]


def _compare_identifier(left: str, right: str) -> int:
    if _NUMERIC.fullmatch(left) and _NUMERIC.fullmatch(right):
        return _cmp(int(left), int(right))
    return _cmp(left, right)


@total_ordering
@dataclass(frozen=True, slots=True)
class MetadataVersion:
    """Dot separated identifier list used for pre-release and build information.

    An empty list sorts after any non-empty one, so a release outranks all of
    its pre-releases. Non-empty lists compare identifier by identifier
    (numerically when both sides are integers) and a shorter list sorts first
    when all shared identifiers are equal.
    """

    identifiers: tuple[str, ...] = ()

    EMPTY: ClassVar[MetadataVersion]

    @classmethod
    def of(cls, *identifiers: str) -> MetadataVersion:
        if not identifiers:
            return cls.EMPTY
        return cls(tuple(identifiers))

    @classmethod
    def parse(cls, value: str | None) -> MetadataVersion:
        if not value:
            return cls.EMPTY
        return cls(tuple(value.split(".")))

    def __bool__(self) -> bool:
        return bool(self.identifiers)

    def __str__(self) -> str:
        return ".".join(self.identifiers)

    def __repr__(self) -> str:
        return f"MetadataVersion([{', '.join(self.identifiers)}])"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, MetadataVersion):
            return NotImplemented
        return self.compare_to(other) < 0

    def compare_to(self, other: MetadataVersion) -> int:
        if not self.identifiers or not other.identifiers:
            return _cmp(not self.identifiers, not other.identifiers)
        for left, right in zip(self.identifiers, other.identifiers, strict=False):
            result = _compare_identifier(left, right)
            if result:
                return result
        return _cmp(len(self.identifiers), len(other.identifiers))


MetadataVersion.EMPTY = MetadataVersion()


class Version(ABC):
    """Base class of the sealed version variants."""

    __slots__ = ()

    original: str

    @classmethod
    def parse(cls, raw: str | None) -> Version:
        return parse_version(raw)

    @abstractmethod
    def _compare_same_variant(self, other: Version) -> int: ...

    def comparable_with(self, other: Version) -> bool:
        """Return whether ``other`` is of the same variant and thus meaningfully ordered."""

        return type(self) is type(other)

    def compare_to(self, other: Version) -> int:
        if not self.comparable_with(other):
            return 0
        return self._compare_same_variant(other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __str__(self) -> str:
        return self.original

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.original})"


@dataclass(frozen=True, slots=True, repr=False)
class SemanticVersion(Version):
    major: int
    minor: int
    patch: int
    pre_release: MetadataVersion = MetadataVersion.EMPTY
    build: MetadataVersion = MetadataVersion.EMPTY
    original: str = ""

    def __post_init__(self) -> None:
        if not self.original:
            object.__setattr__(self, "original", self._format())

    def _format(self) -> str:
        value = f"{self.major}.{self.minor}.{self.patch}"
        if self.pre_release:
            value += f"-{self.pre_release}"
        if self.build:
            value += f"+{self.build}"
        return value

    def _compare_same_variant(self, other: Version) -> int:
        assert isinstance(other, SemanticVersion)
        return _cmp(
            (self.major, self.minor, self.patch),
            (other.major, other.minor, other.patch),
        ) or self.pre_release.compare_to(other.pre_release)


@dataclass(frozen=True, slots=True, repr=False)
class CalendarVersion(Version):
    year: int
    primary: int
    secondary: int = NO_SECONDARY
    modifier: str | None = None
    original: str = ""

    def __post_init__(self) -> None:
        if not self.original:
            object.__setattr__(self, "original", self._format())

    def _format(self) -> str:
        value = f"{self.year:04d}.{self.primary:02d}"
        if self.secondary != NO_SECONDARY:
            value += f".{self.secondary:02d}"
        if self.modifier:
            value += f"-{self.modifier}"
        return value

    def _compare_same_variant(self, other: Version) -> int:
        assert isinstance(other, CalendarVersion)
        result = _cmp(
            (self.year, self.primary, self.secondary),
            (other.year, other.primary, other.secondary),
        )
        if result:
            return result
        # a missing modifier marks the final release and sorts last
        if self.modifier is None or other.modifier is None:
            return _cmp(self.modifier is None, other.modifier is None)
        return _cmp(self.modifier, other.modifier)


@dataclass(frozen=True, slots=True, repr=False)
class UnknownVersion(Version):
    original: str

    def _compare_same_variant(self, other: Version) -> int:
        return _cmp(self.original, other.original)


def parse_version(raw: str | None) -> Version:
    """Parse ``raw`` into the first matching version variant."""

    if raw is None or not raw.strip():
        raise InvalidVersionError("Version must not be empty")

    original = _WHITESPACE.sub("", raw)
    semantic = _parse_semantic(original)
    if semantic is not None:
        return semantic
    calendar = _parse_calendar(original)
    if calendar is not None:
        return calendar
    return UnknownVersion(original)


def _parse_semantic(original: str) -> SemanticVersion | None:
    match = _SEMANTIC.fullmatch(original)
    if match is None:
        return None
    numbers = (int(match["major"]), int(match["minor"]), int(match["patch"]))
    if any(number > _INT32_MAX for number in numbers):
        return None
    major, minor, patch = numbers
    return SemanticVersion(
        major,
        minor,
        patch,
        pre_release=MetadataVersion.parse(match["pre_release"]),
        build=MetadataVersion.parse(match["build"]),
        original=original,
    )


def _parse_calendar(original: str) -> CalendarVersion | None:
    match = _CALENDAR.fullmatch(original)
    if match is None:
        return None
    year = _parse_year(match["year"])
    if year is None:
        return None
    secondary = match["secondary"]
    return CalendarVersion(
        year,
        int(match["primary"]),
        int(secondary) if secondary is not None else NO_SECONDARY,
        modifier=match["modifier"],
        original=original,
    )


def _parse_year(digits: str) -> int | None:
    # zero padded and three digit years are taken literally
    if digits.startswith("0") or len(digits) in (3, 4):
        return int(digits)
    if len(digits) == 2:
        return 2000 + int(digits)
    return None


__all__ = [
    "NO_SECONDARY",
    "CalendarVersion",
    "InvalidVersionError",
    "MetadataVersion",
    "SemanticVersion",
    "UnknownVersion",
    "Version",
    "parse_version",
]
