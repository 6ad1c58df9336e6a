"""Content fingerprints for property definitions.

Every one of the eight fingerprinted fields is digested on its own, the eight
32 byte digests are concatenated in a fixed order and the resulting 256 byte
buffer is digested once more. Blank fields contribute a zero-filled digest.

Keep an eye on the field order and the canonicalization rules: changing either
makes previously stored fingerprints incomparable, so any such change must bump
``FINGERPRINT_FORMAT``.
"""

from __future__ import annotations

import hashlib
import re
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Sequence

    from propcatalog.domain.model import Deprecation, PropertyDefinition

FINGERPRINT_FORMAT: Final[int] = 1
DIGEST_ALGORITHM: Final[str] = "sha256"
DIGEST_SIZE: Final[int] = 32
EMPTY_DIGEST: Final[bytes] = bytes(DIGEST_SIZE)

_WHITESPACE = re.compile(r"\s+")


class FingerprintUnavailableError(RuntimeError):
    """Raised at import time when the digest algorithm is not supported."""


if DIGEST_ALGORITHM not in hashlib.algorithms_available:
    raise FingerprintUnavailableError(
        f"Could not create fingerprints as the {DIGEST_ALGORITHM} digest algorithm is not supported"
    )


def fingerprint(definition: PropertyDefinition) -> bytes:
    """Return the 32 byte content fingerprint of ``definition``."""

    digests = (
        _digest_text(definition.data_type.name),
        _digest_text(definition.type.name),
        _digest_text(definition.type_name),
        _digest_text(definition.name),
        _digest_text(definition.description),
        _digest_text(definition.default_value),
        _digest_hints(definition.hints),
        _digest_deprecation(definition.deprecation),
    )
    return _sha256(b"".join(digests))


def _sha256(data: bytes) -> bytes:
    return hashlib.new(DIGEST_ALGORITHM, data).digest()


def _digest_text(value: str | None) -> bytes:
    if value is None or not value.strip():
        return EMPTY_DIGEST
    return _sha256(_WHITESPACE.sub("", value).encode("utf-8"))


def _digest_hints(hints: Sequence[str]) -> bytes:
    if not hints:
        return EMPTY_DIGEST
    return _sha256("".join(sorted(hints)).encode("utf-8"))


def _digest_deprecation(deprecation: Deprecation | None) -> bytes:
    if deprecation is None or deprecation.is_empty:
        return EMPTY_DIGEST
    parts = [
        part
        for part in (deprecation.reason, deprecation.replacement)
        if part is not None and part.strip()
    ]
    return _digest_text("".join(parts))


__all__ = [
    "DIGEST_SIZE",
    "EMPTY_DIGEST",
    "FINGERPRINT_FORMAT",
    "FingerprintUnavailableError",
    "fingerprint",
]
