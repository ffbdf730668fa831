"""Digest Indexer — SHA-1 digests and nibble reads."""

from __future__ import annotations

import hashlib
import math
import re

DIGEST_LENGTH = 40

_DIGEST_RE = re.compile(r"^[0-9a-f]{40}$")
_HEX_CHUNK_RE = re.compile(r"^[0-9a-fA-F]+$")


class InvalidDigestError(ValueError):
    """Raised for an explicit digest override that is not 40 hex characters."""


def sha1_digest(text: str) -> str:
    """Lowercase hex SHA-1 of the UTF-8 encoded text."""
    return hashlib.sha1(text.encode("utf-8")).hexdigest()


def validate_digest(digest: str) -> str:
    """Normalize an explicit digest to lowercase; reject anything else."""
    normalized = digest.strip().lower() if isinstance(digest, str) else ""
    if not _DIGEST_RE.match(normalized):
        raise InvalidDigestError(
            f"Invalid hash {digest!r}: expected {DIGEST_LENGTH} hexadecimal characters"
        )
    return normalized


def hex_value(digest: str, index: int, length: int = 1) -> int | float:
    """Parse ``digest[index:index+length]`` as base 16.

    Returns ``nan`` instead of raising when the slice is empty or not hex.
    """
    chunk = digest[index:index + length]
    if not _HEX_CHUNK_RE.match(chunk):
        return math.nan
    return int(chunk, 16)
