"""
Hashing helpers.

xxhash64 backs export cache keys and generated CSS class names; SHA-256 is
available where a digest must be reproducible outside Python tooling.
"""

from collections.abc import Callable
from enum import Enum
import hashlib

import xxhash


class Algorithm(str, Enum):
    """Supported hash algorithms."""

    XXHASH64 = "xxhash64"
    SHA256 = "sha256"


_DIGESTS: dict[Algorithm, Callable[[bytes], str]] = {
    Algorithm.XXHASH64: lambda data: xxhash.xxh64(data).hexdigest(),
    Algorithm.SHA256: lambda data: hashlib.sha256(data).hexdigest(),
}


def digest(data: bytes, algorithm: Algorithm = Algorithm.XXHASH64) -> str:
    """
    Hex digest of raw bytes.

    Raises:
        ValueError: If the algorithm is unknown
    """
    try:
        fn = _DIGESTS[Algorithm(algorithm)]
    except (KeyError, ValueError):
        raise ValueError(f"Unknown algorithm: {algorithm}") from None
    return fn(data)


def hash_string(text: str, algorithm: Algorithm = Algorithm.XXHASH64, truncate: int | None = None) -> str:
    """
    Hash a string to a hex digest.

    Args:
        text: String to hash
        algorithm: Hash algorithm (xxhash64 unless stated)
        truncate: Keep only this many leading hex chars (class names use 8)

    Examples:
        >>> len(hash_string("cmp_01HV..."))
        16
        >>> len(hash_string("cmp_01HV...", truncate=8))
        8
    """
    hexdigest = digest(text.encode("utf-8"), algorithm)
    return hexdigest[:truncate] if truncate else hexdigest


def hash_fields(*fields: str, algorithm: Algorithm = Algorithm.XXHASH64) -> str:
    """Digest of several fields; a NUL separator keeps field boundaries significant."""
    return hash_string("\x00".join(fields), algorithm)


__all__ = ["Algorithm", "digest", "hash_string", "hash_fields"]
