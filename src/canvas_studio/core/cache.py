"""Bounded LRU cache for generated exports.

Generators are pure, so an export is fully determined by the target and
the serialized tree; entries never go stale and need no TTL.
"""

from typing import Generic, TypeVar, Any
from collections import OrderedDict
from dataclasses import dataclass

from .hash import hash_fields, Algorithm

T = TypeVar("T")


@dataclass
class Stats:
    """Cache statistics."""

    size: int = 0
    max_size: int = 0
    hits: int = 0
    misses: int = 0
    evictions: int = 0

    @property
    def hit_rate(self) -> float:
        """Calculate hit rate (0.0 to 1.0)."""
        total = self.hits + self.misses
        return self.hits / total if total > 0 else 0.0

    def to_dict(self) -> dict[str, Any]:
        """Export as dictionary."""
        return {
            "size": self.size,
            "max_size": self.max_size,
            "hits": self.hits,
            "misses": self.misses,
            "evictions": self.evictions,
            "hit_rate": self.hit_rate,
        }


class LRUCache(Generic[T]):
    """
    LRU cache keyed by a digest of one or more string fields.

    Examples:
        >>> cache = LRUCache[str](max_size=8)
        >>> cache.set(("html", tree_json), "<!DOCTYPE html>...")
        >>> cache.get(("html", tree_json))
        '<!DOCTYPE html>...'
    """

    def __init__(self, max_size: int = 32, hash_algorithm: Algorithm = Algorithm.XXHASH64):
        if max_size <= 0:
            raise ValueError("max_size must be positive")

        self.max_size = max_size
        self.hash_algorithm = hash_algorithm

        self._cache: OrderedDict[str, T] = OrderedDict()
        self._stats = Stats(max_size=max_size)

    def _compute_key(self, fields: tuple[str, ...]) -> str:
        return hash_fields(*fields, algorithm=self.hash_algorithm)

    def get(self, fields: tuple[str, ...]) -> T | None:
        """Return the cached value, refreshing its recency, or None."""
        key = self._compute_key(fields)

        if key in self._cache:
            self._cache.move_to_end(key)
            self._stats.hits += 1
            return self._cache[key]

        self._stats.misses += 1
        return None

    def set(self, fields: tuple[str, ...], value: T) -> None:
        """Store a value, evicting the least recently used entry when full."""
        key = self._compute_key(fields)

        if key in self._cache:
            del self._cache[key]
        self._cache[key] = value

        if len(self._cache) > self.max_size:
            self._cache.popitem(last=False)
            self._stats.evictions += 1

        self._stats.size = len(self._cache)

    def clear(self) -> None:
        """Clear entire cache."""
        self._cache.clear()
        self._stats.size = 0

    @property
    def stats(self) -> Stats:
        return self._stats

    def __len__(self) -> int:
        return len(self._cache)

    def __contains__(self, fields: tuple[str, ...]) -> bool:
        """Check membership without touching LRU order."""
        return self._compute_key(fields) in self._cache


__all__ = ["LRUCache", "Stats"]
