from __future__ import annotations

from typing import Dict, Generic, Hashable, Optional, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class Cache(Generic[K, V]):
    """Memoizes solved sub-problems.

    Values are only ever inserted if absent, so every key maps to the
    value which was computed first, even if computations overlap.
    """

    __slots__ = ("_store", "hits", "misses")

    def __init__(self) -> None:
        self._store: Dict[K, V] = {}
        self.hits = 0
        self.misses = 0

    def get(self, key: K) -> Optional[V]:
        try:
            value = self._store[key]
        except KeyError:
            self.misses += 1
            return None
        self.hits += 1
        return value

    def setdefault(self, key: K, value: V) -> V:
        # dict.setdefault is atomic with respect to other threads
        return self._store.setdefault(key, value)

    def clear(self) -> None:
        self._store.clear()
        self.hits = self.misses = 0

    def __contains__(self, key: object) -> bool:
        return key in self._store

    def __len__(self) -> int:
        return len(self._store)

    def __repr__(self) -> str:
        return (
            f"Cache(size={len(self)}, hits={self.hits}, misses={self.misses})"
        )
