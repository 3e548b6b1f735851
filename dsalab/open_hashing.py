"""A dictionary of integer keys using separate chaining."""

from __future__ import annotations

from typing import Optional

DEFAULT_SIZE = 10


class ChainedDictionary:
    """A hash table whose buckets are chains of (key, value) pairs."""

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size < 1:
            raise ValueError("table size must be positive")
        self.size = size
        self._buckets: list[list[tuple[int, str]]] = [[] for _ in range(size)]

    def __len__(self) -> int:
        return sum(len(chain) for chain in self._buckets)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self.search(key) is not None

    def _chain(self, key: int) -> list[tuple[int, str]]:
        return self._buckets[key % self.size]

    def insert(self, key: int, value: str) -> None:
        """Add key, or replace its value if it is already present."""
        chain = self._chain(key)
        for position, (existing, _) in enumerate(chain):
            if existing == key:
                chain[position] = (key, value)
                return
        chain.append((key, value))

    def search(self, key: int) -> Optional[str]:
        """The value stored under key, or None if absent."""
        return next((value for existing, value in self._chain(key) if existing == key), None)

    def delete(self, key: int) -> str:
        """Remove key and return its value; raise KeyError if absent."""
        chain = self._chain(key)
        for position, (existing, value) in enumerate(chain):
            if existing == key:
                del chain[position]
                return value
        raise KeyError(key)

    def chains(self) -> list[list[tuple[int, str]]]:
        """A snapshot of every bucket's chain, in insertion order."""
        return [list(chain) for chain in self._buckets]

    def render(self) -> str:
        """One line per bucket listing its pairs, each line ending in NULL."""
        return "\n".join(
            "".join(f"[{key}:{value}]" for key, value in chain) + "NULL"
            for chain in self._buckets
        )