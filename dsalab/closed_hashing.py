"""A fixed-size phone directory using linear probing, with or without replacement."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

DEFAULT_SIZE = 10


class TableFullError(Exception):
    """Raised when no free slot is left for a new entry."""


@dataclass(frozen=True)
class Client:
    """A directory entry."""

    phone: int
    name: str


class ClosedHashTable:
    """An open-addressing hash table keyed by phone number."""

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size < 1:
            raise ValueError("table size must be positive")
        self.size = size
        self._table: list[Optional[Client]] = [None] * size

    def __len__(self) -> int:
        return sum(1 for slot in self._table if slot is not None)

    def _home(self, phone: int) -> int:
        return phone % self.size

    def _probe_free(self, start: int) -> int:
        """First free slot after start, wrapping around; raise if none."""
        index = (start + 1) % self.size
        while self._table[index] is not None:
            index = (index + 1) % self.size
            if index == start:
                raise TableFullError("hash table is full")
        return index

    def insert_without_replacement(self, phone: int, name: str) -> int:
        """Store the entry at its home slot or the next free one; return the slot used."""
        index = self._home(phone)
        if self._table[index] is not None:
            index = self._probe_free(index)
        self._table[index] = Client(phone, name)
        return index

    def insert_with_replacement(self, phone: int, name: str) -> int:
        """Store the entry, evicting an occupant that is not in its own home slot.

        The evicted entry is inserted again the same way. Returns the slot used
        for the new entry.
        """
        index = self._home(phone)
        occupant = self._table[index]
        if occupant is None:
            self._table[index] = Client(phone, name)
            return index
        if self._home(occupant.phone) != index:
            self._table[index] = Client(phone, name)
            self.insert_with_replacement(occupant.phone, occupant.name)
            return index
        free = self._probe_free(index)
        self._table[free] = Client(phone, name)
        return free

    def search(self, phone: int) -> Optional[int]:
        """Return the number of comparisons needed to find phone, or None if absent."""
        index = self._home(phone)
        original = index
        comparisons = 0
        while (entry := self._table[index]) is not None:
            comparisons += 1
            if entry.phone == phone:
                return comparisons
            index = (index + 1) % self.size
            if index == original:
                return None
        return None

    def slots(self) -> list[Optional[Client]]:
        """A snapshot of every slot, None where empty."""
        return list(self._table)

    def render(self) -> str:
        """A tab-separated listing of the table, one slot per line."""
        lines = ["Index\tPhone Number\tName\tPresent"]
        for index, entry in enumerate(self._table):
            if entry is None:
                lines.append(f"{index}\t--\t--\tFalse")
            else:
                lines.append(f"{index}\t{entry.phone}\t{entry.name}\tTrue")
        return "\n".join(lines)