"""Fixed-size binary student records placed by roll number for direct access."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass
from pathlib import Path
from typing import Union

DEFAULT_PATH = "StudentDirect.txt"
NAME_SIZE = 20
DELETED = -1

_RECORD = struct.Struct(f"<i{NAME_SIZE}s")
RECORD_SIZE = _RECORD.size


class RecordNotFoundError(KeyError):
    """Raised when no live record is stored for a roll number."""


@dataclass(frozen=True)
class DirectRecord:
    """A student record: roll number and a name of at most 19 bytes."""

    roll_number: int
    name: str

    def __post_init__(self) -> None:
        if len(self.name.encode("utf-8")) >= NAME_SIZE:
            raise ValueError(f"name must encode to fewer than {NAME_SIZE} bytes")
        if "\0" in self.name:
            raise ValueError("name must not contain NUL characters")

    def pack(self) -> bytes:
        return _RECORD.pack(self.roll_number, self.name.encode("utf-8"))

    @classmethod
    def unpack(cls, data: bytes) -> "DirectRecord":
        roll_number, raw_name = _RECORD.unpack(data)
        name = raw_name.split(b"\0", 1)[0].decode("utf-8", errors="replace")
        return cls(roll_number, name)


class DirectAccessFile:
    """A binary file where record n lives at offset (n - 1) * RECORD_SIZE."""

    def __init__(self, path: Union[str, os.PathLike] = DEFAULT_PATH) -> None:
        self.path = Path(path)

    def position(self, roll_number: int) -> int:
        """Byte offset of the slot for this roll number."""
        if roll_number < 1:
            raise ValueError("roll number must be at least 1")
        return (roll_number - 1) * RECORD_SIZE

    def _read_slot(self, handle, roll_number: int) -> DirectRecord:
        handle.seek(self.position(roll_number))
        data = handle.read(RECORD_SIZE)
        if len(data) < RECORD_SIZE:
            raise RecordNotFoundError(roll_number)
        record = DirectRecord.unpack(data)
        if record.roll_number != roll_number or record.roll_number == DELETED:
            raise RecordNotFoundError(roll_number)
        return record

    def insert(self, record: DirectRecord) -> None:
        """Write the record into its slot, creating the file if needed."""
        offset = self.position(record.roll_number)
        self.path.touch(exist_ok=True)
        with self.path.open("r+b") as handle:
            handle.seek(offset)
            handle.write(record.pack())

    def read(self, roll_number: int) -> DirectRecord:
        """The record stored for this roll number; raise RecordNotFoundError if none."""
        with self.path.open("rb") as handle:
            return self._read_slot(handle, roll_number)

    def delete(self, roll_number: int) -> DirectRecord:
        """Mark the record as deleted and return it as it was."""
        with self.path.open("r+b") as handle:
            record = self._read_slot(handle, roll_number)
            handle.seek(self.position(roll_number))
            handle.write(DirectRecord(DELETED, record.name).pack())
        return record