"""Student records kept in a line-oriented text file, four lines per student."""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

DEFAULT_PATH = "Students.txt"


@dataclass(frozen=True)
class Student:
    """One student's record."""

    roll_number: int
    name: str
    division: str
    address: str

    def __post_init__(self) -> None:
        for field_name in ("name", "division", "address"):
            text = getattr(self, field_name)
            if "\n" in text or "\r" in text:
                raise ValueError(f"{field_name} must fit on one line")

    def lines(self) -> list[str]:
        """The four lines this record occupies in the file."""
        return [str(self.roll_number), self.name, self.division, self.address]


def _parse(lines: Iterable[str]) -> Iterator[Student]:
    """Read records until the input ends or a roll number cannot be read."""
    stream = iter(lines)
    for first in stream:
        try:
            roll_number = int(first.strip())
        except ValueError:
            return
        name, division, address = (next(stream, "") for _ in range(3))
        yield Student(roll_number, name, division, address)


class StudentFile:
    """A sequential file of student records."""

    def __init__(self, path: Union[str, os.PathLike] = DEFAULT_PATH) -> None:
        self.path = Path(path)

    def _read_lines(self) -> list[str]:
        with self.path.open("r", encoding="utf-8") as handle:
            return [line.rstrip("\n") for line in handle]

    def add(self, student: Student) -> None:
        """Append a record, creating the file if needed."""
        with self.path.open("a", encoding="utf-8") as handle:
            handle.writelines(f"{line}\n" for line in student.lines())

    def records(self) -> list[Student]:
        """Every record in file order; raise FileNotFoundError if the file is missing."""
        return list(_parse(self._read_lines()))

    def find(self, roll_number: int) -> Optional[Student]:
        """The first record with this roll number, or None."""
        return next(
            (student for student in self.records() if student.roll_number == roll_number),
            None,
        )

    def delete(self, roll_number: int) -> list[Student]:
        """Remove every record with this roll number and return them.

        Raises KeyError if no record matches.
        """
        kept: list[Student] = []
        removed: list[Student] = []
        for student in self.records():
            (removed if student.roll_number == roll_number else kept).append(student)
        if not removed:
            raise KeyError(roll_number)

        directory = self.path.parent if str(self.path.parent) else Path(".")
        fd, temp_name = tempfile.mkstemp(dir=directory, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                for student in kept:
                    handle.writelines(f"{line}\n" for line in student.lines())
            os.replace(temp_name, self.path)
        except BaseException:
            Path(temp_name).unlink(missing_ok=True)
            raise
        return removed