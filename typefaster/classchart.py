"""A teacher's class of students and their per-layout results."""

from __future__ import annotations

import contextlib
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

BAR_WIDTH = 300
"""Pixel width of a full result bar."""

Colour = tuple[int, int, int]


@dataclass
class StudentStats:
    """One student's results on a layout, each measure between 0 and 1."""

    name: str
    no_data: bool = True
    tried: float = 0.0
    accuracy: float = 0.0
    speed: float = 0.0
    tried_colour: Colour = (0, 0, 0)
    accuracy_colour: Colour = (0, 0, 0)
    speed_colour: Colour = (0, 0, 0)

    @property
    def bar_widths(self) -> tuple[int, int, int]:
        """Pixel widths of the attempted, accuracy and speed bars."""
        return (
            int(self.tried * BAR_WIDTH),
            int(self.accuracy * BAR_WIDTH),
            int(self.speed * BAR_WIDTH),
        )


class ClassRoster:
    """The students a teacher follows, stored in the teacher's user directory."""

    def __init__(
        self,
        teacher: str,
        students: Iterable[StudentStats] = (),
        users_dir: str | Path = "users",
        heading: str = "",
    ) -> None:
        self.teacher = teacher
        self.students = list(students)
        self.users_dir = Path(users_dir)
        self.heading = heading

    @property
    def students_file(self) -> Path:
        return self.users_dir / self.teacher / "students.txt"

    def remove_student(self, name: str) -> bool:
        """Drop the first student called ``name`` and rewrite the class list.

        Returns whether a student was removed.  A class list that cannot
        be written is left as it was.
        """
        found = next((s for s in self.students if s.name == name), None)
        if found is not None:
            self.students.remove(found)
        with contextlib.suppress(OSError):
            self.save()
        return found is not None

    def save(self) -> None:
        """Write the students' names, one per line."""
        with self.students_file.open("w", encoding="utf-8") as handle:
            handle.writelines(f"{student.name}\n" for student in self.students)

    def clear(self) -> None:
        """Forget every loaded student."""
        self.students.clear()