"""Key identifying a student by grade, class and number."""

from __future__ import annotations

import re
from dataclasses import dataclass

_KEY_RE = re.compile(
    r"\s*([+-]?[0-9]+)(?:-\s*([+-]?[0-9]+)(?:-\s*([+-]?[0-9]+))?)?"
)


@dataclass(frozen=True, order=True)
class StudentListKey:
    """Grade, class and student number; orders by those fields in turn."""

    grade: int = 0
    class_number: int = 0
    student_number: int = 0

    def __str__(self) -> str:
        return f"{self.grade}-{self.class_number}-{self.student_number}"

    @classmethod
    def from_string(cls, text: str) -> StudentListKey:
        """Parse "grade-class-number"; parts that cannot be read stay zero."""
        match = _KEY_RE.match(text)
        if match is None:
            return cls()
        parts = [int(part) if part is not None else 0 for part in match.groups()]
        return cls(*parts)