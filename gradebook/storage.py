"""In-memory tables holding students, scores and exams."""

from __future__ import annotations

from dataclasses import dataclass, field

from .list_key import StudentListKey
from .models import ExamInfo, Student, StudentScore


@dataclass
class StudentStorage:
    """Students by key, with a secondary index from grade-class-number to key."""

    index: dict[StudentListKey, int] = field(default_factory=dict)
    table: dict[int, Student] = field(default_factory=dict)

    def students_in_index_order(self) -> list[tuple[int, Student]]:
        """Pairs of (student key, student) ordered by grade, class and number."""
        return [
            (student_key, self.table[student_key])
            for _, student_key in sorted(self.index.items())
        ]


@dataclass
class StudentScoreStorage:
    """Scores grouped by the key of the student they belong to."""

    table: dict[int, list[StudentScore]] = field(default_factory=dict)


@dataclass
class ExamInfoStorage:
    """Exams by id."""

    table: dict[int, ExamInfo] = field(default_factory=dict)