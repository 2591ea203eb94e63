"""Flat string record exchanged with the view and with files."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .list_key import StudentListKey

_INT_RE = re.compile(r"\s*([+-]?[0-9]+)")


def _stoi(text: str) -> int:
    """Read a leading integer, ignoring leading whitespace and trailing text."""
    match = _INT_RE.match(text)
    if match is None:
        raise ValueError(f"invalid integer: {text!r}")
    return int(match.group(1))


def attribute_names() -> list[str]:
    """Column titles in display and file order."""
    return [
        "학년", "반", "번호", "이름", "년도", "학기", "시험종류",
        "국어", "영어", "수학", "사회", "과학", "총점", "등수",
    ]


def attribute_sizes() -> list[int]:
    """Relative column widths matching attribute_names()."""
    return [1, 1, 1, 2, 1, 1, 2, 1, 1, 1, 1, 1, 1, 1]


@dataclass
class StudentScoreInfoRow:
    """One student's result for one exam, all fields as text."""

    grade: str = ""
    class_number: str = ""
    student_number: str = ""
    name: str = ""

    exam_id: str = ""
    year: str = ""
    semester: str = ""
    exam_type: str = ""
    exam_type_name: str = ""

    korean_score: str = ""
    english_score: str = ""
    math_score: str = ""
    social_score: str = ""
    science_score: str = ""
    total_score: str = ""

    rank: str = ""

    def to_list(self) -> list[str]:
        """Cells in the order of attribute_names()."""
        return [
            self.grade,
            self.class_number,
            self.student_number,
            self.name,
            self.year,
            self.semester,
            self.exam_type_name,
            self.korean_score,
            self.english_score,
            self.math_score,
            self.social_score,
            self.science_score,
            self.total_score,
            self.rank,
        ]

    def list_key(self) -> StudentListKey:
        """Parse grade, class and number into a key; raises ValueError if not numeric."""
        return StudentListKey(
            _stoi(self.grade),
            _stoi(self.class_number),
            _stoi(self.student_number),
        )