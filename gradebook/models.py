"""Domain objects: students, exams, scores and their combination."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import ClassVar

from .exam_type import ExamType
from .list_key import StudentListKey
from .row import StudentScoreInfoRow, _stoi


class ManagementError(Exception):
    """Raised when a gradebook operation cannot be carried out."""


@dataclass
class Student:
    """A student; ``key`` is -1 until one is assigned."""

    name: str = ""
    grade: int = 0
    class_number: int = 0
    student_number: int = 0
    key: int = -1

    _last_key: ClassVar[int] = 0

    @classmethod
    def from_row(cls, row: StudentScoreInfoRow) -> Student:
        return cls(
            name=row.name,
            grade=_stoi(row.grade),
            class_number=_stoi(row.class_number),
            student_number=_stoi(row.student_number),
        )

    def assign_key(self) -> None:
        """Give this student the next key from the shared sequence."""
        Student._last_key += 1
        self.key = Student._last_key

    def update_from(self, other: Student) -> None:
        """Copy name, grade, class and number from another student; keep the key."""
        self.name = other.name
        self.grade = other.grade
        self.class_number = other.class_number
        self.student_number = other.student_number

    @property
    def list_key(self) -> StudentListKey:
        return StudentListKey(self.grade, self.class_number, self.student_number)

    def is_same_student_info(self, other: Student) -> bool:
        """True when grade, class and number match; the name is not compared."""
        return self.list_key == other.list_key


@dataclass
class ExamInfo:
    """An exam; ``exam_id`` is -1 until one is assigned."""

    year: int = 0
    semester: int = 0
    exam_type: ExamType = ExamType.UNKNOWN
    exam_id: int = -1

    _last_id: ClassVar[int] = 0

    @classmethod
    def from_row(cls, row: StudentScoreInfoRow) -> ExamInfo:
        return cls(
            year=_stoi(row.year),
            semester=_stoi(row.semester),
            exam_type=ExamType(_stoi(row.exam_type)),
        )

    def assign_id(self) -> None:
        """Give this exam the next id from the shared sequence."""
        ExamInfo._last_id += 1
        self.exam_id = ExamInfo._last_id

    def is_same_exam_info(self, other: ExamInfo) -> bool:
        """True when year, semester and type match; the id is not compared."""
        return (self.year, self.semester, self.exam_type) == (
            other.year,
            other.semester,
            other.exam_type,
        )

    def __lt__(self, other: ExamInfo) -> bool:
        if not isinstance(other, ExamInfo):
            return NotImplemented
        return (self.year, self.semester, self.exam_type) < (
            other.year,
            other.semester,
            other.exam_type,
        )


@dataclass
class StudentScore:
    """Subject scores of one student in one exam."""

    korean: int = 0
    english: int = 0
    math: int = 0
    social: int = 0
    science: int = 0
    student_key: int = -1
    exam_id: int = -1

    @classmethod
    def from_row(cls, row: StudentScoreInfoRow) -> StudentScore:
        return cls(
            korean=_stoi(row.korean_score),
            english=_stoi(row.english_score),
            math=_stoi(row.math_score),
            social=_stoi(row.social_score),
            science=_stoi(row.science_score),
        )

    @property
    def total_score(self) -> int:
        return self.korean + self.english + self.math + self.social + self.science

    def update_from(self, other: StudentScore) -> None:
        """Copy the exam id and subject scores; keep the student key."""
        self.exam_id = other.exam_id
        self.korean = other.korean
        self.english = other.english
        self.math = other.math
        self.social = other.social
        self.science = other.science

    def is_same_score(self, other: StudentScore) -> bool:
        """True when exam id and all subject scores match."""
        return (
            self.exam_id == other.exam_id
            and self.korean == other.korean
            and self.english == other.english
            and self.math == other.math
            and self.social == other.social
            and self.science == other.science
        )


@dataclass
class StudentScoreInfo:
    """A student, an exam and the score; keys and total are fixed at creation."""

    student: Student
    score: StudentScore
    exam: ExamInfo
    rank: int = 0
    _list_key: StudentListKey = field(init=False, repr=False)
    _exam_id: int = field(init=False, repr=False)
    _total_score: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.student = copy.copy(self.student)
        self.score = copy.copy(self.score)
        self.exam = copy.copy(self.exam)
        self._list_key = self.student.list_key
        self._exam_id = self.exam.exam_id
        self._total_score = self.score.total_score

    @property
    def list_key(self) -> StudentListKey:
        return self._list_key

    @property
    def exam_id(self) -> int:
        return self._exam_id

    @property
    def total_score(self) -> int:
        return self._total_score