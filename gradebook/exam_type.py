"""Exam categories and their display names."""

from __future__ import annotations

from enum import IntEnum


class ExamType(IntEnum):
    """Kind of exam a score belongs to."""

    UNKNOWN = -1
    MIDTERM = 0
    FINAL = 1
    QUIZ = 2
    MOCK_TEST = 3
    ASSIGNMENT = 4


_NAMES: dict[ExamType, str] = {
    ExamType.MIDTERM: "중간고사",
    ExamType.FINAL: "기말고사",
    ExamType.QUIZ: "수행평가",
    ExamType.MOCK_TEST: "모의고사",
    ExamType.ASSIGNMENT: "과제",
    ExamType.UNKNOWN: "미정",
}

_BY_NAME: dict[str, ExamType] = {
    name: exam_type
    for exam_type, name in _NAMES.items()
    if exam_type is not ExamType.UNKNOWN
}


def exam_types() -> list[ExamType]:
    """Return the selectable exam types in display order."""
    return [
        ExamType.MIDTERM,
        ExamType.FINAL,
        ExamType.QUIZ,
        ExamType.MOCK_TEST,
        ExamType.ASSIGNMENT,
    ]


def exam_name(exam_type: ExamType | int) -> str:
    """Return the display name of an exam type; unknown values read as undecided."""
    try:
        return _NAMES[ExamType(exam_type)]
    except ValueError:
        return _NAMES[ExamType.UNKNOWN]


def exam_type_from_name(name: str) -> ExamType:
    """Return the exam type for a display name, or UNKNOWN."""
    return _BY_NAME.get(name, ExamType.UNKNOWN)