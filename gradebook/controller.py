"""Validation, caching, ranking and file exchange for the gradebook."""

from __future__ import annotations

import os
from collections import defaultdict
from typing import Iterable

from .csv_file import file_type, load_csv, save_csv
from .exam_type import exam_name, exam_type_from_name
from .info_service import StudentScoreInfoService
from .list_key import StudentListKey
from .models import (
    ExamInfo,
    ManagementError,
    Student,
    StudentScore,
    StudentScoreInfo,
)
from .row import StudentScoreInfoRow, attribute_names

_MIN_COLUMNS = 14


def assign_ranks(infos: Iterable[StudentScoreInfo]) -> None:
    """Rank infos within each exam by total score, highest first; ties share a rank."""
    groups: dict[int, list[StudentScoreInfo]] = defaultdict(list)
    for info in infos:
        groups[info.exam_id].append(info)

    for group in groups.values():
        group.sort(key=lambda info: info.total_score, reverse=True)
        rank = 1
        previous = group[0].total_score
        for info in group:
            if info.total_score != previous:
                rank += 1
            info.rank = rank
            previous = info.total_score


def _as_list_key(list_key: StudentListKey | str) -> StudentListKey:
    if isinstance(list_key, StudentListKey):
        return list_key
    return StudentListKey.from_string(list_key)


def _wrapped(prefix: str, error: Exception) -> ManagementError:
    return ManagementError(f"{prefix}\n{error}")


class StudentScoreInfoController:
    """Turns rows into domain objects, checks them and keeps a ranked cache."""

    def __init__(self, service: StudentScoreInfoService) -> None:
        self._service = service
        self._cache: list[StudentScoreInfo] = []

    def validate_student(self, student: Student) -> None:
        if not student.name:
            raise ManagementError("이름은 비어있을 수 없습니다.")
        if student.grade < 1 or student.class_number < 1 or student.student_number < 1:
            raise ManagementError("학년, 반, 번호는 1 이상이어야 합니다.")

    def validate_exam(self, exam: ExamInfo) -> None:
        if exam.year < 2000:
            raise ManagementError("시험 년도는 2000년 이후여야 합니다.")
        if exam.semester < 1:
            raise ManagementError("학기는 1 이상이어야 합니다.")

    def validate_score(self, score: StudentScore) -> None:
        subjects = (score.korean, score.english, score.math, score.social, score.science)
        if any(value < 0 for value in subjects):
            raise ManagementError("성적은 0 이상이어야 합니다.")

    def validate_info(self, info: StudentScoreInfo) -> None:
        self.validate_student(info.student)
        self.validate_exam(info.exam)
        self.validate_score(info.score)

    def all_rows(self) -> list[StudentScoreInfoRow]:
        """Rows for every cached info, filling the cache first if it is empty."""
        if not self._cache:
            self.reset_cache()
        return [self.info_to_row(info) for info in self._cache]

    def reset_cache(self) -> None:
        """Reload every info from the service and rank them."""
        self._cache = self._service.all_infos()
        assign_ranks(self._cache)

    def info_to_row(self, info: StudentScoreInfo) -> StudentScoreInfoRow:
        try:
            student, exam, score = info.student, info.exam, info.score
            return StudentScoreInfoRow(
                grade=str(student.grade),
                class_number=str(student.class_number),
                student_number=str(student.student_number),
                name=student.name,
                exam_id=str(exam.exam_id),
                year=str(exam.year),
                semester=str(exam.semester),
                exam_type=str(int(exam.exam_type)),
                exam_type_name=exam_name(exam.exam_type),
                korean_score=str(score.korean),
                english_score=str(score.english),
                math_score=str(score.math),
                social_score=str(score.social),
                science_score=str(score.science),
                total_score=str(info.total_score),
                rank=str(info.rank),
            )
        except Exception as error:
            raise _wrapped(
                "[학생 성적 정보 객체를 DTO 데이터로 변환 중 오류 발생]", error
            ) from error

    def find_cached(
        self, list_key: StudentListKey | str, exam_id: int
    ) -> StudentScoreInfo | None:
        """Cached info for a student and exam, or None."""
        key = _as_list_key(list_key)
        return next(
            (info for info in self._cache
             if info.list_key == key and info.exam_id == exam_id),
            None,
        )

    def _info_from_row(self, row: StudentScoreInfoRow) -> StudentScoreInfo:
        return StudentScoreInfo(
            Student.from_row(row), StudentScore.from_row(row), ExamInfo.from_row(row)
        )

    def add(self, row: StudentScoreInfoRow) -> StudentScoreInfoRow:
        """Store the row's score and return it as stored, with its rank."""
        try:
            info = self._info_from_row(row)
            self.validate_info(info)
            saved = self._service.add(info)
            self.reset_cache()
            new_info = self.find_cached(saved.list_key, saved.exam_id)
            if new_info is None:
                raise ManagementError("성적 정보 검색 실패")
            return self.info_to_row(new_info)
        except Exception as error:
            raise _wrapped("[학생 시험 성적 정보 추가 중 오류 발생]", error) from error

    def update(
        self, list_key: StudentListKey | str, exam_id: int, row: StudentScoreInfoRow
    ) -> StudentScoreInfoRow:
        """Replace the cached score of a student and exam with the row's data."""
        try:
            origin = self.find_cached(list_key, exam_id)
            if origin is None:
                raise ManagementError("수정할 학생 성적 정보를 찾을 수 없습니다.")

            update_info = self._info_from_row(row)
            self.validate_info(update_info)

            saved = self._service.update(origin.student, origin.exam, update_info)
            self.reset_cache()

            new_info = self.find_cached(saved.list_key, saved.exam_id)
            if new_info is None:
                raise ManagementError("수정된 학생 성적 정보를 찾을 수 없습니다.")
            return self.info_to_row(new_info)
        except Exception as error:
            raise _wrapped("[학생 시험 성적 정보 업데이트 중 오류 발생]", error) from error

    def delete(self, list_key: StudentListKey | str, exam_id: int) -> None:
        try:
            self._service.delete(_as_list_key(list_key), exam_id)
            self.reset_cache()
        except Exception as error:
            raise _wrapped("[학생 시험 성적 정보 삭제 중 오류 발생]", error) from error

    def delete_all(self) -> None:
        try:
            self._service.delete_all()
            self.reset_cache()
        except Exception as error:
            raise _wrapped("[학생 시험 성적 정보 전체 삭제 중 오류 발생]", error) from error

    def load_file(self, path: str | os.PathLike[str]) -> None:
        """Add every data row of a CSV file; the first row is a header."""
        try:
            if file_type(path) != "csv":
                raise ManagementError("지원하지 않는 파일 형식입니다.")
            file_rows = load_csv(path)
            if not file_rows:
                raise ManagementError("읽어온 파일의 값이 없습니다.")

            for cells in file_rows[1:]:
                if len(cells) < _MIN_COLUMNS:
                    raise ManagementError("불러올 파일의 컬럼 개수가 충분하지 않습니다.")
                (grade, class_number, student_number, name, year, semester,
                 type_name, korean, english, math, social, science) = cells[:12]
                self.add(StudentScoreInfoRow(
                    grade=grade,
                    class_number=class_number,
                    student_number=student_number,
                    name=name,
                    year=year,
                    semester=semester,
                    exam_type_name=type_name,
                    exam_type=str(int(exam_type_from_name(type_name))),
                    korean_score=korean,
                    english_score=english,
                    math_score=math,
                    social_score=social,
                    science_score=science,
                ))
        except Exception as error:
            raise _wrapped("[불러온 파일 데이터를 맵핑하는 중 오류 발생]", error) from error

        self.reset_cache()

    def save_file(self, path: str | os.PathLike[str]) -> None:
        """Write the cached infos to a CSV file with a header row."""
        try:
            rows = [attribute_names()]
            rows.extend(self.info_to_row(info).to_list() for info in self._cache)
            if file_type(path) != "csv":
                raise ManagementError("지원하지 않는 파일 형식입니다.")
            save_csv(path, rows)
        except Exception as error:
            raise _wrapped("[불러온 파일 데이터를 맵핑하는 중 오류 발생]", error) from error