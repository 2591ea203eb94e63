"""Operations on students, exams and scores kept in storage."""

from __future__ import annotations

import copy

from .exam_type import ExamType
from .list_key import StudentListKey
from .models import ExamInfo, ManagementError, Student, StudentScore
from .storage import ExamInfoStorage, StudentScoreStorage, StudentStorage


class StudentService:
    """Adds, finds, updates and removes students."""

    def __init__(self) -> None:
        self._storage = StudentStorage()

    def exists_list_key(self, list_key: StudentListKey) -> bool:
        return self.find_key(list_key) is not None

    def exists_key(self, student_key: int) -> bool:
        return student_key in self._storage.table

    def find_key(self, list_key: StudentListKey) -> int | None:
        """Student key for a grade-class-number key, or None."""
        return self._storage.index.get(list_key)

    def all_students(self) -> list[tuple[int, Student]]:
        """Pairs of (student key, student) ordered by grade, class and number."""
        return self._storage.students_in_index_order()

    def find(self, list_key: StudentListKey) -> Student | None:
        student_key = self.find_key(list_key)
        if student_key is None:
            return None
        return self._storage.table.get(student_key)

    def find_by_key(self, student_key: int) -> Student | None:
        return self._storage.table.get(student_key)

    def add(self, student: Student) -> Student:
        """Store a copy of the student, assigning a key if it has none."""
        new_student = copy.copy(student)
        if self.exists_list_key(new_student.list_key):
            raise ManagementError("이미 존재하는 학생 키입니다.")
        if new_student.key == -1:
            new_student.assign_key()
        self._storage.table[new_student.key] = new_student
        self._storage.index[new_student.list_key] = new_student.key
        return new_student

    def update(self, target: Student, new_student: Student) -> Student:
        """Copy the new student's fields onto the stored target and reindex it."""
        if target.is_same_student_info(new_student):
            return target

        origin_key = target.list_key
        new_key = new_student.list_key
        if self.exists_list_key(new_key) and origin_key != new_key:
            raise ManagementError(
                "업데이트할 학년, 반, 번호에 대한 학생이 이미 존재합니다."
            )

        student = self._storage.table.get(target.key)
        if student is None:
            raise ManagementError("학생 키에 해당하는 학생정보를 찾아오지 못하였습니다.")
        student.update_from(new_student)

        self._storage.index.pop(origin_key, None)
        self._storage.index[new_key] = student.key
        return student

    def delete(self, list_key: StudentListKey) -> None:
        student_key = self.find_key(list_key)
        if student_key is None:
            raise ManagementError("삭제할 학생의 키를 찾을 수 없습니다.")
        del self._storage.index[list_key]
        if self._storage.table.pop(student_key, None) is None:
            raise ManagementError("삭제할 학생이 없습니다.")

    def delete_all(self) -> None:
        self._storage.table.clear()
        self._storage.index.clear()


class ExamInfoService:
    """Adds, finds, updates and removes exams."""

    def __init__(self) -> None:
        self._storage = ExamInfoStorage()

    def exists(self, exam: ExamInfo) -> bool:
        return self.find(exam) is not None

    def find_by_id(self, exam_id: int) -> ExamInfo | None:
        return self._storage.table.get(exam_id)

    def find(self, exam: ExamInfo) -> ExamInfo | None:
        """Stored exam with the same year, semester and type, or None."""
        return next(
            (stored for stored in self._storage.table.values()
             if stored.is_same_exam_info(exam)),
            None,
        )

    def find_by_fields(
        self, year: int, semester: int, exam_type: ExamType
    ) -> ExamInfo | None:
        return self.find(ExamInfo(year, semester, exam_type))

    def update(self, origin_exam_id: int, update_exam: ExamInfo) -> ExamInfo:
        """Exam to use in place of the original: itself, an existing match or a new one."""
        target = self.find_by_id(origin_exam_id)
        if target is None:
            raise ManagementError("시험 ID에 해당하는 시험정보를 찾을 수 없습니다.")
        if target.is_same_exam_info(update_exam):
            return target

        existing = self.find(update_exam)
        if existing is not None:
            return existing

        return self.add(update_exam)

    def add(self, exam: ExamInfo) -> ExamInfo:
        """Assign the exam a new id and store a copy of it."""
        exam.assign_id()
        stored = copy.copy(exam)
        self._storage.table[stored.exam_id] = stored
        return stored

    def delete(self, exam_id: int) -> None:
        if self._storage.table.pop(exam_id, None) is None:
            raise ManagementError("시험 ID에 해당하는 시험정보를 삭제하기 못하였습니다.")

    def delete_all(self) -> None:
        self._storage.table.clear()


class StudentScoreService:
    """Adds, finds, updates and removes scores of students."""

    def __init__(self) -> None:
        self._storage = StudentScoreStorage()

    def exists(self, student_key: int, exam_id: int | None = None) -> bool:
        """Whether the student has a score, for the given exam if one is given."""
        scores = self._storage.table.get(student_key)
        if not scores:
            return False
        if exam_id is None:
            return True
        return any(score.exam_id == exam_id for score in scores)

    def all_scores(self) -> dict[int, list[StudentScore]]:
        return self._storage.table

    def find(self, student_key: int, exam_id: int) -> StudentScore | None:
        scores = self.find_all(student_key)
        if scores is None:
            return None
        return next((score for score in scores if score.exam_id == exam_id), None)

    def find_all(self, student_key: int) -> list[StudentScore] | None:
        return self._storage.table.get(student_key)

    def add(self, score: StudentScore) -> StudentScore:
        """Store a copy of the score under its student key."""
        if self.find(score.student_key, score.exam_id) is not None:
            raise ManagementError("이미 해당 학생과 시험에 대한 성적이 존재합니다.")
        stored = copy.copy(score)
        self._storage.table.setdefault(stored.student_key, []).append(stored)
        return stored

    def update(
        self, student_key: int, origin_exam_id: int, update_score: StudentScore
    ) -> StudentScore:
        """Overwrite the exam id and subject scores of a stored score."""
        target = self.find(student_key, origin_exam_id)
        if target is None:
            raise ManagementError("기준 학생과 시험에 대한 성적이 존재하지 않습니다.")

        update_exam_id = update_score.exam_id
        if (
            origin_exam_id != update_exam_id
            and self.find(student_key, update_exam_id) is not None
        ):
            raise ManagementError(
                "이미 수정할 시험에 대한 성적이 존재합니다. 해당 시험을 선택하여 수정해주세요."
            )

        target.update_from(update_score)
        return target

    def delete(self, student_key: int, exam_id: int) -> None:
        scores = self._storage.table.get(student_key)
        if scores is None:
            raise ManagementError("해당 학생의 성적 정보가 존재하지 않습니다.")
        for position, score in enumerate(scores):
            if score.exam_id == exam_id:
                del scores[position]
                return
        raise ManagementError("해당 시험의 성적이 존재하지 않습니다.")

    def delete_all(self) -> None:
        self._storage.table.clear()