"""Combined operations on students, exams and scores."""

from __future__ import annotations

import copy

from .list_key import StudentListKey
from .models import (
    ExamInfo,
    ManagementError,
    Student,
    StudentScoreInfo,
)
from .services import ExamInfoService, StudentScoreService, StudentService


class StudentScoreInfoService:
    """Keeps students, exams and scores consistent with one another."""

    def __init__(
        self,
        student_service: StudentService,
        exam_service: ExamInfoService,
        score_service: StudentScoreService,
    ) -> None:
        self._students = student_service
        self._exams = exam_service
        self._scores = score_service

    def exists(self, list_key: StudentListKey, exam: ExamInfo) -> bool:
        """Whether the student already has a score for the exam."""
        student_key = self._students.find_key(list_key)
        if student_key is None or exam.exam_id == -1:
            return False
        return self._scores.exists(student_key, exam.exam_id)

    def all_infos(self) -> list[StudentScoreInfo]:
        """Every score joined with its student and exam, in student order."""
        all_scores = self._scores.all_scores()
        infos = []
        for student_key, student in self._students.all_students():
            for score in all_scores.get(student_key, []):
                exam = self._exams.find_by_id(score.exam_id)
                if exam is None:
                    raise ManagementError("성적 정보를 불러올 수 없습니다.")
                infos.append(StudentScoreInfo(student, score, exam))
        return infos

    def search_infos(self, list_key: StudentListKey) -> list[StudentScoreInfo]:
        """All scores of one student joined with their exams."""
        student_key = self._students.find_key(list_key)
        student = None if student_key is None else self._students.find_by_key(student_key)
        if student is None:
            raise ManagementError("저장된 학생 정보에 문제가 있습니다. -1")

        infos = []
        for score in self._scores.find_all(student.key) or []:
            exam = self._exams.find_by_id(score.exam_id)
            if exam is None:
                raise ManagementError("성적 정보를 불러올 수 없습니다.")
            infos.append(StudentScoreInfo(student, score, exam))
        return infos

    def search_info(self, list_key: StudentListKey, exam: ExamInfo) -> StudentScoreInfo:
        """The score of one student in one exam."""
        student_key = self._students.find_key(list_key)
        student = None if student_key is None else self._students.find_by_key(student_key)
        if student is None:
            raise ManagementError("저장된 학생 정보에 문제가 있습니다. -1")

        score = self._scores.find(student.key, exam.exam_id)
        if score is None:
            raise ManagementError("저장된 학생 성적 정보가 없습니다.")
        return StudentScoreInfo(student, score, exam)

    def add(self, info: StudentScoreInfo) -> StudentScoreInfo:
        """Store a score, creating its student and exam when they are new."""
        student = copy.copy(info.student)
        exam = copy.copy(info.exam)
        score = copy.copy(info.score)

        list_key = info.list_key
        if self.exists(list_key, exam):
            raise ManagementError("이미 존재하는 학생과 시험 정보입니다.")

        stored_exam = self._exams.find(exam)
        exam = self._exams.add(exam) if stored_exam is None else stored_exam

        stored_student = self._students.find(list_key)
        student = self._students.add(student) if stored_student is None else stored_student

        score.exam_id = exam.exam_id
        score.student_key = student.key
        score = self._scores.add(score)

        return StudentScoreInfo(student, score, exam)

    def update(
        self,
        origin_student: Student,
        origin_exam: ExamInfo,
        update_info: StudentScoreInfo,
    ) -> StudentScoreInfo:
        """Replace a stored student's details, exam and score with new ones."""
        target_student = self._students.find(origin_student.list_key)
        if target_student is None:
            raise ManagementError("업데이트할 학생이 존재하지 않습니다.")
        target_exam = self._exams.find(origin_exam)
        if target_exam is None:
            raise ManagementError("존재하지 않는 시험 정보입니다.")
        target_exam_id = target_exam.exam_id

        updated_student = self._students.update(target_student, update_info.student)
        updated_exam = self._exams.update(target_exam_id, update_info.exam)

        update_info.score.student_key = updated_student.key
        update_info.score.exam_id = updated_exam.exam_id
        updated_score = self._scores.update(
            target_student.key, target_exam_id, update_info.score
        )

        return StudentScoreInfo(updated_student, updated_score, updated_exam)

    def delete_for(self, student: Student, exam: ExamInfo) -> None:
        """Remove the score of a student in an exam given by its details."""
        stored_student = self._students.find(student.list_key)
        if stored_student is None:
            raise ManagementError("존재하지 않는 학생입니다.")
        if self._exams.find(exam) is None:
            raise ManagementError("존재하지 않는 시험 정보입니다.")
        self._scores.delete(stored_student.key, exam.exam_id)

    def delete(self, list_key: StudentListKey, exam_id: int) -> None:
        """Remove the score of a student in an exam given by its id."""
        stored_student = self._students.find(list_key)
        if stored_student is None:
            raise ManagementError("존재하지 않는 학생입니다.")
        if self._exams.find_by_id(exam_id) is None:
            raise ManagementError("존재하지 않는 시험 정보입니다.")
        self._scores.delete(stored_student.key, exam_id)

    def delete_all(self) -> None:
        """Remove every score, exam and student."""
        self._scores.delete_all()
        self._exams.delete_all()
        self._students.delete_all()