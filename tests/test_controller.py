import pytest

from gradebook.controller import StudentScoreInfoController, assign_ranks
from gradebook.csv_file import load_csv
from gradebook.exam_type import ExamType, exam_name
from gradebook.info_service import StudentScoreInfoService
from gradebook.list_key import StudentListKey
from gradebook.models import (
    ExamInfo,
    ManagementError,
    Student,
    StudentScore,
    StudentScoreInfo,
)
from gradebook.row import StudentScoreInfoRow, attribute_names
from gradebook.services import ExamInfoService, StudentScoreService, StudentService


def new_controller():
    service = StudentScoreInfoService(
        StudentService(), ExamInfoService(), StudentScoreService()
    )
    return StudentScoreInfoController(service)


@pytest.fixture
def controller():
    return new_controller()


def make_row(name="Kim", grade="1", class_number="2", number="3",
             year="2024", semester="1", exam_type=ExamType.MIDTERM,
             scores=("90", "80", "70", "60", "50")):
    korean, english, math, social, science = scores
    return StudentScoreInfoRow(
        grade=grade, class_number=class_number, student_number=number, name=name,
        year=year, semester=semester, exam_type=str(int(exam_type)),
        korean_score=korean, english_score=english, math_score=math,
        social_score=social, science_score=science,
    )


def make_info(number, total_parts, exam_id_source):
    return StudentScoreInfo(
        Student("S", 1, 1, number), StudentScore(*total_parts), exam_id_source
    )


def test_assign_ranks_dense_per_exam():
    exam_a = ExamInfo(2024, 1, ExamType.MIDTERM, exam_id=100)
    exam_b = ExamInfo(2024, 1, ExamType.FINAL, exam_id=200)
    infos = [
        make_info(1, (50, 0, 0, 0, 0), exam_a),
        make_info(2, (90, 0, 0, 0, 0), exam_a),
        make_info(3, (90, 0, 0, 0, 0), exam_a),
        make_info(4, (10, 0, 0, 0, 0), exam_b),
    ]
    assign_ranks(infos)
    assert [info.rank for info in infos] == [2, 1, 1, 1]


def test_validation_errors(controller):
    with pytest.raises(ManagementError):
        controller.validate_student(Student("", 1, 1, 1))
    with pytest.raises(ManagementError):
        controller.validate_student(Student("Kim", 0, 1, 1))
    with pytest.raises(ManagementError):
        controller.validate_exam(ExamInfo(1999, 1, ExamType.QUIZ))
    with pytest.raises(ManagementError):
        controller.validate_exam(ExamInfo(2000, 0, ExamType.QUIZ))
    with pytest.raises(ManagementError):
        controller.validate_score(StudentScore(0, 0, -1, 0, 0))


def test_add_returns_stored_row(controller):
    row = controller.add(make_row())
    assert row.name == "Kim"
    assert row.rank == "1"
    assert row.exam_type_name == exam_name(ExamType.MIDTERM)
    assert row.korean_score == "90"
    assert int(row.exam_id) > 0
    assert controller.all_rows() == [row]


def test_add_invalid_row_raises(controller):
    with pytest.raises(ManagementError, match="추가 중 오류"):
        controller.add(make_row(year="1990"))
    with pytest.raises(ManagementError):
        controller.add(make_row(grade="abc"))
    assert controller.all_rows() == []


def test_add_duplicate_raises(controller):
    controller.add(make_row())
    with pytest.raises(ManagementError):
        controller.add(make_row())


def test_find_cached(controller):
    row = controller.add(make_row())
    found = controller.find_cached("1-2-3", int(row.exam_id))
    assert found.list_key == StudentListKey(1, 2, 3)
    assert controller.find_cached(StudentListKey(1, 2, 4), int(row.exam_id)) is None


def test_ranks_follow_totals(controller):
    low = controller.add(make_row(number="1", scores=("10", "10", "10", "10", "10")))
    controller.add(make_row(number="2", scores=("90", "90", "90", "90", "90")))
    rows = {r.student_number: r for r in controller.all_rows()}
    assert rows["2"].rank == "1"
    assert rows["1"].rank == "2"
    assert low.rank == "1"


def test_update(controller):
    row = controller.add(make_row())
    updated = controller.update(
        "1-2-3", int(row.exam_id), make_row(scores=("1", "2", "3", "4", "5"))
    )
    assert updated.exam_id == row.exam_id
    assert updated.korean_score == "1"
    assert controller.all_rows() == [updated]


def test_update_missing_raises(controller):
    with pytest.raises(ManagementError, match="업데이트 중 오류"):
        controller.update("1-2-3", 1, make_row())


def test_delete(controller):
    row = controller.add(make_row())
    controller.delete("1-2-3", int(row.exam_id))
    assert controller.all_rows() == []
    with pytest.raises(ManagementError, match="삭제 중 오류"):
        controller.delete("1-2-3", int(row.exam_id))


def test_delete_all(controller):
    controller.add(make_row(number="1"))
    controller.add(make_row(number="2"))
    controller.delete_all()
    assert controller.all_rows() == []


def test_save_and_load_round_trip(controller, tmp_path):
    controller.add(make_row(name="Kim, Jr.", number="1"))
    controller.add(make_row(name="Lee", number="2", exam_type=ExamType.FINAL))
    path = tmp_path / "scores.csv"
    controller.save_file(path)

    assert load_csv(path)[0] == attribute_names()

    other = new_controller()
    other.load_file(path)
    assert [r.to_list() for r in other.all_rows()] == [
        r.to_list() for r in controller.all_rows()
    ]


def test_load_unsupported_type_raises(controller, tmp_path):
    path = tmp_path / "scores.txt"
    path.write_text("a\n", encoding="utf-8")
    with pytest.raises(ManagementError, match="지원하지 않는 파일 형식"):
        controller.load_file(path)


def test_load_missing_file_raises(controller, tmp_path):
    with pytest.raises(ManagementError, match="읽어온 파일의 값이 없습니다"):
        controller.load_file(tmp_path / "absent.csv")


def test_load_short_row_raises(controller, tmp_path):
    path = tmp_path / "short.csv"
    path.write_text("header\n1,2,3\n", encoding="utf-8")
    with pytest.raises(ManagementError, match="컬럼 개수"):
        controller.load_file(path)


def test_save_unsupported_type_raises(controller, tmp_path):
    with pytest.raises(ManagementError, match="지원하지 않는 파일 형식"):
        controller.save_file(tmp_path / "scores.xlsx")
    assert not (tmp_path / "scores.xlsx").exists()