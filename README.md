# gradebook

Keep student records, exams and exam scores in memory, rank students per
exam, and move the whole set in and out of CSV files.

## Install

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Concepts

- A **student** (`gradebook.models.Student`) is identified by grade,
  class number and student number. `StudentListKey`
  (`gradebook.list_key`) holds those three numbers; `str(key)` gives
  `grade-class-number`, e.g. `2-3-15`, and `StudentListKey.from_string`
  reads that form back.
- An **exam** (`ExamInfo`) is a year, a semester and an `ExamType`
  (`gradebook.exam_type`): `MIDTERM`, `FINAL`, `QUIZ`, `MOCK_TEST`,
  `ASSIGNMENT`, or `UNKNOWN`. `exam_name()` gives the display name of a
  type (중간고사, 기말고사, 수행평가, 모의고사, 과제, and 미정 for unknown),
  and `exam_type_from_name()` maps a display name back.
- A **score** (`StudentScore`) holds five subject marks (`korean`,
  `english`, `math`, `social`, `science`) for one student in one exam;
  `total_score` is their sum.
- Ranks are assigned per exam by `gradebook.controller.assign_ranks`,
  highest total first; equal totals share a rank, and the next distinct
  total takes the next rank (1, 2, 2, 3).

## Layers

- `gradebook.services`: `StudentService`, `ExamInfoService` and
  `StudentScoreService`, each keeping its own in-memory tables.
- `gradebook.info_service.StudentScoreInfoService`: joins the three,
  creating a student or exam when a score for a new one is added.
- `gradebook.controller.StudentScoreInfoController`: takes and returns
  `StudentScoreInfoRow` records (all fields as text, `gradebook.row`),
  validates input, keeps a ranked cache and reads and writes CSV files.

## Usage

```python
from gradebook.services import StudentService, ExamInfoService, StudentScoreService
from gradebook.info_service import StudentScoreInfoService
from gradebook.controller import StudentScoreInfoController
from gradebook.row import StudentScoreInfoRow

service = StudentScoreInfoService(StudentService(), ExamInfoService(), StudentScoreService())
controller = StudentScoreInfoController(service)

row = StudentScoreInfoRow(
    grade="1", class_number="2", student_number="3", name="Kim",
    year="2024", semester="1", exam_type="0",
    korean_score="90", english_score="85", math_score="100",
    social_score="70", science_score="95",
)
added = controller.add(row)
print(added.total_score, added.rank, added.exam_id)   # "440" "1" ...

for r in controller.all_rows():
    print(r.to_list())

controller.update("1-2-3", int(added.exam_id), row)
controller.save_file("scores.csv")
controller.delete("1-2-3", int(added.exam_id))
controller.load_file("scores.csv")
```

`exam_type` in a row is the integer value of an `ExamType` as text
(`"0"` is a midterm).

## Validation and errors

Before a row is stored the controller checks that the name is not empty,
that grade, class and number are at least 1, that the year is 2000 or
later, that the semester is at least 1 and that no subject score is
negative. Text fields that are not numbers are rejected as well.

Every operation that cannot be carried out raises `ManagementError`
(from `gradebook.models`). Controller methods put a line naming the
operation in front of the underlying reason, for example a duplicate
student and exam pair, a missing record, an update onto an exam the
student already has a score for, or an unsupported file type.

## CSV format

`gradebook.csv_file` reads and writes the files. They are UTF-8 with a
byte-order mark and LF line ends; cells holding a comma, a quote or a
newline are quoted, with quotes doubled.

The first line is a header (`attribute_names()`); each following line
holds grade, class, number, name, year, semester, exam type name, the
five subject scores, total and rank. Only paths ending in `.csv` (in any
case) are accepted.

- `save_file` writes the controller's current cache, which is refreshed
  after every add, update and delete.
- `load_file` skips the header and adds each line that has at least 14
  cells; total and rank in the file are ignored and recomputed. Lines
  are added to what is already held, and a line that fails stops the
  load with an error.

## What it does not do

Everything is kept in memory for the life of the objects; the only
storage is the CSV export and import. There is no command-line tool and
no graphical or web interface: the package is a library to be driven
from Python code.