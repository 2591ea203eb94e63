[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "gradebook"
version = "0.1.0"
description = "In-memory student, exam and score records with per-exam ranking and CSV import and export."
requires-python = ">=3.10"
dependencies = []
keywords = ["gradebook", "students", "scores", "exams", "ranking", "csv"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["gradebook*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
