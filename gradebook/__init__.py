"""In-memory student, exam and score records with per-exam ranking and CSV files."""

__version__ = "0.1.0"
__all__ = ["__version__"]