# tests/conftest.py
import pytest
from typing import List
from grade_tracker.models import Student
from grade_tracker.store import StudentStore
from grade_tracker.config import AppConfig
from grade_tracker.controller import GradeTracker

@pytest.fixture
def sample_students() -> List[Student]:
    """Фикстура, предоставляющая тестовый набор студентов."""
    return [
        Student("Иванов Иван", [78, 85, 90]),
        Student("Петров Петр", [92, 88, 95]),
        Student("Сидорова Анна", [65, 70]),
    ]

@pytest.fixture
def store(sample_students) -> StudentStore:
    return StudentStore(sample_students)

@pytest.fixture
def tracker(store, tmp_path) -> GradeTracker:
    """Контроллер, работающий с файлом во временной папке."""
    return GradeTracker(store, AppConfig(data_file=tmp_path / "students.txt"))
