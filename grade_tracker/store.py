# grade_tracker/store.py
"""Хранилище студентов текущей сессии: упорядоченный список и его сохранение."""
import logging
from typing import Iterator, List, Tuple

from . import io_utils, processing
from .models import Student
from .errors import SelectionError
from .io_utils import PathLike

logger = logging.getLogger(__name__)


class StudentStore:
    """Упорядоченный список записей. Порядок совпадает с порядком отображения."""

    def __init__(self, students=()):
        self._students: List[Student] = list(students)

    @property
    def students(self) -> Tuple[Student, ...]:
        return tuple(self._students)

    def __len__(self) -> int:
        return len(self._students)

    def __iter__(self) -> Iterator[Student]:
        return iter(self._students)

    def _check_index(self, index: int):
        if not isinstance(index, int) or not 0 <= index < len(self._students):
            raise SelectionError(
                f"Индекс {index} вне списка из {len(self._students)} записей. Сначала выберите запись."
            )

    def get(self, index: int) -> Student:
        self._check_index(index)
        return self._students[index]

    def add(self, student: Student):
        """Добавляет студента в конец списка. Дубликаты не проверяются."""
        self._students.append(student)
        logger.info("Добавлен студент %s", student.name)

    def update(self, index: int, student: Student):
        """Заменяет запись по индексу."""
        self._check_index(index)
        self._students[index] = student
        logger.info("Запись %d заменена на %s", index, student.name)

    def delete(self, index: int) -> Student:
        """Удаляет запись по индексу; следующие записи сдвигаются."""
        self._check_index(index)
        removed = self._students.pop(index)
        logger.info("Удалён студент %s", removed.name)
        return removed

    def class_average(self) -> float:
        return processing.class_average(self._students)

    def load(self, filepath: PathLike) -> int:
        """Загружает студентов из файла и возвращает число добавленных записей.

        Отсутствующий файл не является ошибкой: список остаётся без изменений.
        Загрузка атомарна: при ошибке разбора список тоже не меняется.
        """
        try:
            loaded = io_utils.read_students(filepath)
        except FileNotFoundError:
            logger.info("Файл %s не найден, начинаем с пустого списка", filepath)
            return 0

        self._students.extend(loaded)
        return len(loaded)

    def save(self, filepath: PathLike):
        """Перезаписывает файл текущим списком студентов."""
        io_utils.write_students(filepath, self._students)
