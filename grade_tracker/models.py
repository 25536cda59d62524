# grade_tracker/models.py
"""Модуль, определяющий основную модель данных, запись Student."""
import csv
import io
from typing import Iterable, List

from .errors import ParseError

ROW_END = "\r\n"


class Student:
    """Представляет студента с его именем и упорядоченным списком оценок."""

    def __init__(self, name: str, grades: Iterable[int] = ()):
        self.name = name.strip()

        # Запись целиком отклоняется, если хоть одна оценка не целое число.
        self.grades: List[int] = []
        for grade in grades:
            if isinstance(grade, bool) or not isinstance(grade, int):
                raise ParseError(f"Оценка '{grade}' должна быть целым числом.")
            self.grades.append(grade)

    @property
    def average(self) -> float:
        """Рассчитывает средний балл студента. Возвращает 0.0, если оценок нет."""
        if not self.grades:
            return 0.0
        return sum(self.grades) / len(self.grades)

    @property
    def highest(self) -> int:
        """Лучшая оценка, 0 если оценок нет."""
        return max(self.grades, default=0)

    @property
    def lowest(self) -> int:
        """Худшая оценка, 0 если оценок нет."""
        return min(self.grades, default=0)

    @property
    def grades_display(self) -> str:
        return ", ".join(map(str, self.grades))

    def serialize(self) -> str:
        """Возвращает строку для файла: имя, затем оценки через запятую.

        Имя с запятой или кавычкой экранируется по правилам CSV, в остальных
        случаях результат совпадает с простым форматом ``Alice,90,85,77``.
        """
        buffer = io.StringIO()
        # Символы из lineterminator в имени всегда берутся в кавычки.
        writer = csv.writer(buffer, lineterminator=ROW_END)
        writer.writerow([self.name, *self.grades])
        return buffer.getvalue()[:-len(ROW_END)]

    @classmethod
    def deserialize(cls, line: str) -> "Student":
        """Восстанавливает студента из строки файла."""
        try:
            fields = next(csv.reader([line.rstrip("\r\n")], strict=True))
        except (csv.Error, StopIteration) as e:
            raise ParseError(f"Не удалось разобрать строку {line!r}: {e}")
        return cls.from_fields(fields)

    @classmethod
    def from_fields(cls, fields: List[str]) -> "Student":
        """Создаёт студента из уже разобранных полей: имя, затем оценки."""
        if not fields:
            raise ParseError("Пустая строка не содержит записи о студенте.")

        name, *tokens = fields
        try:
            grades = [int(token) for token in tokens]
        except ValueError as e:
            raise ParseError(f"Некорректная оценка в записи {fields!r}. Детали: {e}")
        return cls(name, grades)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return self.name == other.name and self.grades == other.grades

    def __repr__(self) -> str:
        """Возвращает строковое представление объекта для отладки."""
        return f"Student(name='{self.name}', grades={self.grades})"

    def __str__(self) -> str:
        """Возвращает удобное для пользователя строковое представление объекта."""
        grades_str = self.grades_display if self.grades else "Нет оценок"
        return (
            f"Имя: {self.name:<20} | Средний балл: {self.average:<6.2f} | "
            f"Макс: {self.highest:<3} | Мин: {self.lowest:<3} | Оценки: [{grades_str}]"
        )
