# grade_tracker/processing.py
"""Модуль для обработки данных: разбор ввода, таблица, статистика, сортировка."""
from typing import List, Dict, Any, Optional, Sequence

import pandas as pd

from .models import Student
from .errors import ParseError

TABLE_COLUMNS = ["Name", "Grades", "Average", "Highest", "Lowest"]


def parse_grades(text: str) -> List[int]:
    """Разбирает оценки, введённые через запятую.

    Если хоть одна оценка некорректна, весь ввод отклоняется.
    Пустая строка означает студента без оценок.
    """
    if not text or not text.strip():
        return []

    grades = []
    for token in text.split(","):
        token = token.strip()
        try:
            grades.append(int(token))
        except ValueError:
            raise ParseError(f"Некорректная оценка: '{token}'. Ожидается целое число.")
    return grades


def build_table(students: Sequence[Student]) -> pd.DataFrame:
    """Строит табличное представление списка для отображения и экспорта."""
    rows = [
        {
            "Name": s.name,
            "Grades": s.grades_display,
            "Average": f"{s.average:.2f}",
            "Highest": s.highest,
            "Lowest": s.lowest,
        }
        for s in students
    ]
    return pd.DataFrame(rows, columns=TABLE_COLUMNS)


def class_average(students: Sequence[Student]) -> float:
    """Средний балл по всем оценкам всех студентов, 0.0 если оценок нет."""
    all_grades = [grade for s in students for grade in s.grades]
    return sum(all_grades) / len(all_grades) if all_grades else 0.0


def sort_students(students: Sequence[Student], by: str) -> List[Student]:
    """Сортирует список студентов по заданному критерию."""
    if by == 'name':
        return sorted(students, key=lambda s: s.name)
    elif by == 'avg':
        # Сортировка по убыванию среднего балла, затем по имени для стабильности
        return sorted(students, key=lambda s: (-s.average, s.name))
    elif by == 'highest':
        return sorted(students, key=lambda s: (-s.highest, s.name))
    else:
        raise ValueError("Неверный ключ для сортировки. Доступно: 'name', 'avg', 'highest'.")


def get_group_statistics(students: Sequence[Student]) -> Optional[Dict[str, Any]]:
    """Рассчитывает статистику по группе студентов."""
    if not students:
        return None

    all_grades = [grade for s in students for grade in s.grades]

    return {
        "total_students": len(students),
        "class_average": class_average(students),
        "best_student": max(students, key=lambda s: s.average),
        "worst_student": min(students, key=lambda s: s.average),
        "highest_grade": max(all_grades, default=0),
        "lowest_grade": min(all_grades, default=0),
    }


def get_top_n_students(students: Sequence[Student], n: int) -> List[Student]:
    """Возвращает N лучших студентов по среднему баллу."""
    return sort_students(students, 'avg')[:n]
