# grade_tracker/io_utils.py
"""Модуль для операций ввода/вывода: файл со списком студентов и экспорт в CSV."""
import csv
import logging
from pathlib import Path
from typing import List, Sequence, Union

from .models import Student
from .errors import StorageError, ParseError
from .processing import build_table

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def is_blank_row(row: List[str]) -> bool:
    """Пустая строка или строка из одних пробелов.

    Запись ``""`` (студент с пустым именем без оценок) пустой не считается.
    """
    if not row:
        return True
    return len(row) == 1 and row[0] != "" and not row[0].strip()


def read_students(filepath: PathLike) -> List[Student]:
    """Читает всех студентов из файла.

    Файл разбирается целиком до возврата результата: при ошибке в любой
    строке выбрасывается ParseError, и вызывающий код не получает
    частично прочитанный список. FileNotFoundError пробрасывается как есть.
    Имя в кавычках может занимать несколько физических строк файла.
    """
    students = []
    try:
        with open(filepath, mode='r', encoding='utf-8', newline='') as file:
            reader = csv.reader(file, strict=True)
            try:
                for row in reader:
                    if is_blank_row(row):
                        continue
                    students.append(Student.from_fields(row))
            except (csv.Error, ParseError) as e:
                raise ParseError(f"Ошибка в строке {reader.line_num}: {e}", line_number=reader.line_num)
    except FileNotFoundError:
        raise
    except (OSError, UnicodeDecodeError) as e:
        raise StorageError(f"Не удалось прочитать файл {filepath}: {e}")

    logger.info("Прочитано %d студентов из %s", len(students), filepath)
    return students


def write_students(filepath: PathLike, students: Sequence[Student]):
    """Перезаписывает файл: одна строка на студента, в текущем порядке."""
    try:
        with open(filepath, mode='w', encoding='utf-8', newline='') as file:
            for s in students:
                file.write(s.serialize() + "\n")
    except OSError as e:
        raise StorageError(f"Ошибка записи в файл {filepath}: {e}")

    logger.info("Сохранено %d студентов в %s", len(students), filepath)


def export_table_to_csv(filepath: PathLike, students: Sequence[Student]):
    """Экспортирует табличное представление студентов в отдельный CSV-файл."""
    try:
        build_table(students).to_csv(filepath, index=False, encoding='utf-8')
    except OSError as e:
        raise StorageError(f"Ошибка экспорта в файл {filepath}: {e}")

    logger.info("Таблица из %d студентов экспортирована в %s", len(students), filepath)
