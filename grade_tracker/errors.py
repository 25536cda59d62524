# grade_tracker/errors.py
"""Модуль для определения пользовательских исключений приложения."""
from typing import Optional


class TrackerError(Exception):
    """Базовый класс для всех исключений в этом приложении."""
    pass


class ParseError(TrackerError, ValueError):
    """Некорректная оценка во вводе или испорченная строка в файле."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        super().__init__(message)
        self.line_number = line_number


class SelectionError(TrackerError, IndexError):
    """Запись не выбрана, или индекс выходит за пределы списка."""
    pass


class StorageError(TrackerError):
    """Исключение, связанное с ошибками файловых операций."""
    pass
