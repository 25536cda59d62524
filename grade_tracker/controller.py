# grade_tracker/controller.py
"""Контроллер: команды пользователя и их выполнение над хранилищем.

Интерфейс (графический или консольный) только вызывает dispatch() и
показывает полученное сообщение; список студентов он не изменяет.
"""
import enum
import logging
from dataclasses import dataclass
from typing import Optional

import pandas as pd

from . import processing
from .config import AppConfig
from .errors import TrackerError, SelectionError
from .models import Student
from .store import StudentStore

logger = logging.getLogger(__name__)


class Command(enum.Enum):
    ADD = "add"
    EDIT = "edit"
    DELETE = "delete"
    SUMMARIZE = "summarize"
    EXIT = "exit"


@dataclass(frozen=True)
class Outcome:
    """Результат команды, который интерфейс показывает пользователю."""

    ok: bool
    message: str
    should_exit: bool = False


class GradeTracker:
    def __init__(self, store: Optional[StudentStore] = None, config: Optional[AppConfig] = None):
        self.store = store if store is not None else StudentStore()
        self.config = config if config is not None else AppConfig()
        self._handlers = {
            Command.ADD: self._add,
            Command.EDIT: self._edit,
            Command.DELETE: self._delete,
            Command.SUMMARIZE: self._summarize,
            Command.EXIT: self._exit,
        }

    def start(self) -> Outcome:
        """Загружает сохранённый список при запуске."""
        try:
            count = self.store.load(self.config.data_file)
        except TrackerError as e:
            logger.warning("Загрузка %s не удалась: %s", self.config.data_file, e)
            return Outcome(False, f"Ошибка загрузки файла студентов: {e}")
        return Outcome(True, f"Загружено студентов: {count}.")

    def dispatch(self, command: Command, **kwargs) -> Outcome:
        """Выполняет команду; любая ошибка приложения возвращается как сообщение."""
        handler = self._handlers[command]
        try:
            return handler(**kwargs)
        except TrackerError as e:
            logger.warning("Команда %s отклонена: %s", command.value, e)
            return Outcome(False, str(e))

    def table(self) -> pd.DataFrame:
        return processing.build_table(self.store.students)

    @staticmethod
    def _require_selection(index: Optional[int]) -> int:
        if index is None:
            raise SelectionError("Сначала выберите запись.")
        return index

    def _add(self, name: str, grades_text: str) -> Outcome:
        student = Student(name, processing.parse_grades(grades_text))
        self.store.add(student)
        return Outcome(True, f"Студент {student.name} добавлен.")

    def _edit(self, index: Optional[int], name: str, grades_text: str) -> Outcome:
        index = self._require_selection(index)
        # Разбор до изменения: при ошибке запись остаётся прежней.
        student = Student(name, processing.parse_grades(grades_text))
        self.store.update(index, student)
        return Outcome(True, f"Запись студента {student.name} обновлена.")

    def _delete(self, index: Optional[int]) -> Outcome:
        removed = self.store.delete(self._require_selection(index))
        return Outcome(True, f"Студент {removed.name} удалён.")

    def _summarize(self) -> Outcome:
        stats = processing.get_group_statistics(self.store.students)
        if not stats:
            return Outcome(True, "Список студентов пуст.")
        lines = [
            f"Средний балл по классу: {stats['class_average']:.2f}",
            f"Всего студентов: {stats['total_students']}",
            f"Высшая оценка: {stats['highest_grade']}, низшая оценка: {stats['lowest_grade']}",
            f"Лучший студент: {stats['best_student'].name} (ср. балл: {stats['best_student'].average:.2f})",
            f"Худший студент: {stats['worst_student'].name} (ср. балл: {stats['worst_student'].average:.2f})",
        ]
        return Outcome(True, "\n".join(lines))

    def _exit(self) -> Outcome:
        self.store.save(self.config.data_file)
        return Outcome(True, "Данные сохранены. До свидания!", should_exit=True)
