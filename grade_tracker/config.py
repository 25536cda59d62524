# grade_tracker/config.py
"""Конфигурация приложения: путь к файлу данных и уровень логирования.

Значения по умолчанию можно переопределить переменными окружения
GRADE_TRACKER_FILE и GRADE_TRACKER_LOG_LEVEL.
"""
from __future__ import annotations

import os
import warnings
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping, Optional

DEFAULT_DATA_FILE = "students.txt"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class AppConfig:
    """Значения конфигурации приложения."""

    data_file: Path = Path(DEFAULT_DATA_FILE)
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> AppConfig:
        environ = os.environ if environ is None else environ
        log_level = environ.get("GRADE_TRACKER_LOG_LEVEL", "INFO").upper()
        if log_level not in LOG_LEVELS:
            warnings.warn(
                f"Неизвестный уровень логирования GRADE_TRACKER_LOG_LEVEL={log_level!r}, используется INFO."
            )
            log_level = "INFO"
        return cls(
            data_file=Path(environ.get("GRADE_TRACKER_FILE", DEFAULT_DATA_FILE)),
            log_level=log_level,
        )

    def with_overrides(self, data_file=None, log_level=None) -> AppConfig:
        """Возвращает копию с параметрами командной строки поверх окружения."""
        changes = {}
        if data_file:
            changes["data_file"] = Path(data_file)
        if log_level:
            changes["log_level"] = log_level.upper()
        return replace(self, **changes)
