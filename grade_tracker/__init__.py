"""Журнал оценок студентов: список записей, статистика и хранение в текстовом файле."""
