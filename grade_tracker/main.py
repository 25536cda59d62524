# grade_tracker/main.py
"""Главный модуль: точка входа и консольный интерфейс (CLI) для журнала оценок."""
import argparse
import logging
import sys
import traceback
from typing import List, Optional

from . import io_utils, processing, errors
from .config import AppConfig, LOG_LEVELS
from .controller import Command, GradeTracker, Outcome

logger = logging.getLogger(__name__)


def print_menu():
    """Выводит на экран главное меню."""
    print("\n" + "="*30)
    print("      ЖУРНАЛ ОЦЕНОК")
    print("="*30)
    print("1. Показать всех студентов")
    print("2. Добавить студента")
    print("3. Изменить студента")
    print("4. Удалить студента")
    print("5. Показать сводку по классу")
    print("6. Сортировать и показать список")
    print("7. Экспорт таблицы в CSV")
    print("8. Экспорт ТОП-N студентов")
    print("0. Сохранить и выйти")
    print("="*30)


def print_table(tracker: GradeTracker):
    table = tracker.table()
    if table.empty:
        print("ℹ️ Список студентов пуст.")
        return
    # Нумерация с 1: по этим номерам выбирается запись для изменения и удаления.
    table.index = range(1, len(table) + 1)
    print(table.to_string())


def read_selection(prompt: str, count: int) -> Optional[int]:
    """Запрашивает номер записи (с 1) и возвращает индекс в списке (с нуля)."""
    raw = input(prompt).strip()
    if not raw:
        return None
    try:
        number = int(raw)
    except ValueError:
        raise errors.SelectionError(f"Номер записи должен быть числом, получено '{raw}'.")
    if not 1 <= number <= count:
        raise errors.SelectionError(f"Запись с номером {number} не найдена. Сначала выберите запись.")
    return number - 1


def report(outcome: Outcome):
    print(("✅ " if outcome.ok else "❌ ") + outcome.message)


def main_cli(tracker: GradeTracker):
    """Основной цикл консольного приложения."""
    report(tracker.start())

    while True:
        print_menu()
        choice = input("Выберите пункт меню: ").strip()

        try:
            if choice == '1':
                print_table(tracker)

            elif choice == '2':
                name = input("Введите имя студента: ")
                grades_text = input("Введите оценки через запятую: ")
                report(tracker.dispatch(Command.ADD, name=name, grades_text=grades_text))

            elif choice == '3':
                print_table(tracker)
                index = read_selection("Введите номер записи для изменения: ", len(tracker.store))
                current = tracker.store.get(index) if index is not None else None
                # Пустой ввод оставляет текущее значение.
                hint = f" [{current.name}]" if current else ""
                name = input(f"Введите имя студента{hint}: ") or (current.name if current else "")
                hint = f" [{current.grades_display}]" if current else ""
                grades_text = input(f"Введите оценки через запятую{hint}: ") or (current.grades_display if current else "")
                report(tracker.dispatch(Command.EDIT, index=index, name=name, grades_text=grades_text))

            elif choice == '4':
                print_table(tracker)
                index = read_selection("Введите номер записи для удаления: ", len(tracker.store))
                if index is not None and input("Вы уверены? (y/n): ").strip().lower() != 'y':
                    print("ℹ️ Удаление отменено.")
                    continue
                report(tracker.dispatch(Command.DELETE, index=index))

            elif choice == '5':
                report(tracker.dispatch(Command.SUMMARIZE))

            elif choice == '6':
                sort_key = input("Введите ключ сортировки (name, avg, highest): ").lower()
                try:
                    sorted_list = processing.sort_students(tracker.store.students, sort_key)
                    print(f"\n--- Студенты, отсортированные по '{sort_key}' ---")
                    for s in sorted_list:
                        print(s)
                except ValueError as ve:
                    print(f"❌ Ошибка сортировки: {ve}")

            elif choice == '7':
                filepath = input("Введите путь к файлу для экспорта: ")
                filepath = filepath.strip('"').strip("'")
                io_utils.export_table_to_csv(filepath, tracker.store.students)
                print(f"✅ Таблица экспортирована в {filepath}.")

            elif choice == '8':
                try:
                    n = int(input("Введите количество студентов для экспорта (ТОП-N): "))
                    if n < 1:
                        raise ValueError("N должно быть положительным числом.")
                    filepath = input("Введите путь к файлу для экспорта: ")
                    filepath = filepath.strip('"').strip("'")
                    top_students = processing.get_top_n_students(tracker.store.students, n)
                    io_utils.export_table_to_csv(filepath, top_students)
                    print(f"✅ ТОП-{n} студентов экспортирован в {filepath}.")
                except ValueError as e:
                    print(f"❌ Ошибка ввода: {e}")

            elif choice == '0':
                outcome = tracker.dispatch(Command.EXIT)
                report(outcome)
                if outcome.should_exit:
                    break

            else:
                print("❌ Неверный выбор. Пожалуйста, введите число от 0 до 8.")

        except errors.TrackerError as e:
            print(f"❌ Ошибка: {e}")
        except Exception as e:
            logger.exception("Непредвиденная ошибка")
            print(f"❌ Произошла непредвиденная ошибка: {e}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="grade-tracker", description="Журнал оценок студентов.")
    parser.add_argument("--cli", action="store_true", help="консольный режим вместо окна")
    parser.add_argument("--file", help="путь к файлу со списком студентов")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, help="уровень логирования")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = AppConfig.from_env().with_overrides(data_file=args.file, log_level=args.log_level)
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    tracker = GradeTracker(config=config)

    try:
        if args.cli:
            main_cli(tracker)
        else:
            from .gui import run_gui
            run_gui(tracker)
    except KeyboardInterrupt:
        print("\nПрограмма принудительно остановлена.")
        return 130
    except Exception:
        print("\n!!! КРИТИЧЕСКАЯ ОШИБКА ЗАПУСКА !!!")
        traceback.print_exc()
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
