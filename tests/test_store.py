# tests/test_store.py
import pytest
from grade_tracker.models import Student
from grade_tracker.store import StudentStore
from grade_tracker.errors import ParseError, SelectionError, StorageError

def test_add_appends_without_duplicate_check(store):
    store.add(Student("Иванов Иван", [78, 85, 90]))
    assert len(store) == 4
    assert store.get(3).name == "Иванов Иван"

def test_update_replaces_record(store):
    store.update(1, Student("Новый", [100]))
    assert [s.name for s in store] == ["Иванов Иван", "Новый", "Сидорова Анна"]

def test_delete_shifts_records(store):
    removed = store.delete(0)
    assert removed.name == "Иванов Иван"
    assert [s.name for s in store] == ["Петров Петр", "Сидорова Анна"]

@pytest.mark.parametrize("index", [3, -1, 100])
def test_update_and_delete_out_of_range(store, index):
    before = list(store.students)
    with pytest.raises(SelectionError):
        store.update(index, Student("X", []))
    # SelectionError также является IndexError
    with pytest.raises(IndexError):
        store.delete(index)
    assert list(store.students) == before

def test_class_average():
    store = StudentStore([Student("A", [90, 80]), Student("B", [70])])
    assert store.class_average() == 80.0
    assert StudentStore().class_average() == 0.0

def test_students_view_is_read_only(store):
    assert isinstance(store.students, tuple)

def test_load_missing_file_leaves_store_empty(tmp_path):
    store = StudentStore()
    assert store.load(tmp_path / "missing.txt") == 0
    assert len(store) == 0

def test_save_then_load(store, tmp_path):
    filepath = tmp_path / "students.txt"
    store.save(filepath)

    loaded = StudentStore()
    assert loaded.load(filepath) == 3
    assert list(loaded) == list(store)

def test_load_malformed_line_is_atomic(tmp_path):
    filepath = tmp_path / "students.txt"
    filepath.write_text("Alice,90,85\nBob,abc\nCarol,70\n", encoding="utf-8")

    store = StudentStore([Student("Existing", [50])])
    with pytest.raises(ParseError):
        store.load(filepath)
    assert [s.name for s in store] == ["Existing"]

def test_save_failure_keeps_store(store, tmp_path):
    with pytest.raises(StorageError):
        store.save(tmp_path)
    assert len(store) == 3
