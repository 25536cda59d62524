# tests/test_models.py
import pytest
from grade_tracker.models import Student
from grade_tracker.errors import ParseError

def test_student_creation():
    s = Student("  Тестов Тест ", [80, 90])
    assert s.name == "Тестов Тест"
    assert s.grades == [80, 90]

def test_student_rejects_non_integer_grade():
    with pytest.raises(ParseError):
        Student("Ошибка", [80, "90"])

def test_student_average():
    assert Student("С оценками", [90, 80, 70]).average == 80.0
    assert Student("Без оценок", []).average == 0

def test_student_highest_and_lowest():
    s = Student("Анна", [55, 90, 72])
    assert s.highest == 90
    assert s.lowest == 55

    empty = Student("Пусто", [])
    assert empty.highest == 0
    assert empty.lowest == 0

def test_serialize():
    assert Student("Bob", [100]).serialize() == "Bob,100"
    assert Student("Eve", []).serialize() == "Eve"
    assert Student("Alice", [90, 85, 77]).serialize() == "Alice,90,85,77"

def test_serialize_quotes_name_with_comma():
    s = Student("Smith, John", [90])
    assert s.serialize() == '"Smith, John",90'
    assert Student.deserialize(s.serialize()) == s

def test_deserialize():
    s = Student.deserialize("Alice,90,85,77\n")
    assert s.name == "Alice"
    assert s.grades == [90, 85, 77]

    assert Student.deserialize("Eve").grades == []

def test_serialize_deserialize_preserves_record():
    original = Student("Анна Котова", [100, 95, -3, 0])
    restored = Student.deserialize(original.serialize())
    assert restored.name == original.name
    assert restored.grades == original.grades

@pytest.mark.parametrize("line", ["Alice,90,abc", "Alice,90,", "Bob,9.5"])
def test_deserialize_invalid_grade(line):
    with pytest.raises(ParseError):
        Student.deserialize(line)

def test_student_str_representation(capsys):
    s = Student("Анна Котова", [100, 95])
    print(s)
    captured = capsys.readouterr()
    assert "Анна Котова" in captured.out
    assert "97.50" in captured.out
    assert "[100, 95]" in captured.out

def test_name_with_line_break_roundtrip():
    s = Student("Anna\nMaria", [90])
    assert Student.deserialize(s.serialize()) == s

def test_deserialize_unterminated_quote():
    with pytest.raises(ParseError):
        Student.deserialize('"Bob,90')
