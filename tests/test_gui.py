# tests/test_gui.py
import pytest

tk = pytest.importorskip("tkinter")

from grade_tracker.gui import GradeTrackerApp


@pytest.fixture
def root():
    try:
        root = tk.Tk()
    except tk.TclError:
        pytest.skip("нет дисплея для Tkinter")
    root.withdraw()
    yield root
    root.destroy()

def test_refresh_fills_table(root, tracker):
    app = GradeTrackerApp(root, tracker)
    app.refresh()

    # ttk возвращает числовые значения как int
    rows = [[str(v) for v in app.tree.item(item, "values")] for item in app.tree.get_children()]
    assert len(rows) == 3
    assert rows[2] == ["Сидорова Анна", "65, 70", "67.50", "70", "65"]

def test_selected_index(root, tracker):
    app = GradeTrackerApp(root, tracker)
    app.refresh()
    assert app.selected_index() is None

    app.tree.selection_set(app.tree.get_children()[1])
    assert app.selected_index() == 1

def test_delete_without_selection_shows_error(root, tracker, monkeypatch):
    shown = []
    monkeypatch.setattr("grade_tracker.gui.messagebox.showerror", lambda title, message, **kw: shown.append(message))
    app = GradeTrackerApp(root, tracker)
    app.refresh()

    app.on_delete()
    assert shown == ["Сначала выберите запись."]
    assert len(tracker.store) == 3
