# grade_tracker/gui.py
"""Графический интерфейс на Tkinter: таблица студентов и пять кнопок действий."""
import logging
import tkinter as tk
from tkinter import ttk, messagebox
from typing import Optional, Tuple

from .controller import Command, GradeTracker, Outcome
from .processing import TABLE_COLUMNS

logger = logging.getLogger(__name__)


class StudentDialog:
    """Модальное окно с полями имени и оценок. result равен None, если отменено."""

    def __init__(self, parent: tk.Misc, title: str, name: str = "", grades: str = ""):
        self.result: Optional[Tuple[str, str]] = None

        self.win = tk.Toplevel(parent)
        self.win.title(title)
        self.win.resizable(False, False)
        self.win.transient(parent)

        tk.Label(self.win, text="Имя студента:").grid(row=0, column=0, padx=10, pady=5, sticky="e")
        self.ent_name = tk.Entry(self.win, width=30)
        self.ent_name.insert(0, name)
        self.ent_name.grid(row=0, column=1, padx=10, pady=5)

        tk.Label(self.win, text="Оценки (через запятую):").grid(row=1, column=0, padx=10, pady=5, sticky="e")
        self.ent_grades = tk.Entry(self.win, width=30)
        self.ent_grades.insert(0, grades)
        self.ent_grades.grid(row=1, column=1, padx=10, pady=5)

        buttons = tk.Frame(self.win)
        buttons.grid(row=2, column=0, columnspan=2, pady=10)
        tk.Button(buttons, text="OK", width=10, command=self._ok).pack(side="left", padx=5)
        tk.Button(buttons, text="Отмена", width=10, command=self.win.destroy).pack(side="left", padx=5)

        self.win.bind("<Return>", lambda _e: self._ok())
        self.win.bind("<Escape>", lambda _e: self.win.destroy())
        self.ent_name.focus_set()
        self.win.grab_set()
        parent.wait_window(self.win)

    def _ok(self):
        self.result = (self.ent_name.get(), self.ent_grades.get())
        self.win.destroy()


class GradeTrackerApp:
    def __init__(self, root: tk.Tk, tracker: GradeTracker):
        self.root = root
        self.tracker = tracker
        self.root.title("Student Grade Tracker")
        self.root.geometry("650x400")

        frame = tk.Frame(root)
        frame.pack(fill="both", expand=True, padx=10, pady=10)

        self.tree = ttk.Treeview(frame, columns=TABLE_COLUMNS, show="headings", selectmode="browse")
        for col in TABLE_COLUMNS:
            self.tree.heading(col, text=col)
            self.tree.column(col, width=200 if col == "Grades" else 100, anchor="w")
        scroll = ttk.Scrollbar(frame, orient="vertical", command=self.tree.yview)
        self.tree.configure(yscrollcommand=scroll.set)
        self.tree.pack(side="left", fill="both", expand=True)
        scroll.pack(side="right", fill="y")

        buttons = tk.Frame(root)
        buttons.pack(pady=10)
        for text, command in (
            ("Add Student", self.on_add),
            ("Edit Student", self.on_edit),
            ("Delete Student", self.on_delete),
            ("Show Summary", self.on_summary),
            ("Save & Exit", self.on_exit),
        ):
            tk.Button(buttons, text=text, command=command, width=14).pack(side="left", padx=5)

    # ---------- Helpers ----------
    def refresh(self):
        self.tree.delete(*self.tree.get_children())
        for row in self.tracker.table().itertuples(index=False):
            self.tree.insert("", "end", values=[str(value) for value in row])

    def selected_index(self) -> Optional[int]:
        selection = self.tree.selection()
        if not selection:
            return None
        return self.tree.index(selection[0])

    def notify(self, outcome: Outcome, title: str):
        if outcome.ok:
            messagebox.showinfo(title, outcome.message, parent=self.root)
        else:
            messagebox.showerror(title, outcome.message, parent=self.root)

    # ---------- Actions ----------
    def on_add(self):
        dialog = StudentDialog(self.root, "Add Student")
        if dialog.result is None:
            return
        name, grades_text = dialog.result
        outcome = self.tracker.dispatch(Command.ADD, name=name, grades_text=grades_text)
        if not outcome.ok:
            self.notify(outcome, "Add Student")
        self.refresh()

    def on_edit(self):
        index = self.selected_index()
        if index is None:
            self.notify(self.tracker.dispatch(Command.EDIT, index=None, name="", grades_text=""), "Edit Student")
            return
        current = self.tracker.store.get(index)
        dialog = StudentDialog(self.root, "Edit Student", current.name, current.grades_display)
        if dialog.result is None:
            return
        name, grades_text = dialog.result
        outcome = self.tracker.dispatch(Command.EDIT, index=index, name=name, grades_text=grades_text)
        if not outcome.ok:
            self.notify(outcome, "Edit Student")
        self.refresh()

    def on_delete(self):
        index = self.selected_index()
        if index is not None and not messagebox.askyesno("Delete Student", "Вы уверены?", parent=self.root):
            return
        outcome = self.tracker.dispatch(Command.DELETE, index=index)
        if not outcome.ok:
            self.notify(outcome, "Delete Student")
        self.refresh()

    def on_summary(self):
        self.notify(self.tracker.dispatch(Command.SUMMARIZE), "Summary")

    def on_exit(self):
        outcome = self.tracker.dispatch(Command.EXIT)
        self.notify(outcome, "Save & Exit")
        if outcome.should_exit:
            self.root.destroy()


def run_gui(tracker: GradeTracker):
    root = tk.Tk()
    app = GradeTrackerApp(root, tracker)
    outcome = tracker.start()
    if not outcome.ok:
        app.notify(outcome, "Student Grade Tracker")
    app.refresh()
    logger.info("Окно приложения открыто")
    root.mainloop()
