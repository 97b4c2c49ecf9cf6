# tests/test_cli.py

from __future__ import annotations

import json
from datetime import date
from pathlib import Path

import pytest
from click.testing import CliRunner

import main as main_module
from cli import ACTION_PROMPT, build_cli
from fakes import scripted
from models import Color

TODAY = date(2023, 1, 10)


def run_session(path: Path, *lines: str):
    app = build_cli(path, clock=lambda: TODAY, read_line=scripted(*lines))
    app.run()
    return app


def test_add_print_end_persists(tmp_path: Path, capsys) -> None:
    path = tmp_path / "tasklist.json"
    app = run_session(path, "add", "h", "2023-01-01", "9:5", "Buy milk", "", "print", "end")
    out = capsys.readouterr().out

    assert "| 1  | 2023-01-01 | 09:05 | Y | R |Buy milk" in out
    assert out.rstrip().endswith("Tasklist exiting!")
    assert len(app.store) == 1
    (record,) = json.loads(path.read_text(encoding="utf-8"))
    assert record == {
        "date": "2023-01-01",
        "time": "9:5",
        "priority": "\u001b[103m \u001b[0m",
        "overdue": "\u001b[101m \u001b[0m",
        "details": ["Buy milk"],
    }


def test_add_reprompts_each_field(tmp_path: Path, capsys) -> None:
    app = run_session(
        tmp_path / "t.json",
        "add",
        "x", "c",
        "2023-02-30", "when 2023-2-28 ok",
        "25:00", "7:45",
        "first line", "x" * 90, "",
        "end",
    )
    out = capsys.readouterr().out
    assert out.count("Input the task priority (C, H, N, L):") == 2
    assert out.count("The input date is invalid") == 1
    assert out.count("The input time is invalid") == 1
    task = app.store.get(1)
    assert task.priority is Color.RED
    assert (task.when.month, task.when.day, task.when.hour, task.when.minute) == (2, 28, 7, 45)
    assert [len(c) for c in task.details] == [10, 44, 44, 2]


def test_blank_task_is_discarded(tmp_path: Path, capsys) -> None:
    path = tmp_path / "t.json"
    app = run_session(path, "add", "n", "2023-01-01", "10:00", "   ", "print", "end")
    out = capsys.readouterr().out
    assert "The task is blank" in out
    assert "No tasks have been input" in out
    assert app.store.is_empty()
    assert not path.exists()


def test_blank_line_after_details_keeps_them(tmp_path: Path, capsys) -> None:
    app = run_session(tmp_path / "t.json", "add", "n", "2023-01-01", "10:00", "keep me", "  ", "end")
    assert "The task is blank" in capsys.readouterr().out
    assert app.store.get(1).details == ["keep me"]


def test_invalid_action(tmp_path: Path, capsys) -> None:
    run_session(tmp_path / "t.json", "list", "end")
    out = capsys.readouterr().out
    assert "The input action is invalid" in out
    assert out.count(ACTION_PROMPT) == 2


def test_print_empty_store(tmp_path: Path, capsys) -> None:
    run_session(tmp_path / "t.json", "print", "end")
    lines = capsys.readouterr().out.splitlines()
    assert lines == [ACTION_PROMPT, "No tasks have been input", ACTION_PROMPT, "Tasklist exiting!"]


@pytest.mark.parametrize("action", ["edit", "delete"])
def test_edit_and_delete_short_circuit_on_empty(tmp_path: Path, capsys, action) -> None:
    run_session(tmp_path / "t.json", action, "end")
    out = capsys.readouterr().out
    assert "No tasks have been input" in out
    assert "Input the task number" not in out


def _seed(path: Path, *details: str) -> None:
    records = [
        {"date": "2023-01-0%d" % (n + 1), "time": "8:0", "priority": "green", "overdue": "red", "details": [d]}
        for n, d in enumerate(details)
    ]
    path.write_text(json.dumps(records), encoding="utf-8")


def test_delete_retries_number_then_shifts(tmp_path: Path, capsys) -> None:
    path = tmp_path / "t.json"
    _seed(path, "a", "b", "c")
    app = run_session(path, "delete", "0", "four", "4", "2", "end")
    out = capsys.readouterr().out
    assert out.count("Input the task number (1-3):") == 4
    assert out.count("Invalid task number") == 3
    assert "The task is deleted" in out
    assert [t.details[0] for _, t in app.store.entries()] == ["a", "c"]
    saved = json.loads(path.read_text(encoding="utf-8"))
    assert [r["details"] for r in saved] == [["a"], ["c"]]


def test_edit_fields(tmp_path: Path, capsys) -> None:
    path = tmp_path / "t.json"
    _seed(path, "a", "b")
    app = run_session(
        path,
        "edit", "2", "owner", "date", "2023-03-01",
        "edit", "2", "time", "23:15",
        "edit", "1", "priority", "l",
        "edit", "1", "task", "renamed", "",
        "end",
    )
    out = capsys.readouterr().out
    assert out.count("Invalid field") == 1
    assert out.count("The task is changed") == 4
    first, second = app.store.get(1), app.store.get(2)
    assert first.priority is Color.BLUE
    assert first.details == ["renamed"]
    assert (second.when.year, second.when.month, second.when.day) == (2023, 3, 1)
    assert (second.when.hour, second.when.minute) == (23, 15)
    assert second.overdue is Color.GREEN


def test_edit_blank_details_leaves_task(tmp_path: Path, capsys) -> None:
    path = tmp_path / "t.json"
    _seed(path, "a")
    app = run_session(path, "edit", "1", "task", " ", "end")
    out = capsys.readouterr().out
    assert "The task is blank" in out
    assert "The task is changed" not in out
    assert app.store.get(1).details == ["a"]


def test_end_of_input_saves(tmp_path: Path, capsys) -> None:
    path = tmp_path / "t.json"
    run_session(path, "add", "c", "2023-01-10", "12:00", "eof", "")
    assert "Tasklist exiting!" in capsys.readouterr().out
    assert json.loads(path.read_text(encoding="utf-8"))[0]["overdue"] == "\u001b[103m \u001b[0m"


def test_main_command(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(main_module, "setup_logging", lambda level: None)
    path = tmp_path / "tasklist.json"
    path.write_text("{broken", encoding="utf-8")
    result = CliRunner().invoke(
        main_module.main,
        input="print\nbogus\nend\n",
        env={"TASKLIST_FILE": str(path)},
    )
    assert result.exit_code == 0
    assert "No tasks have been input" in result.output
    assert "The input action is invalid" in result.output
    assert "Tasklist exiting!" in result.output
    assert path.read_text(encoding="utf-8") == "{broken"


def test_tab_only_line_counts_as_blank(tmp_path: Path, capsys) -> None:
    app = run_session(tmp_path / "t.json", "add", "n", "2023-01-01", "10:00", "\t\t", "end")
    assert "The task is blank" in capsys.readouterr().out
    assert app.store.is_empty()


def test_blank_record_on_disk_does_not_shift_numbers(tmp_path: Path, capsys) -> None:
    path = tmp_path / "t.json"
    records = [
        {"date": "2023-01-01", "time": "9:0", "priority": "red", "overdue": "red", "details": []},
        {"date": "2023-01-02", "time": "9:0", "priority": "red", "overdue": "red", "details": ["b"]},
    ]
    path.write_text(json.dumps(records), encoding="utf-8")
    run_session(path, "delete", "1", "end")
    out = capsys.readouterr().out
    assert "| 1  | 2023-01-02 | 09:00 | R | R |b" in out
    assert "Input the task number (1-1):" in out
    assert "The task is deleted" in out
