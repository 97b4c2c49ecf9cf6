"""Fixed-width table rendering for the task store.

Columns: N (2), Date (yyyy-mm-dd), Time (hh:mm), P and D glyphs (1 cell
each) and the 44-character task cell. Only the first chunk row of a task
carries the index/date/time/glyphs; a rule line follows each task.
"""
from typing import List
from models import DETAIL_WIDTH, Task
from tasklist import TaskList
import theme

NO_TASKS = "No tasks have been input"

RULE = "+----+------------+-------+---+---+" + "-" * DETAIL_WIDTH + "+"
HEADER = "| N  |    Date    | Time  | P | D |" + " " * 19 + "Task" + " " * 21 + "|"
BLANK_CELLS = "|    |            |       |   |   |"


def _detail_cell(chunk: str) -> str:
    return f"{chunk:<{DETAIL_WIDTH}}|"


def _task_lines(index: int, task: Task) -> List[str]:
    when = task.when
    lead = (f"| {index:<2} | {when.year}-{when.month:02d}-{when.day:02d} "
            f"| {when.hour:02d}:{when.minute:02d} "
            f"| {theme.glyph(task.priority)} | {theme.glyph(task.overdue)} |")
    lines: List[str] = []
    for n, chunk in enumerate(task.details):
        lines.append((lead if n == 0 else BLANK_CELLS) + _detail_cell(chunk))
    lines.append(RULE)
    return lines


def render_lines(store: TaskList) -> List[str]:
    """Return table lines, or an empty list when there are no tasks."""
    if store.is_empty():
        return []
    lines = [RULE, HEADER, RULE]
    for index, task in store.entries():
        lines.extend(_task_lines(index, task))
    return lines


def render_table(store: TaskList) -> str:
    lines = render_lines(store)
    if not lines:
        return NO_TASKS
    return "\n".join(lines)
