"""Command-line interface loop for the task list.

One prompt line is printed, one line of input is read. Each field prompt
retries on its own until valid; nothing is committed to the store until
every field of an operation has been collected.
"""
import logging
from datetime import date, datetime
from pathlib import Path
from typing import Callable, List, Optional
import click
from models import Color, chunk_detail
from status import parse_priority
from storage import Storage
from table import render_table
from tasklist import TaskList
import theme
from validators import parse_date, parse_time

logger = logging.getLogger(__name__)

ACTION_PROMPT = "Input an action (add, print, edit, delete, end):"
PRIORITY_PROMPT = "Input the task priority (C, H, N, L):"
DATE_PROMPT = "Input the date (yyyy-mm-dd):"
TIME_PROMPT = "Input the time (hh:mm):"
DETAILS_PROMPT = "Input a new task (enter a blank line to end):"
FIELD_PROMPT = "Input a field to edit (priority, date, time, task):"

# user-facing field name -> store field
EDIT_FIELDS = {
    'priority': 'priority',
    'date': 'date',
    'time': 'time',
    'task': 'details',
}


class CLI:
    def __init__(self, store: TaskList, tasks_file: Path,
                 read_line: Callable[[], str] = input):
        self.store: TaskList = store
        self.tasks_file: Path = tasks_file
        self._read_line = read_line

    def run(self) -> None:
        """Main loop; returns after 'end', end of input or Ctrl-C.

        The store is saved on every way out of the loop.
        """
        try:
            while True:
                line = self._ask(ACTION_PROMPT)
                if line == 'end':
                    break
                self._handle_command(line)
        except (KeyboardInterrupt, EOFError):
            logger.debug("Input closed; shutting down")
        click.echo("Tasklist exiting!")
        Storage.save_tasks(self.store, self.tasks_file)

    # -------------------- command dispatch --------------------
    def _handle_command(self, line: str) -> None:
        logger.debug("Action: %r", line)
        if line == 'add':
            self._add()
        elif line == 'print':
            self._print()
        elif line == 'edit':
            self._edit()
        elif line == 'delete':
            self._delete()
        else:
            click.echo("The input action is invalid")

    # -------------------- user-interactive flows --------------------
    def _ask(self, prompt: str) -> str:
        click.echo(prompt)
        return self._read_line()

    def _print(self) -> None:
        click.echo(render_table(self.store), color=theme.ENABLED)

    def _add(self) -> None:
        priority = self._ask_priority()
        day = self._ask_date()
        when = self._ask_time(day)
        details = self._ask_details()
        if self.store.add(priority, when, details) is None:
            logger.debug("Blank task discarded")

    def _delete(self) -> None:
        self._print()
        if self.store.is_empty():
            return
        index = self._ask_task_number()
        self.store.remove_at(index)
        click.echo("The task is deleted")

    def _edit(self) -> None:
        self._print()
        if self.store.is_empty():
            return
        index = self._ask_task_number()
        field = self._ask_field()
        task = self.store.get(index)
        if field == 'priority':
            value = self._ask_priority()
        elif field == 'date':
            value = self._ask_date()
        elif field == 'time':
            value = self._ask_time(task.when.date())
        else:
            value = self._ask_details()
            if not value:
                # A blank replacement would leave the task without details.
                return
        self.store.edit_at(index, field, value)
        click.echo("The task is changed")

    # ---- field prompts ----
    def _ask_task_number(self) -> int:
        while True:
            raw = self._ask(f"Input the task number (1-{len(self.store)}):").strip()
            try:
                index = int(raw)
            except ValueError:
                index = 0
            if self.store.valid_index(index):
                return index
            click.echo("Invalid task number")

    def _ask_field(self) -> str:
        while True:
            raw = self._ask(FIELD_PROMPT)
            if raw in EDIT_FIELDS:
                return EDIT_FIELDS[raw]
            click.echo("Invalid field")

    def _ask_priority(self) -> Color:
        while True:
            priority = parse_priority(self._ask(PRIORITY_PROMPT))
            if priority is not None:
                return priority

    def _ask_date(self) -> date:
        while True:
            day = parse_date(self._ask(DATE_PROMPT))
            if day is not None:
                return day
            click.echo("The input date is invalid")

    def _ask_time(self, day: date) -> datetime:
        while True:
            when = parse_time(self._ask(TIME_PROMPT), day)
            if when is not None:
                return when
            click.echo("The input time is invalid")

    def _ask_details(self) -> List[str]:
        chunks: List[str] = []
        click.echo(DETAILS_PROMPT)
        while True:
            line = self._read_line()
            if line == '':
                break
            if not line.strip():
                click.echo("The task is blank")
                break
            chunks.extend(chunk_detail(line))
        return chunks


def build_cli(tasks_file: Path, clock: Optional[Callable[[], date]] = None,
              read_line: Callable[[], str] = input) -> CLI:
    """Hydrate a store from tasks_file and wrap it in a CLI."""
    store = TaskList(clock=clock) if clock else TaskList()
    for task in Storage.load_tasks(tasks_file):
        store.add_task(task)
    return CLI(store, tasks_file, read_line=read_line)


__all__ = ['CLI', 'build_cli']
