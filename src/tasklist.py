"""Task store: ordered tasks, 1-based positions, and field edits.

Positions are not stored on tasks; they are derived from list order each
time entries() is walked, so deleting #k shifts later tasks down by one.
"""
from datetime import date, datetime
from typing import Callable, Iterator, List, Optional, Tuple
from models import Tag, Task
from status import classify_overdue, today_utc

FIELDS: Tuple[str, ...] = ("priority", "date", "time", "details")


class TaskList:
    def __init__(self, tasks: Optional[List[Task]] = None,
                 clock: Callable[[], date] = today_utc):
        self.tasks: List[Task] = list(tasks) if tasks else []
        self._clock = clock

    # -------------------- queries --------------------
    def __len__(self) -> int:
        return len(self.tasks)

    def is_empty(self) -> bool:
        return not self.tasks

    def entries(self) -> Iterator[Tuple[int, Task]]:
        """Yield (position, task) pairs in store order, starting at 1."""
        return enumerate(self.tasks, start=1)

    def valid_index(self, index: int) -> bool:
        return 1 <= index <= len(self.tasks)

    def get(self, index: int) -> Task:
        if not self.valid_index(index):
            raise IndexError(f"No task #{index}")
        return self.tasks[index - 1]

    # -------------------- task operations --------------------
    def add(self, priority: Tag, when: datetime, details: List[str],
            today: Optional[date] = None) -> Optional[Task]:
        """Create and append a task; blank tasks (no details) are not stored."""
        if not details:
            return None
        today = today or self._clock()
        task = Task(
            when=when,
            priority=priority,
            overdue=classify_overdue(when.date(), today),
            details=list(details),
        )
        self.tasks.append(task)
        return task

    def add_task(self, task: Task) -> None:
        """Append a task read from disk as-is; its overdue tag is not recomputed."""
        if not task.details:
            raise ValueError("Details must not be empty")
        self.tasks.append(task)

    def remove_at(self, index: int) -> Task:
        task = self.get(index)
        del self.tasks[index - 1]
        return task

    def edit_at(self, index: int, field: str, value, today: Optional[date] = None) -> Task:
        """Replace one attribute of task #index.

        date edits keep the time of day and recompute overdue; time edits
        keep the calendar date. value is a Tag for priority, a date for
        date, a datetime (or time-bearing object) for time, and a list of
        chunks for details.
        """
        if field not in FIELDS:
            raise ValueError(f"Unknown field: {field}")
        task = self.get(index)
        if field == "priority":
            task.priority = value
        elif field == "date":
            task.when = task.when.replace(year=value.year, month=value.month, day=value.day)
            task.overdue = classify_overdue(task.when.date(), today or self._clock())
        elif field == "time":
            task.when = task.when.replace(hour=value.hour, minute=value.minute)
        else:
            if not value:
                raise ValueError("Details must not be empty")
            task.details = list(value)
        return task
