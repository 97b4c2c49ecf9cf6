"""Persistence helpers (encode/decode/load/save) for the task list.

On-disk layout is a compact JSON array, one record per task:

    [{"date":"2023-05-01","time":"9:30","priority":"\\u001b[101m \\u001b[0m","overdue":"...","details":["..."]}]

Dates are zero-padded, times are not ("9:5"); tags are stored as the
ANSI glyph string. All three are kept that way so files stay readable by
the earlier tool. In memory tags are Color values; strings that are not
a known glyph are read and written back verbatim.
"""
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Union
from config import DEFAULT_FILE
from models import Color, Tag, Task, split_chunks
from tasklist import TaskList

logger = logging.getLogger(__name__)

TaskEntry = Dict[str, Any]

TAG_STRINGS: Dict[Color, str] = {
    Color.RED: '\u001b[101m \u001b[0m',
    Color.YELLOW: '\u001b[103m \u001b[0m',
    Color.GREEN: '\u001b[102m \u001b[0m',
    Color.BLUE: '\u001b[104m \u001b[0m',
}
GLYPH_TAGS: Dict[str, Color] = {s: c for c, s in TAG_STRINGS.items()}


def encode_tag(tag: Tag) -> str:
    return TAG_STRINGS[tag] if isinstance(tag, Color) else str(tag)


def decode_tag(raw: str) -> Tag:
    if raw in GLYPH_TAGS:
        return GLYPH_TAGS[raw]
    # plain colour names are accepted too
    try:
        return Color(raw)
    except ValueError:
        return raw


def encode_task(task: Task) -> TaskEntry:
    when = task.when
    return {
        'date': when.date().isoformat(),
        'time': f'{when.hour}:{when.minute}',
        'priority': encode_tag(task.priority),
        'overdue': encode_tag(task.overdue),
        'details': list(task.details),
    }


def decode_task(entry: TaskEntry) -> Task:
    """Rebuild a Task from a record; raises ValueError/KeyError/TypeError on bad data.

    Details are re-chunked so every stored chunk fits the table; a record
    with no details decodes to a Task with an empty list.
    """
    year, month, day = (int(part) for part in entry['date'].split('-'))
    hour, minute = (int(part) for part in entry['time'].split(':'))
    details = entry['details']
    if not isinstance(details, list):
        raise TypeError('details must be a list')
    return Task(
        when=datetime(year, month, day, hour, minute),
        priority=decode_tag(entry['priority']),
        overdue=decode_tag(entry['overdue']),
        details=[c for d in details for c in split_chunks(str(d))],
    )


def dumps(store: TaskList) -> str:
    return json.dumps([encode_task(t) for _, t in store.entries()],
                      separators=(',', ':'), ensure_ascii=False)


class Storage:
    @staticmethod
    def load_tasks(path: Union[str, Path] = DEFAULT_FILE) -> List[Task]:
        """Load tasks from disk.

        Missing or empty file -> no tasks. Malformed or unreadable file ->
        no tasks, with a warning logged. Blank tasks are dropped.
        """
        path = Path(path)
        if not path.exists():
            logger.debug('No task file at %s', path)
            return []
        try:
            text = path.read_text(encoding='utf-8')
            if not text.strip():
                return []
            data = json.loads(text)
            if not isinstance(data, list):
                raise TypeError('top-level value must be an array')
            decoded = [decode_task(entry) for entry in data]
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
            logger.warning('Ignoring unreadable task file %s: %s', path, e)
            return []
        tasks = [t for t in decoded if t.details]
        if len(tasks) != len(decoded):
            logger.info('Dropped %d blank tasks from %s', len(decoded) - len(tasks), path)
        logger.debug('Loaded %d tasks from %s', len(tasks), path)
        return tasks

    @staticmethod
    def save_tasks(store: TaskList, path: Union[str, Path] = DEFAULT_FILE) -> bool:
        """Persist tasks; an empty store writes nothing. Returns True if written."""
        if store.is_empty():
            logger.debug('Nothing to save; leaving %s untouched', path)
            return False
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(dumps(store), encoding='utf-8')
        except OSError as e:
            logger.error('Could not save tasks to %s: %s', path, e)
            return False
        logger.debug('Saved %d tasks to %s', len(store), path)
        return True
