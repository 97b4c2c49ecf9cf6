"""Data models for the terminal task list.

Exposes the Task dataclass and the Color tag shared by priority and
overdue status. Colors are abstract here; ANSI sequences are only
produced by the theme/table layer.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Union

DETAIL_WIDTH = 44


class Color(str, Enum):
    RED = "red"
    YELLOW = "yellow"
    GREEN = "green"
    BLUE = "blue"


# Unknown tags loaded from disk are kept as plain strings.
Tag = Union[Color, str]


@dataclass
class Task:
    """A single task.

    Fields:
        when: Date and time of day (minute precision, naive).
        priority: Color tag (red=critical, yellow=high, green=normal, blue=low).
        overdue: Color tag (red=past, yellow=today, green=future), set when
            the date was last assigned.
        details: Detail chunks, each at most DETAIL_WIDTH characters.
    """
    when: datetime
    priority: Tag
    overdue: Tag
    details: List[str] = field(default_factory=list)

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"Task(when={self.when:%Y-%m-%d %H:%M}, details={self.details!r})"


def split_chunks(text: str, width: int = DETAIL_WIDTH) -> List[str]:
    """Split text into fixed-width chunks by position only."""
    return [text[i:i + width] for i in range(0, len(text), width)]


def chunk_detail(line: str, width: int = DETAIL_WIDTH) -> List[str]:
    """Trim a detail line and split it into fixed-width chunks.

    Splitting is purely positional; words are never rewrapped.
    """
    return split_chunks(line.strip(), width)
