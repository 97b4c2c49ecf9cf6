"""Priority and overdue classification."""
from datetime import date, datetime, timezone
from typing import Dict, Optional
from models import Color

PRIORITY_LETTERS: Dict[str, Color] = {
    'C': Color.RED,
    'H': Color.YELLOW,
    'N': Color.GREEN,
    'L': Color.BLUE,
}


def parse_priority(text: str) -> Optional[Color]:
    return PRIORITY_LETTERS.get(text.strip().upper())


def today_utc() -> date:
    return datetime.now(timezone.utc).date()


def classify_overdue(task_date: date, today: date) -> Color:
    """Green when not yet due, yellow when due today, red when past."""
    days_until = (task_date - today).days
    if days_until > 0:
        return Color.GREEN
    if days_until < 0:
        return Color.RED
    return Color.YELLOW
