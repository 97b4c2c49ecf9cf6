# tests/conftest.py

from __future__ import annotations

from datetime import date, datetime

import pytest

import theme
from models import Color
from tasklist import TaskList

TODAY = date(2023, 1, 10)


@pytest.fixture(autouse=True)
def no_color(monkeypatch: pytest.MonkeyPatch) -> None:
    """Render monochrome glyphs so expected tables are plain text."""
    monkeypatch.setattr(theme, "ENABLED", False)


@pytest.fixture()
def store() -> TaskList:
    return TaskList(clock=lambda: TODAY)


@pytest.fixture()
def filled_store(store: TaskList) -> TaskList:
    store.add(Color.RED, datetime(2023, 1, 1, 9, 5), ["first"])
    store.add(Color.YELLOW, datetime(2023, 1, 10, 12, 0), ["second"])
    store.add(Color.BLUE, datetime(2023, 2, 1, 18, 30), ["third"])
    return store
