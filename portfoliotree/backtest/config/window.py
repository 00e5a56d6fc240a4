"""Named look-back windows for back-test policy calculations."""

from __future__ import annotations

from datetime import date, datetime, timedelta
from enum import Enum
from typing import TypeVar

_D = TypeVar("_D", date, datetime)


def _add_date(t: _D, years: int, months: int, days: int) -> _D:
    """Add years, months and days, letting day overflow roll into the next month."""
    month_index = t.month - 1 + months
    year = t.year + years + month_index // 12
    month = month_index % 12 + 1
    return t.replace(year=year, month=month, day=1) + timedelta(days=t.day - 1 + days)


class Window(str, Enum):
    """A named span of time to look back over."""

    NOT_SET = ""
    ONE_DAY = "1 Day"
    ONE_WEEK = "1 Week"
    ONE_MONTH = "1 Month"
    ONE_QUARTER = "1 Quarter"
    ONE_YEAR = "1 Year"
    THREE_YEARS = "3 Years"
    FIVE_YEARS = "5 Years"

    def __str__(self) -> str:
        return self.value

    def options(self) -> list[Window]:
        return windows()

    def is_set(self) -> bool:
        return self is not Window.NOT_SET

    def add(self, t: _D) -> _D:
        """Return t moved forward by the window."""
        offsets = {
            Window.ONE_DAY: (0, 0, 1),
            Window.ONE_WEEK: (0, 0, 7),
            Window.ONE_MONTH: (0, 1, 0),
            Window.ONE_QUARTER: (0, 3, 0),
            Window.ONE_YEAR: (1, 0, 0),
            Window.THREE_YEARS: (3, 0, 0),
            Window.FIVE_YEARS: (5, 0, 0),
        }
        offset = offsets.get(self)
        return t if offset is None else _add_date(t, *offset)

    def sub(self, t: _D) -> _D:
        """Return the first day of the window that ends on t."""
        offsets = {
            Window.ONE_DAY: (0, 0, -1),
            Window.ONE_WEEK: (0, 0, -6),
            Window.ONE_MONTH: (0, -1, 1),
            Window.ONE_QUARTER: (0, -3, 1),
            Window.ONE_YEAR: (-1, 0, 1),
            Window.THREE_YEARS: (-3, 0, 1),
            Window.FIVE_YEARS: (-5, 0, 1),
        }
        offset = offsets.get(self)
        return t if offset is None else _add_date(t, *offset)


def windows() -> list[Window]:
    """Return every set window, shortest first."""
    return [w for w in Window if w.is_set()]


def validate_window(value: str) -> Window:
    """Return the window named by value, which may be empty."""
    try:
        return Window(value)
    except ValueError:
        raise ValueError(f'unknown named duration "{value}"') from None