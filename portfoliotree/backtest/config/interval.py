"""Named intervals that trigger rebalancing or policy updates in a back-test."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import date, datetime, timedelta
from enum import Enum
from functools import partial
from typing import Optional, TypeVar

TriggerFunc = Callable[..., bool]
_D = TypeVar("_D", date, datetime)


class Interval(str, Enum):
    """How often something should happen."""

    NEVER = "Never"
    DAILY = "Daily"
    WEEKLY = "Weekly"
    MONTHLY = "Monthly"
    QUARTERLY = "Quarterly"
    ANNUALLY = "Annually"
    DEFAULT = "Never"

    def __str__(self) -> str:
        return self.value

    def options(self) -> list[Interval]:
        return intervals()

    def check_function(self) -> TriggerFunc:
        """Return a new trigger function for this interval."""
        factories = {
            Interval.DAILY: daily,
            Interval.WEEKLY: weekly,
            Interval.MONTHLY: monthly,
            Interval.QUARTERLY: quarterly,
            Interval.ANNUALLY: annually,
        }
        return factories.get(self, never)()

    def start_date(self, now: _D) -> _D:
        """Return the start of the period that contains now."""
        if self is Interval.WEEKLY:
            return now + timedelta(days=1 - _go_weekday(now))
        if self is Interval.MONTHLY:
            return _first_of_month(now, now.month)
        if self is Interval.QUARTERLY:
            return _first_of_month(now, (now.month - 1) // 3 * 3 + 1)
        if self is Interval.ANNUALLY:
            return _first_of_month(now, 1)
        return now


def _go_weekday(d: date) -> int:
    """Return the weekday counting Sunday as 0."""
    return d.isoweekday() % 7


def _first_of_month(now: _D, month: int) -> _D:
    if isinstance(now, datetime):
        return now.replace(month=month, day=1, hour=0, minute=0, second=0, microsecond=0)
    return now.replace(month=month, day=1)


def intervals() -> list[Interval]:
    return list(Interval)


def validate_interval(value: str) -> Interval:
    """Return the interval named by value; an empty value means the default."""
    if value == "":
        return Interval.DEFAULT
    try:
        return Interval(value)
    except ValueError:
        raise ValueError(f'unknown trigger interval "{value}"') from None


def check_function(value: str) -> TriggerFunc:
    """Return a trigger function for value, never triggering when it is unknown."""
    try:
        interval = Interval(value)
    except ValueError:
        return never()
    return interval.check_function()


def _fixed_answer(
    answer: bool, current: date, current_weights: Optional[Sequence[float]] = None
) -> bool:
    """Answer every check with the same result."""
    return answer


def never() -> TriggerFunc:
    """Return a trigger that never fires."""
    return partial(_fixed_answer, False)


def daily() -> TriggerFunc:
    """Return a trigger that fires on every day."""
    return partial(_fixed_answer, True)


def weekly() -> TriggerFunc:
    previous: Optional[date] = None

    def check(current: date, current_weights: Optional[Sequence[float]] = None) -> bool:
        nonlocal previous
        is_start = previous is None or _go_weekday(current) < _go_weekday(previous)
        previous = current
        return is_start

    return check


def monthly() -> TriggerFunc:
    previous: Optional[date] = None

    def check(current: date, current_weights: Optional[Sequence[float]] = None) -> bool:
        nonlocal previous
        is_start = previous is None or current.day < previous.day
        previous = current
        return is_start

    return check


def quarterly() -> TriggerFunc:
    month_start = monthly()

    def check(current: date, current_weights: Optional[Sequence[float]] = None) -> bool:
        return month_start(current) and (current.month - 1) % 3 == 0

    return check


def annually() -> TriggerFunc:
    month_start = monthly()

    def check(current: date, current_weights: Optional[Sequence[float]] = None) -> bool:
        return month_start(current) and current.month == 1

    return check