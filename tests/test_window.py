from datetime import date, datetime

import pytest

from portfoliotree.backtest.config.window import Window, validate_window, windows


@pytest.mark.parametrize("window", windows())
def test_windows_validate(window):
    assert validate_window(str(window)) is window


def test_not_set_validates():
    assert validate_window("") is Window.NOT_SET
    assert not Window.NOT_SET.is_set()


def test_animal_does_not_validate():
    with pytest.raises(ValueError, match="unknown named duration"):
        validate_window("Cat")


def test_windows_exclude_not_set():
    assert Window.NOT_SET not in windows()
    assert all(w.is_set() for w in windows())
    assert Window.ONE_DAY.options() == windows()


def test_window_names():
    assert [str(w) for w in windows()] == [
        "1 Day",
        "1 Week",
        "1 Month",
        "1 Quarter",
        "1 Year",
        "3 Years",
        "5 Years",
    ]


@pytest.mark.parametrize(
    "window,t,expected",
    [
        (Window.ONE_DAY, date(2021, 8, 18), date(2021, 8, 17)),
        (Window.ONE_WEEK, date(2021, 4, 19), date(2021, 4, 13)),
        (Window.ONE_MONTH, date(2020, 12, 23), date(2020, 11, 24)),
        (Window.ONE_QUARTER, date(2021, 8, 4), date(2021, 5, 5)),
        (Window.ONE_YEAR, date(2020, 5, 27), date(2019, 5, 28)),
        (Window.NOT_SET, date(2020, 5, 27), date(2020, 5, 27)),
    ],
)
def test_sub(window, t, expected):
    assert window.sub(t) == expected


@pytest.mark.parametrize(
    "window,t,expected",
    [
        (Window.ONE_DAY, date(2021, 12, 31), date(2022, 1, 1)),
        (Window.ONE_WEEK, date(2021, 4, 12), date(2021, 4, 19)),
        (Window.ONE_MONTH, date(2021, 1, 31), date(2021, 3, 3)),
        (Window.FIVE_YEARS, date(2020, 2, 29), date(2025, 3, 1)),
        (Window.NOT_SET, date(2020, 5, 27), date(2020, 5, 27)),
    ],
)
def test_add(window, t, expected):
    assert window.add(t) == expected


def test_add_keeps_time_of_day():
    t = datetime(2021, 4, 12, 9, 30)
    assert Window.ONE_WEEK.add(t) == datetime(2021, 4, 19, 9, 30)