"""
Age Arithmetic

Calendar-year helpers used by the age searches. `today()` is the single
clock for the module so tests can pin it.
"""
from calendar import isleap
from datetime import MAXYEAR, MINYEAR, date


def today() -> date:
    return date.today()


def minus_years(value: date, years: int) -> date:
    """
    Subtract whole years from a date.

    Feb 29 falls back to Feb 28 when the target year is not a leap year.
    Results outside the calendar clamp to `date.min` or `date.max`.
    """
    year = value.year - years
    if year < MINYEAR:
        return date.min
    if year > MAXYEAR:
        return date.max
    if value.month == 2 and value.day == 29 and not isleap(year):
        return value.replace(year=year, day=28)
    return value.replace(year=year)


def years_between(start: date, end: date) -> int:
    """
    Count whole calendar years from `start` to `end`.

    Negative when `start` is after `end`; partial years are truncated toward zero.
    """
    if start > end:
        return -years_between(end, start)
    years = end.year - start.year
    if (end.month, end.day) < (start.month, start.day):
        years -= 1
    return years


def birthdate_cutoff(min_age: int, on: date) -> date:
    """Users born strictly before this date count as older than `min_age`."""
    return minus_years(on, min_age + 1)
