"""
Calendar rules for ``datetime`` and ``date`` values.

Each rule has one implementation and two constructors, ``for_datetime`` and
``for_date``, which differ only in how the value is turned into a
``datetime``: date-only values are treated as midnight of that day.
Rules that compare with the current moment take an optional ``clock``
(defaults to ``datetime.now``); aware values are compared with "now" in
their own time zone.
"""

import calendar
from abc import abstractmethod
from datetime import date, datetime, time
from enum import IntEnum
from typing import Any, Callable, Optional, Union

from .base import ValidationRule

Clock = Callable[[], datetime]


class DayOfWeek(IntEnum):
    """Day numbers as returned by ``date.weekday()``."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    def __str__(self) -> str:
        return self.name.title()


def as_datetime(value: Union[date, datetime]) -> datetime:
    """Datetimes pass through; dates become midnight of that day."""
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


def date_at_midnight(value: date) -> datetime:
    return datetime.combine(value, time.min)


class DateRule(ValidationRule[Any]):
    """Base for calendar rules; subclasses implement :meth:`check`."""

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        extract: Optional[Callable[[Any], datetime]] = None,
        clock: Optional[Clock] = None,
    ):
        self._extract = extract or as_datetime
        self._clock = clock or datetime.now
        super().__init__(message)

    @classmethod
    def for_datetime(cls, *args, **kwargs) -> "DateRule":
        return cls(*args, extract=as_datetime, **kwargs)

    @classmethod
    def for_date(cls, *args, **kwargs) -> "DateRule":
        return cls(*args, extract=date_at_midnight, **kwargs)

    def is_valid(self, value: Any) -> bool:
        return self.check(self._extract(value))

    @abstractmethod
    def check(self, moment: datetime) -> bool:
        """Test the extracted moment."""

    def now_for(self, moment: datetime) -> datetime:
        """Current time in the same awareness as ``moment``."""
        now = self._clock()
        if moment.tzinfo is not None:
            return now.astimezone(moment.tzinfo)
        if now.tzinfo is not None:
            return now.astimezone().replace(tzinfo=None)
        return now


class FutureDateRule(DateRule):
    def check(self, moment: datetime) -> bool:
        return moment > self.now_for(moment)

    def default_message(self) -> str:
        return "Date must be in the future"


class PastDateRule(DateRule):
    def check(self, moment: datetime) -> bool:
        return moment < self.now_for(moment)

    def default_message(self) -> str:
        return "Date must be in the past"


class TodayRule(DateRule):
    def check(self, moment: datetime) -> bool:
        return moment.date() == self.now_for(moment).date()

    def default_message(self) -> str:
        return "Date must be today"


class NotTodayRule(DateRule):
    def check(self, moment: datetime) -> bool:
        return moment.date() != self.now_for(moment).date()

    def default_message(self) -> str:
        return "Date must not be today"


class WeekdayRule(DateRule):
    def check(self, moment: datetime) -> bool:
        day = moment.weekday()
        return day != DayOfWeek.SATURDAY and day != DayOfWeek.SUNDAY

    def default_message(self) -> str:
        return "Date must be a weekday"


class WeekendRule(DateRule):
    def check(self, moment: datetime) -> bool:
        return moment.weekday() in (DayOfWeek.SATURDAY, DayOfWeek.SUNDAY)

    def default_message(self) -> str:
        return "Date must be a weekend day"


class DayOfWeekRule(DateRule):
    def __init__(self, day_of_week: Union[DayOfWeek, int], message: Optional[str] = None, **kwargs):
        self.day_of_week = DayOfWeek(day_of_week)
        super().__init__(message, **kwargs)

    def check(self, moment: datetime) -> bool:
        return moment.weekday() == self.day_of_week

    def default_message(self) -> str:
        return f"Date must be a {self.day_of_week}"


class WithinDaysRule(DateRule):
    """Absolute distance from now, in either direction, of at most ``days``."""

    def __init__(self, days: int, message: Optional[str] = None, **kwargs):
        self.days = days
        super().__init__(message, **kwargs)

    def check(self, moment: datetime) -> bool:
        difference = moment - self.now_for(moment)
        return abs(difference.total_seconds()) / 86400 <= self.days

    def default_message(self) -> str:
        return f"Date must be within {self.days} days from now"


class YearRule(DateRule):
    def __init__(self, year: int, message: Optional[str] = None, **kwargs):
        self.year = year
        super().__init__(message, **kwargs)

    def check(self, moment: datetime) -> bool:
        return moment.year == self.year

    def default_message(self) -> str:
        return f"Date must be in the year {self.year}"


class LeapYearRule(DateRule):
    def check(self, moment: datetime) -> bool:
        return calendar.isleap(moment.year)

    def default_message(self) -> str:
        return "Date must be in a valid leap year"


class MonthRule(DateRule):
    def __init__(self, month: int, message: Optional[str] = None, **kwargs):
        self.month = month
        super().__init__(message, **kwargs)

    def check(self, moment: datetime) -> bool:
        return moment.month == self.month

    def default_message(self) -> str:
        return f"Date must be in month {self.month}"
