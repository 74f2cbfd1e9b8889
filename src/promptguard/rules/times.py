"""
Time-of-day rules for ``datetime`` and ``time`` values.

Like the calendar rules, each rule has ``for_datetime`` and ``for_time``
constructors over a single implementation; both reduce the value to its
wall-clock ``time`` and compare durations since midnight. Bounds may be
given as ``datetime.time`` or as ``timedelta`` since midnight.
"""

from abc import abstractmethod
from datetime import datetime, time, timedelta
from typing import Any, Callable, Optional, Union

from .base import ValidationRule

TimeBound = Union[time, timedelta]

BUSINESS_DAY_START = timedelta(hours=9)
BUSINESS_DAY_END = timedelta(hours=17)
NOON = timedelta(hours=12)


def since_midnight(value: time) -> timedelta:
    return timedelta(
        hours=value.hour,
        minutes=value.minute,
        seconds=value.second,
        microseconds=value.microsecond,
    )


def as_offset(bound: TimeBound) -> timedelta:
    if isinstance(bound, time):
        return since_midnight(bound)
    return bound


def format_hhmm(offset: timedelta) -> str:
    minutes = int(offset.total_seconds()) // 60
    return f"{(minutes // 60) % 24:02d}:{minutes % 60:02d}"


def wall_clock(value: Union[datetime, time]) -> time:
    if isinstance(value, datetime):
        return value.time()
    return value


class TimeOfDayRule(ValidationRule[Any]):
    """Base for time-of-day rules; subclasses implement :meth:`check`."""

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        extract: Optional[Callable[[Any], time]] = None,
    ):
        self._extract = extract or wall_clock
        super().__init__(message)

    @classmethod
    def for_datetime(cls, *args, **kwargs) -> "TimeOfDayRule":
        return cls(*args, extract=datetime.time, **kwargs)

    @classmethod
    def for_time(cls, *args, **kwargs) -> "TimeOfDayRule":
        return cls(*args, extract=wall_clock, **kwargs)

    def is_valid(self, value: Any) -> bool:
        return self.check(self._extract(value))

    @abstractmethod
    def check(self, value: time) -> bool:
        """Test the extracted wall-clock time."""


class BusinessHoursRule(TimeOfDayRule):
    """09:00 to 17:00, both ends included."""

    def check(self, value: time) -> bool:
        return BUSINESS_DAY_START <= since_midnight(value) <= BUSINESS_DAY_END

    def default_message(self) -> str:
        return "Time must be within business hours (9 AM - 5 PM)"


class BeforeTimeRule(TimeOfDayRule):
    def __init__(self, max_time: TimeBound, message: Optional[str] = None, **kwargs):
        self.max_time = as_offset(max_time)
        super().__init__(message, **kwargs)

    def check(self, value: time) -> bool:
        return since_midnight(value) < self.max_time

    def default_message(self) -> str:
        return f"Time must be before {format_hhmm(self.max_time)}"


class AfterTimeRule(TimeOfDayRule):
    def __init__(self, min_time: TimeBound, message: Optional[str] = None, **kwargs):
        self.min_time = as_offset(min_time)
        super().__init__(message, **kwargs)

    def check(self, value: time) -> bool:
        return since_midnight(value) > self.min_time

    def default_message(self) -> str:
        return f"Time must be after {format_hhmm(self.min_time)}"


class HourRule(TimeOfDayRule):
    def __init__(self, hour: int, message: Optional[str] = None, **kwargs):
        self.hour = hour
        super().__init__(message, **kwargs)

    def check(self, value: time) -> bool:
        return value.hour == self.hour

    def default_message(self) -> str:
        return f"Time must be at the hour {self.hour}"


class WholeHourRule(TimeOfDayRule):
    def check(self, value: time) -> bool:
        return value.minute == 0 and value.second == 0 and value.microsecond == 0

    def default_message(self) -> str:
        return "Time must be in whole hours (no minutes or seconds)"


class WholeMinuteRule(TimeOfDayRule):
    def check(self, value: time) -> bool:
        return value.second == 0 and value.microsecond == 0

    def default_message(self) -> str:
        return "Time must be in whole minutes (no seconds)"


class TimeIncrementRule(TimeOfDayRule):
    """Time since midnight must be an exact multiple of ``increment``."""

    def __init__(self, increment: timedelta, message: Optional[str] = None, **kwargs):
        self.increment = increment
        super().__init__(message, **kwargs)

    def check(self, value: time) -> bool:
        return since_midnight(value) % self.increment == timedelta(0)

    def default_message(self) -> str:
        return f"Time must be in increments of {self.increment}"


class AmRule(TimeOfDayRule):
    def check(self, value: time) -> bool:
        return value.hour < 12

    def default_message(self) -> str:
        return "Time must be in the AM period (midnight to noon)"


class PmRule(TimeOfDayRule):
    def check(self, value: time) -> bool:
        return value.hour >= 12

    def default_message(self) -> str:
        return "Time must be in the PM period (noon to midnight)"


class MidnightRule(TimeOfDayRule):
    def check(self, value: time) -> bool:
        return since_midnight(value) == timedelta(0)

    def default_message(self) -> str:
        return "Time must be midnight"


class NoonRule(TimeOfDayRule):
    def check(self, value: time) -> bool:
        return since_midnight(value) == NOON

    def default_message(self) -> str:
        return "Time must be noon (12:00:00)"
