"""
Duration rules for ``timedelta`` values.
"""

from datetime import timedelta
from typing import Optional

from .base import ValidationRule

ZERO = timedelta(0)
ONE_DAY = timedelta(days=1)


class PositiveDurationRule(ValidationRule[timedelta]):
    def is_valid(self, value: timedelta) -> bool:
        return value > ZERO

    def default_message(self) -> str:
        return "Duration must be positive"


class MaxDurationRule(ValidationRule[timedelta]):
    def __init__(self, maximum: timedelta, message: Optional[str] = None):
        self.maximum = maximum
        super().__init__(message)

    def is_valid(self, value: timedelta) -> bool:
        return value <= self.maximum

    def default_message(self) -> str:
        return f"Duration must not exceed {self.maximum}"


class MinDurationRule(ValidationRule[timedelta]):
    def __init__(self, minimum: timedelta, message: Optional[str] = None):
        self.minimum = minimum
        super().__init__(message)

    def is_valid(self, value: timedelta) -> bool:
        return value >= self.minimum

    def default_message(self) -> str:
        return f"Duration must be at least {self.minimum}"


class WorkingHoursRule(ValidationRule[timedelta]):
    """Between zero and ``max_hours`` hours, inclusive."""

    def __init__(self, max_hours: int = 8, message: Optional[str] = None):
        self.max_hours = max_hours
        super().__init__(message)

    def is_valid(self, value: timedelta) -> bool:
        return ZERO <= value <= timedelta(hours=self.max_hours)

    def default_message(self) -> str:
        return f"Duration must be within {self.max_hours} hours"


class WholeHoursRule(ValidationRule[timedelta]):
    def is_valid(self, value: timedelta) -> bool:
        return value % timedelta(hours=1) == ZERO

    def default_message(self) -> str:
        return "Duration must be in whole hours"


class WholeMinutesRule(ValidationRule[timedelta]):
    def is_valid(self, value: timedelta) -> bool:
        return value % timedelta(minutes=1) == ZERO

    def default_message(self) -> str:
        return "Duration must be in whole minutes"


class DurationIncrementRule(ValidationRule[timedelta]):
    """Duration must be an exact multiple of ``unit``. ``unit`` must not be zero."""

    def __init__(self, unit: timedelta, message: Optional[str] = None):
        self.unit = unit
        super().__init__(message)

    def is_valid(self, value: timedelta) -> bool:
        return value % self.unit == ZERO

    def default_message(self) -> str:
        return f"Duration must be in increments of {self.unit}"


class WithinDayRule(ValidationRule[timedelta]):
    def is_valid(self, value: timedelta) -> bool:
        return ZERO <= value < ONE_DAY

    def default_message(self) -> str:
        return "Duration must be within a single day (less than 24 hours)"
