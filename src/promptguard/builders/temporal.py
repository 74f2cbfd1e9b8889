"""Builders for ``datetime``, ``date``, ``time`` and ``timedelta``."""

from datetime import timedelta
from typing import Optional

from ..providers import InputProvider, OutputProvider
from ..rules.durations import (
    DurationIncrementRule,
    MaxDurationRule,
    MinDurationRule,
    PositiveDurationRule,
    WholeHoursRule,
    WholeMinutesRule,
    WithinDayRule,
    WorkingHoursRule,
)
from ..validators.temporal import DateTimeValidator, DateValidator, DurationValidator, TimeValidator
from .base import BuilderBase, DateRulesMixin, OrderingRulesMixin, TimeOfDayRulesMixin


class DateTimeBuilder(OrderingRulesMixin, DateRulesMixin, TimeOfDayRulesMixin, BuilderBase):
    """
    Calendar and time-of-day rules for full ``datetime`` values.

    Example:
        >>> meeting = (
        ...     DateTimeBuilder(stdin, stdout, "Meeting", format="%Y-%m-%d %H:%M")
        ...     .with_future_date()
        ...     .with_weekday()
        ...     .with_business_hours()
        ...     .get()
        ... )
    """

    date_variant = "for_datetime"
    time_variant = "for_datetime"

    def __init__(
        self,
        input_provider: InputProvider,
        output_provider: OutputProvider,
        prompt: str,
        format: Optional[str] = None,
    ):
        super().__init__(DateTimeValidator(input_provider, output_provider, prompt, format))


class DateBuilder(OrderingRulesMixin, DateRulesMixin, BuilderBase):
    """Calendar rules for ``date`` values, which count as midnight of that day."""

    date_variant = "for_date"

    def __init__(
        self,
        input_provider: InputProvider,
        output_provider: OutputProvider,
        prompt: str,
        format: Optional[str] = None,
    ):
        super().__init__(DateValidator(input_provider, output_provider, prompt, format))


class TimeBuilder(OrderingRulesMixin, TimeOfDayRulesMixin, BuilderBase):
    time_variant = "for_time"

    def __init__(
        self,
        input_provider: InputProvider,
        output_provider: OutputProvider,
        prompt: str,
        format: Optional[str] = None,
    ):
        super().__init__(TimeValidator(input_provider, output_provider, prompt, format))


class DurationBuilder(OrderingRulesMixin, BuilderBase):
    """Rules for ``timedelta`` values."""

    def __init__(
        self,
        input_provider: InputProvider,
        output_provider: OutputProvider,
        prompt: str,
        format: Optional[str] = None,
    ):
        super().__init__(DurationValidator(input_provider, output_provider, prompt, format))

    def with_positive(self, message: Optional[str] = None) -> "DurationBuilder":
        return self._add_rule(PositiveDurationRule(message))

    def with_max_duration(self, maximum: timedelta, message: Optional[str] = None) -> "DurationBuilder":
        return self._add_rule(MaxDurationRule(maximum, message))

    def with_min_duration(self, minimum: timedelta, message: Optional[str] = None) -> "DurationBuilder":
        return self._add_rule(MinDurationRule(minimum, message))

    def with_working_hours(self, max_hours: int = 8, message: Optional[str] = None) -> "DurationBuilder":
        return self._add_rule(WorkingHoursRule(max_hours, message))

    def with_whole_hours(self, message: Optional[str] = None) -> "DurationBuilder":
        return self._add_rule(WholeHoursRule(message))

    def with_whole_minutes(self, message: Optional[str] = None) -> "DurationBuilder":
        return self._add_rule(WholeMinutesRule(message))

    def with_duration_increment(self, unit: timedelta, message: Optional[str] = None) -> "DurationBuilder":
        return self._add_rule(DurationIncrementRule(unit, message))

    def within_day(self, message: Optional[str] = None) -> "DurationBuilder":
        return self._add_rule(WithinDayRule(message))
