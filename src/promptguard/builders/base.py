"""
Fluent builder base and shared rule families.

A builder owns exactly one validator. Every ``with_*`` method appends one
rule to it and returns the builder itself, so calls chain in the order the
rules will run::

    age = (
        for_integer("Age")
        .with_range(0, 120)
        .with_not_multiple_of(13, "We skip 13 here")
        .get()
    )

Rule families that several builders share are mixins over
:meth:`BuilderBase._add_rule`. A builder lists the families it supports
as bases; no builder inherits from another concrete builder.
"""

from datetime import timedelta
from typing import Any, Callable, Generic, List, Optional, TypeVar

from ..cancellation import CancellationToken
from ..rules.base import CustomRule, ValidationRule
from ..rules.dates import (
    DayOfWeek,
    DayOfWeekRule,
    FutureDateRule,
    LeapYearRule,
    MonthRule,
    NotTodayRule,
    PastDateRule,
    TodayRule,
    WeekdayRule,
    WeekendRule,
    WithinDaysRule,
    YearRule,
)
from ..rules.numeric import (
    EvenRule,
    LuhnRule,
    MaximumRule,
    MinimumRule,
    MultipleOfRule,
    NegativeRule,
    NonNegativeRule,
    NotMultipleOfRule,
    OddRule,
    PositiveRule,
    RangeRule,
)
from ..rules.times import (
    AfterTimeRule,
    AmRule,
    BeforeTimeRule,
    BusinessHoursRule,
    HourRule,
    MidnightRule,
    NoonRule,
    PmRule,
    TimeBound,
    TimeIncrementRule,
    WholeHourRule,
    WholeMinuteRule,
)
from ..validators.base import Validator

T = TypeVar("T")
B = TypeVar("B", bound="BuilderBase")


class BuilderBase(Generic[T]):
    """
    Holds the validator and the operations every builder shares.

    Args:
        validator: A fresh validator; the builder takes ownership of it.
    """

    def __init__(self, validator: Validator[T]):
        self.validator = validator

    @property
    def rules(self) -> List[ValidationRule[T]]:
        return self.validator.rules

    def _add_rule(self: B, rule: ValidationRule) -> B:
        self.validator.add_rule(rule)
        return self

    def with_custom_rule(self: B, predicate: Callable[[Any], bool], message: str) -> B:
        """Append a rule backed by ``predicate``; ``message`` is shown when it returns False."""
        return self._add_rule(CustomRule(predicate, message))

    def get(self, cancellation: Optional[CancellationToken] = None) -> T:
        """Run the validator until valid input arrives."""
        return self.validator.get_valid_input(cancellation)

    async def get_async(self, cancellation: Optional[CancellationToken] = None) -> T:
        return await self.validator.get_valid_input_async(cancellation)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(prompt={self.validator.prompt!r}, rules={len(self.rules)})"


class OrderingRulesMixin:
    """Inclusive bounds over any type with native ordering."""

    def with_range(self: B, min_value: Any, max_value: Any, message: Optional[str] = None) -> B:
        return self._add_rule(RangeRule(min_value, max_value, message))

    def with_minimum(self: B, min_value: Any, message: Optional[str] = None) -> B:
        return self._add_rule(MinimumRule(min_value, message))

    def with_maximum(self: B, max_value: Any, message: Optional[str] = None) -> B:
        return self._add_rule(MaximumRule(max_value, message))


class SignRulesMixin:
    def with_positive(self: B, message: Optional[str] = None) -> B:
        return self._add_rule(PositiveRule(message))

    def with_non_negative(self: B, message: Optional[str] = None) -> B:
        return self._add_rule(NonNegativeRule(message))

    def with_negative(self: B, message: Optional[str] = None) -> B:
        return self._add_rule(NegativeRule(message))


class IntegerRulesMixin:
    """Parity, divisibility and checksum rules; integers only."""

    def with_even(self: B, message: Optional[str] = None) -> B:
        return self._add_rule(EvenRule(message))

    def with_odd(self: B, message: Optional[str] = None) -> B:
        return self._add_rule(OddRule(message))

    def with_multiple_of(self: B, divisor: int, message: Optional[str] = None) -> B:
        return self._add_rule(MultipleOfRule(divisor, message))

    def with_not_multiple_of(self: B, divisor: int, message: Optional[str] = None) -> B:
        return self._add_rule(NotMultipleOfRule(divisor, message))

    def with_luhn_check(self: B, message: Optional[str] = None) -> B:
        return self._add_rule(LuhnRule(message))


class DateRulesMixin:
    """
    Calendar rules.

    ``date_variant`` names the rule constructor to use: ``"for_datetime"``
    or ``"for_date"``.
    """

    date_variant = "for_datetime"

    def _date_rule(self: B, rule_type: type, *args: Any, message: Optional[str] = None) -> B:
        factory = getattr(rule_type, self.date_variant)
        return self._add_rule(factory(*args, message=message))

    def with_future_date(self: B, message: Optional[str] = None) -> B:
        return self._date_rule(FutureDateRule, message=message)

    def with_past_date(self: B, message: Optional[str] = None) -> B:
        return self._date_rule(PastDateRule, message=message)

    def with_today_date(self: B, message: Optional[str] = None) -> B:
        return self._date_rule(TodayRule, message=message)

    def with_not_today_date(self: B, message: Optional[str] = None) -> B:
        return self._date_rule(NotTodayRule, message=message)

    def with_weekday(self: B, message: Optional[str] = None) -> B:
        return self._date_rule(WeekdayRule, message=message)

    def with_weekend(self: B, message: Optional[str] = None) -> B:
        return self._date_rule(WeekendRule, message=message)

    def with_day_of_week(self: B, day_of_week: DayOfWeek, message: Optional[str] = None) -> B:
        return self._date_rule(DayOfWeekRule, day_of_week, message=message)

    def within_days(self: B, days: int, message: Optional[str] = None) -> B:
        return self._date_rule(WithinDaysRule, days, message=message)

    def with_year(self: B, year: int, message: Optional[str] = None) -> B:
        return self._date_rule(YearRule, year, message=message)

    def with_leap_year(self: B, message: Optional[str] = None) -> B:
        return self._date_rule(LeapYearRule, message=message)

    def with_month(self: B, month: int, message: Optional[str] = None) -> B:
        return self._date_rule(MonthRule, month, message=message)


class TimeOfDayRulesMixin:
    """
    Time-of-day rules.

    ``time_variant`` names the rule constructor to use: ``"for_datetime"``
    or ``"for_time"``.
    """

    time_variant = "for_datetime"

    def _time_rule(self: B, rule_type: type, *args: Any, message: Optional[str] = None) -> B:
        factory = getattr(rule_type, self.time_variant)
        return self._add_rule(factory(*args, message=message))

    def with_business_hours(self: B, message: Optional[str] = None) -> B:
        return self._time_rule(BusinessHoursRule, message=message)

    def with_time_before(self: B, max_time: TimeBound, message: Optional[str] = None) -> B:
        return self._time_rule(BeforeTimeRule, max_time, message=message)

    def with_time_after(self: B, min_time: TimeBound, message: Optional[str] = None) -> B:
        return self._time_rule(AfterTimeRule, min_time, message=message)

    def with_hour(self: B, hour: int, message: Optional[str] = None) -> B:
        return self._time_rule(HourRule, hour, message=message)

    def with_whole_hour(self: B, message: Optional[str] = None) -> B:
        return self._time_rule(WholeHourRule, message=message)

    def with_whole_minute(self: B, message: Optional[str] = None) -> B:
        return self._time_rule(WholeMinuteRule, message=message)

    def with_time_increment(self: B, increment: timedelta, message: Optional[str] = None) -> B:
        return self._time_rule(TimeIncrementRule, increment, message=message)

    def with_am(self: B, message: Optional[str] = None) -> B:
        return self._time_rule(AmRule, message=message)

    def with_pm(self: B, message: Optional[str] = None) -> B:
        return self._time_rule(PmRule, message=message)

    def with_midnight(self: B, message: Optional[str] = None) -> B:
        return self._time_rule(MidnightRule, message=message)

    def with_noon(self: B, message: Optional[str] = None) -> B:
        return self._time_rule(NoonRule, message=message)
