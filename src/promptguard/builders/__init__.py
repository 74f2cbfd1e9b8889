"""
Fluent builders.

One builder per target type. Builders are normally obtained from the
``for_*`` functions in :mod:`promptguard.facade`, which fill in the
console providers.
"""

from .base import (
    BuilderBase,
    DateRulesMixin,
    IntegerRulesMixin,
    OrderingRulesMixin,
    SignRulesMixin,
    TimeOfDayRulesMixin,
)
from .enums import EnumBuilder
from .identifiers import GuidBuilder
from .network import IpAddressBuilder, UriBuilder
from .numeric import IntegerBuilder, NumericBuilder
from .temporal import DateBuilder, DateTimeBuilder, DurationBuilder, TimeBuilder
from .text import CharBuilder, StringBuilder

__all__ = [
    "BuilderBase",
    "OrderingRulesMixin",
    "SignRulesMixin",
    "IntegerRulesMixin",
    "DateRulesMixin",
    "TimeOfDayRulesMixin",
    "NumericBuilder",
    "IntegerBuilder",
    "StringBuilder",
    "CharBuilder",
    "DateTimeBuilder",
    "DateBuilder",
    "TimeBuilder",
    "DurationBuilder",
    "GuidBuilder",
    "IpAddressBuilder",
    "UriBuilder",
    "EnumBuilder",
]
