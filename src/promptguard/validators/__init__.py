"""
Typed validators.

Each validator owns an ordered rule list and runs the prompt/parse/check
loop in :class:`Validator`. Subclasses only supply ``try_parse``.

Example:
    >>> from promptguard.validators import IntValidator
    >>> from promptguard.rules import RangeRule
    >>> validator = IntValidator(console_input, console_output, "Age")
    >>> validator.add_rule(RangeRule(0, 120)).get_valid_input()
    42
"""

from .base import ParseResult, Validator
from .enums import EnumValidator
from .identifiers import UUIDValidator
from .network import IpAddressValidator, UriKind, UriValidator
from .numeric import DecimalValidator, FloatValidator, IntValidator, NumericValidator
from .temporal import (
    DateTimeValidator,
    DateValidator,
    DurationValidator,
    TemporalValidator,
    TimeValidator,
    parse_duration,
)
from .text import CharValidator, StringValidator

__all__ = [
    "Validator",
    "ParseResult",
    "NumericValidator",
    "IntValidator",
    "FloatValidator",
    "DecimalValidator",
    "StringValidator",
    "CharValidator",
    "TemporalValidator",
    "DateTimeValidator",
    "DateValidator",
    "TimeValidator",
    "DurationValidator",
    "parse_duration",
    "UUIDValidator",
    "IpAddressValidator",
    "UriKind",
    "UriValidator",
    "EnumValidator",
]
