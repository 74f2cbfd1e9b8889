"""
Numeric rules.

The ordering rules (range/minimum/maximum) only need ``<=`` and ``>=``, so
they are reused for dates, times, durations and single characters. The sign
and arithmetic rules compare against ``0`` and use ``%``; they work for any
of ``int``, ``float``, ``Decimal`` and ``Fraction``.

A divisor of zero in :class:`MultipleOfRule` / :class:`NotMultipleOfRule` is
a caller error; it is not checked and fails with ``ZeroDivisionError`` the
first time the rule is evaluated.
"""

from typing import Any, Optional

from .base import ValidationRule


class RangeRule(ValidationRule[Any]):
    """Inclusive ``min <= value <= max`` using the type's native ordering."""

    def __init__(self, min_value: Any, max_value: Any, message: Optional[str] = None):
        self.min_value = min_value
        self.max_value = max_value
        super().__init__(message)

    def is_valid(self, value: Any) -> bool:
        return self.min_value <= value <= self.max_value

    def default_message(self) -> str:
        return f"Value must be between {self.min_value} and {self.max_value}"


class MinimumRule(ValidationRule[Any]):
    def __init__(self, min_value: Any, message: Optional[str] = None):
        self.min_value = min_value
        super().__init__(message)

    def is_valid(self, value: Any) -> bool:
        return value >= self.min_value

    def default_message(self) -> str:
        return f"Value must be at least {self.min_value}"


class MaximumRule(ValidationRule[Any]):
    def __init__(self, max_value: Any, message: Optional[str] = None):
        self.max_value = max_value
        super().__init__(message)

    def is_valid(self, value: Any) -> bool:
        return value <= self.max_value

    def default_message(self) -> str:
        return f"Value must be at most {self.max_value}"


class PositiveRule(ValidationRule[Any]):
    def is_valid(self, value: Any) -> bool:
        return value > 0

    def default_message(self) -> str:
        return "Value must be positive"


class NonNegativeRule(ValidationRule[Any]):
    def is_valid(self, value: Any) -> bool:
        return value >= 0

    def default_message(self) -> str:
        return "Value must be non-negative"


class NegativeRule(ValidationRule[Any]):
    def is_valid(self, value: Any) -> bool:
        return value < 0

    def default_message(self) -> str:
        return "Value must be negative"


class EvenRule(ValidationRule[Any]):
    def is_valid(self, value: Any) -> bool:
        return value % 2 == 0

    def default_message(self) -> str:
        return "Value must be even"


class OddRule(ValidationRule[Any]):
    def is_valid(self, value: Any) -> bool:
        return value % 2 != 0

    def default_message(self) -> str:
        return "Value must be odd"


class MultipleOfRule(ValidationRule[Any]):
    """``value % divisor == 0``. ``divisor`` must not be zero."""

    def __init__(self, divisor: Any, message: Optional[str] = None):
        self.divisor = divisor
        super().__init__(message)

    def is_valid(self, value: Any) -> bool:
        return value % self.divisor == 0

    def default_message(self) -> str:
        return f"Value must be a multiple of {self.divisor}"


class NotMultipleOfRule(ValidationRule[Any]):
    """``value % divisor != 0``. ``divisor`` must not be zero."""

    def __init__(self, divisor: Any, message: Optional[str] = None):
        self.divisor = divisor
        super().__init__(message)

    def is_valid(self, value: Any) -> bool:
        return value % self.divisor != 0

    def default_message(self) -> str:
        return f"Value must not be a multiple of {self.divisor}"


class LuhnRule(ValidationRule[int]):
    """
    Luhn (mod 10) checksum over the decimal digits of an integer.

    The last digit is the check digit. Walking the remaining digits from the
    left, a digit is doubled when its index has the same parity as the
    total length, which doubles every second digit counted from the right
    of the payload. Doubled values above 9 have 9 subtracted.

    Example:
        >>> LuhnRule().is_valid(4532015112830366)
        True
    """

    def is_valid(self, value: int) -> bool:
        digits = str(value)
        if not digits or not digits.isdigit():
            return False

        length = len(digits)
        parity = length % 2
        total = 0
        for index, char in enumerate(digits[:-1]):
            digit = int(char)
            if index % 2 == parity:
                digit *= 2
                if digit > 9:
                    digit -= 9
            total += digit

        return int(digits[-1]) == (10 - total % 10) % 10

    def default_message(self) -> str:
        return "Value must pass Luhn checksum validation"
