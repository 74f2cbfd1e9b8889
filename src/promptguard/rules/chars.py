"""
Single-character rules.

Values are one-character strings as produced by
:class:`~promptguard.validators.text.CharValidator`. Use
:class:`~promptguard.rules.numeric.RangeRule` for ``'a'..'z'`` style ranges.
"""

import unicodedata
from typing import Optional

from .base import ValidationRule


class LetterRule(ValidationRule[str]):
    def is_valid(self, value: str) -> bool:
        return value.isalpha()

    def default_message(self) -> str:
        return "Character must be a letter"


class DigitRule(ValidationRule[str]):
    def is_valid(self, value: str) -> bool:
        return value.isdecimal()

    def default_message(self) -> str:
        return "Character must be a digit"


class UpperCaseRule(ValidationRule[str]):
    def is_valid(self, value: str) -> bool:
        return value.isupper()

    def default_message(self) -> str:
        return "Character must be uppercase"


class LowerCaseRule(ValidationRule[str]):
    def is_valid(self, value: str) -> bool:
        return value.islower()

    def default_message(self) -> str:
        return "Character must be lowercase"


class AlphanumericCharRule(ValidationRule[str]):
    def is_valid(self, value: str) -> bool:
        return value.isalpha() or value.isdecimal()

    def default_message(self) -> str:
        return "Character must be alphanumeric"


class WhitespaceRule(ValidationRule[str]):
    def is_valid(self, value: str) -> bool:
        return value.isspace()

    def default_message(self) -> str:
        return "Character must be whitespace"


class PunctuationRule(ValidationRule[str]):
    """Any Unicode punctuation category (Pc, Pd, Ps, Pe, Pi, Pf, Po)."""

    def is_valid(self, value: str) -> bool:
        return len(value) == 1 and unicodedata.category(value).startswith("P")

    def default_message(self) -> str:
        return "Character must be punctuation"


class AllowedCharsRule(ValidationRule[str]):
    def __init__(self, allowed_chars: str, message: Optional[str] = None):
        self.allowed_chars = allowed_chars
        super().__init__(message)

    def is_valid(self, value: str) -> bool:
        return len(value) == 1 and value in self.allowed_chars

    def default_message(self) -> str:
        return f"Character must be one of: {self.allowed_chars}"


class ExcludedCharsRule(ValidationRule[str]):
    def __init__(self, excluded_chars: str, message: Optional[str] = None):
        self.excluded_chars = excluded_chars
        super().__init__(message)

    def is_valid(self, value: str) -> bool:
        return value not in self.excluded_chars

    def default_message(self) -> str:
        return f"Character cannot be one of: {self.excluded_chars}"
