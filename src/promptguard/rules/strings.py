"""
String shape rules.

All rules operate on the already-trimmed text returned by
:class:`~promptguard.validators.text.StringValidator`. Character classes
follow Python's Unicode-aware ``str`` predicates; an empty string satisfies
every "only ..." rule.
"""

import os
import re
from pathlib import Path
from typing import Iterable, Optional

from .base import ValidationRule

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$", re.IGNORECASE)
PHONE_PATTERN = re.compile(r"^[\d\s\-\(\)\+]+$")


class StringLengthRule(ValidationRule[str]):
    """
    Inclusive length bounds; either bound may be omitted.

    Example:
        >>> rule = StringLengthRule(2, 5)
        >>> rule.is_valid("ab"), rule.is_valid("abcdef")
        (True, False)
    """

    def __init__(
        self,
        min_length: Optional[int] = None,
        max_length: Optional[int] = None,
        message: Optional[str] = None,
    ):
        self.min_length = min_length
        self.max_length = max_length
        super().__init__(message)

    def is_valid(self, value: str) -> bool:
        length = len(value)
        if self.min_length is not None and length < self.min_length:
            return False
        return self.max_length is None or length <= self.max_length

    def default_message(self) -> str:
        if self.min_length is not None and self.max_length is not None:
            return f"Length must be between {self.min_length} and {self.max_length} characters"
        if self.min_length is not None:
            return f"Length must be at least {self.min_length} characters"
        if self.max_length is not None:
            return f"Length must be at most {self.max_length} characters"
        return "Invalid length"


class RegexRule(ValidationRule[str]):
    """
    Pattern must be found somewhere in the value (``re.search``).

    The pattern is compiled here, so a malformed pattern raises ``re.error``
    when the rule is built rather than during input.
    """

    def __init__(self, pattern: str, message: Optional[str] = None):
        self.pattern = pattern
        self._regex = re.compile(pattern)
        super().__init__(message)

    def is_valid(self, value: str) -> bool:
        return self._regex.search(value) is not None

    def default_message(self) -> str:
        return f"Value must match pattern: {self.pattern}"


class NoDigitsRule(ValidationRule[str]):
    def is_valid(self, value: str) -> bool:
        return not any(char.isdecimal() for char in value)

    def default_message(self) -> str:
        return "Input cannot contain digits"


class AlphabeticRule(ValidationRule[str]):
    def is_valid(self, value: str) -> bool:
        return all(char.isalpha() for char in value)

    def default_message(self) -> str:
        return "Input must contain only letters"


class AlphanumericStringRule(ValidationRule[str]):
    def is_valid(self, value: str) -> bool:
        return all(char.isalpha() or char.isdecimal() for char in value)

    def default_message(self) -> str:
        return "Input must contain only letters and digits"


class NumericStringRule(ValidationRule[str]):
    def is_valid(self, value: str) -> bool:
        return all(char.isdecimal() for char in value)

    def default_message(self) -> str:
        return "Input must contain only digits"


class UpperCaseStringRule(ValidationRule[str]):
    """Every letter is uppercase; non-letters are ignored."""

    def is_valid(self, value: str) -> bool:
        return all(not char.isalpha() or char.isupper() for char in value)

    def default_message(self) -> str:
        return "Input must be uppercase"


class LowerCaseStringRule(ValidationRule[str]):
    """Every letter is lowercase; non-letters are ignored."""

    def is_valid(self, value: str) -> bool:
        return all(not char.isalpha() or char.islower() for char in value)

    def default_message(self) -> str:
        return "Input must be lowercase"


class StartsWithRule(ValidationRule[str]):
    def __init__(self, prefix: str, message: Optional[str] = None):
        self.prefix = prefix
        super().__init__(message)

    def is_valid(self, value: str) -> bool:
        return value.startswith(self.prefix)

    def default_message(self) -> str:
        return f"Input must start with '{self.prefix}'"


class EndsWithRule(ValidationRule[str]):
    def __init__(self, suffix: str, message: Optional[str] = None):
        self.suffix = suffix
        super().__init__(message)

    def is_valid(self, value: str) -> bool:
        return value.endswith(self.suffix)

    def default_message(self) -> str:
        return f"Input must end with '{self.suffix}'"


class ContainsRule(ValidationRule[str]):
    def __init__(self, substring: str, message: Optional[str] = None):
        self.substring = substring
        super().__init__(message)

    def is_valid(self, value: str) -> bool:
        return self.substring in value

    def default_message(self) -> str:
        return f"Input must contain '{self.substring}'"


class NotContainsRule(ValidationRule[str]):
    def __init__(self, substring: str, message: Optional[str] = None):
        self.substring = substring
        super().__init__(message)

    def is_valid(self, value: str) -> bool:
        return self.substring not in value

    def default_message(self) -> str:
        return f"Input must not contain '{self.substring}'"


class AllowedValuesRule(ValidationRule[str]):
    """Exact, case-sensitive membership. The message lists values in the given order."""

    def __init__(self, allowed_values: Iterable[str], message: Optional[str] = None):
        self.allowed_values = list(dict.fromkeys(allowed_values))
        self._allowed = frozenset(self.allowed_values)
        super().__init__(message)

    def is_valid(self, value: str) -> bool:
        return value in self._allowed

    def default_message(self) -> str:
        return f"Input must be one of: {', '.join(self.allowed_values)}"


class ExcludedValuesRule(ValidationRule[str]):
    def __init__(self, excluded_values: Iterable[str], message: Optional[str] = None):
        self._excluded = frozenset(excluded_values)
        super().__init__(message)

    def is_valid(self, value: str) -> bool:
        return value not in self._excluded

    def default_message(self) -> str:
        return "Input value is not allowed"


class EmailRule(ValidationRule[str]):
    """Loose ``local@domain.tld`` shape check; no DNS or RFC 5322 parsing."""

    def is_valid(self, value: str) -> bool:
        return EMAIL_PATTERN.match(value) is not None

    def default_message(self) -> str:
        return "Input must be a valid email address"


class PhoneRule(ValidationRule[str]):
    """Digits, spaces, dashes, parentheses and ``+`` only."""

    def is_valid(self, value: str) -> bool:
        return PHONE_PATTERN.match(value) is not None

    def default_message(self) -> str:
        return "Input must be a valid phone number"


class FilePathRule(ValidationRule[str]):
    """
    Value must be a syntactically usable path; optionally an existing file.

    Relative paths are resolved against the current working directory and
    ``~`` is expanded.
    """

    def __init__(self, must_exist: bool = False, message: Optional[str] = None):
        self.must_exist = must_exist
        super().__init__(message)

    def is_valid(self, value: str) -> bool:
        if not value or "\x00" in value:
            return False
        try:
            path = Path(os.path.expanduser(value)).resolve()
        except (OSError, RuntimeError, ValueError):
            return False
        return not self.must_exist or path.is_file()

    def default_message(self) -> str:
        if self.must_exist:
            return "File path must exist"
        return "Input must be a valid file path"
