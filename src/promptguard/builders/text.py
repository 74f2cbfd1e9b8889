"""Builders for strings and single characters."""

from typing import Iterable, Optional

from ..providers import InputProvider, OutputProvider
from ..rules.chars import (
    AllowedCharsRule,
    AlphanumericCharRule,
    DigitRule,
    ExcludedCharsRule,
    LetterRule,
    LowerCaseRule,
    PunctuationRule,
    UpperCaseRule,
    WhitespaceRule,
)
from ..rules.numeric import RangeRule
from ..rules.strings import (
    AllowedValuesRule,
    AlphabeticRule,
    AlphanumericStringRule,
    ContainsRule,
    EmailRule,
    EndsWithRule,
    ExcludedValuesRule,
    FilePathRule,
    LowerCaseStringRule,
    NoDigitsRule,
    NotContainsRule,
    NumericStringRule,
    PhoneRule,
    RegexRule,
    StartsWithRule,
    StringLengthRule,
    UpperCaseStringRule,
)
from ..validators.text import CharValidator, StringValidator
from .base import BuilderBase


class StringBuilder(BuilderBase):
    """
    Rules for trimmed, non-blank strings.

    Example:
        >>> username = (
        ...     StringBuilder(stdin, stdout, "Username")
        ...     .with_length_range(3, 16)
        ...     .with_regex(r"^[a-z_][a-z0-9_]*$", "Lowercase letters, digits and _ only")
        ...     .get()
        ... )
    """

    def __init__(self, input_provider: InputProvider, output_provider: OutputProvider, prompt: str):
        super().__init__(StringValidator(input_provider, output_provider, prompt))

    def with_length_range(
        self,
        min_length: Optional[int] = None,
        max_length: Optional[int] = None,
        message: Optional[str] = None,
    ) -> "StringBuilder":
        return self._add_rule(StringLengthRule(min_length, max_length, message))

    def with_regex(self, pattern: str, message: Optional[str] = None) -> "StringBuilder":
        """Raises ``re.error`` right away for a malformed pattern."""
        return self._add_rule(RegexRule(pattern, message))

    def with_no_digits(self, message: Optional[str] = None) -> "StringBuilder":
        return self._add_rule(NoDigitsRule(message))

    def with_alphabetic(self, message: Optional[str] = None) -> "StringBuilder":
        return self._add_rule(AlphabeticRule(message))

    def with_alphanumeric(self, message: Optional[str] = None) -> "StringBuilder":
        return self._add_rule(AlphanumericStringRule(message))

    def with_numeric_only(self, message: Optional[str] = None) -> "StringBuilder":
        return self._add_rule(NumericStringRule(message))

    def with_upper_case(self, message: Optional[str] = None) -> "StringBuilder":
        return self._add_rule(UpperCaseStringRule(message))

    def with_lower_case(self, message: Optional[str] = None) -> "StringBuilder":
        return self._add_rule(LowerCaseStringRule(message))

    def with_start(self, prefix: str, message: Optional[str] = None) -> "StringBuilder":
        return self._add_rule(StartsWithRule(prefix, message))

    def with_end(self, suffix: str, message: Optional[str] = None) -> "StringBuilder":
        return self._add_rule(EndsWithRule(suffix, message))

    def with_contains(self, substring: str, message: Optional[str] = None) -> "StringBuilder":
        return self._add_rule(ContainsRule(substring, message))

    def with_not_contains(self, substring: str, message: Optional[str] = None) -> "StringBuilder":
        return self._add_rule(NotContainsRule(substring, message))

    def with_allowed_values(self, allowed_values: Iterable[str], message: Optional[str] = None) -> "StringBuilder":
        return self._add_rule(AllowedValuesRule(allowed_values, message))

    def with_excluded_values(self, excluded_values: Iterable[str], message: Optional[str] = None) -> "StringBuilder":
        return self._add_rule(ExcludedValuesRule(excluded_values, message))

    def with_email_format(self, message: Optional[str] = None) -> "StringBuilder":
        return self._add_rule(EmailRule(message))

    def with_phone_format(self, message: Optional[str] = None) -> "StringBuilder":
        return self._add_rule(PhoneRule(message))

    def with_file_path_format(self, must_exist: bool = False, message: Optional[str] = None) -> "StringBuilder":
        return self._add_rule(FilePathRule(must_exist, message))


class CharBuilder(BuilderBase):
    """Rules for a single character."""

    def __init__(self, input_provider: InputProvider, output_provider: OutputProvider, prompt: str):
        super().__init__(CharValidator(input_provider, output_provider, prompt))

    def with_letter(self, message: Optional[str] = None) -> "CharBuilder":
        return self._add_rule(LetterRule(message))

    def with_digit(self, message: Optional[str] = None) -> "CharBuilder":
        return self._add_rule(DigitRule(message))

    def with_upper_case(self, message: Optional[str] = None) -> "CharBuilder":
        return self._add_rule(UpperCaseRule(message))

    def with_lower_case(self, message: Optional[str] = None) -> "CharBuilder":
        return self._add_rule(LowerCaseRule(message))

    def with_alphanumeric(self, message: Optional[str] = None) -> "CharBuilder":
        return self._add_rule(AlphanumericCharRule(message))

    def with_whitespace(self, message: Optional[str] = None) -> "CharBuilder":
        return self._add_rule(WhitespaceRule(message))

    def with_punctuation(self, message: Optional[str] = None) -> "CharBuilder":
        return self._add_rule(PunctuationRule(message))

    def with_allowed_chars(self, allowed_chars: str, message: Optional[str] = None) -> "CharBuilder":
        return self._add_rule(AllowedCharsRule(allowed_chars, message))

    def with_excluded_chars(self, excluded_chars: str, message: Optional[str] = None) -> "CharBuilder":
        return self._add_rule(ExcludedCharsRule(excluded_chars, message))

    def with_range(self, min_char: str, max_char: str, message: Optional[str] = None) -> "CharBuilder":
        return self._add_rule(RangeRule(min_char, max_char, message))
