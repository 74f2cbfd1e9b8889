"""Text parsers: non-blank strings and single characters."""

from typing import Optional

from .base import ParseResult, Validator


class StringValidator(Validator):
    """Accepts any non-blank line; the value is returned trimmed."""

    def try_parse(self, raw: Optional[str]) -> ParseResult:
        if raw is None or not raw.strip():
            return None, "Input cannot be empty or whitespace"
        return raw.strip(), None


class CharValidator(Validator):
    """Accepts exactly one character. A lone space is never delivered since input is trimmed."""

    def try_parse(self, raw: Optional[str]) -> ParseResult:
        if raw is None or len(raw) != 1:
            return None, "Please enter a single character"
        return raw, None
