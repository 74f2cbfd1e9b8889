"""
Number parsers: ``int``, ``float`` and ``decimal.Decimal``.

Parsing uses the type constructor, so surrounding whitespace, a leading
sign and ``_`` digit separators are accepted. ``nan`` and ``inf`` are
rejected for ``float`` and ``Decimal``; they defeat every ordering rule.
"""

import math
from decimal import Decimal
from typing import Optional

from ..providers import InputProvider, OutputProvider
from .base import ParseResult, Validator

NUMBER_NAMES = {
    int: "integer",
    float: "float",
    Decimal: "decimal",
}


class NumericValidator(Validator):
    """
    Validator for any number type constructible from a string.

    Args:
        number_type: ``int``, ``float``, ``Decimal`` or another callable that
            raises ``ValueError`` / ``ArithmeticError`` on bad input.
    """

    def __init__(
        self,
        input_provider: InputProvider,
        output_provider: OutputProvider,
        prompt: str,
        number_type: type = float,
    ):
        super().__init__(input_provider, output_provider, prompt)
        self.number_type = number_type
        type_name = NUMBER_NAMES.get(number_type, number_type.__name__)
        self.error_message = f"Please enter a valid {type_name}"

    def try_parse(self, raw: Optional[str]) -> ParseResult:
        if raw is None or not raw.strip():
            return None, self.error_message
        try:
            value = self.number_type(raw.strip())
        except (ValueError, TypeError, ArithmeticError):
            return None, self.error_message
        if isinstance(value, (float, Decimal)) and not _is_finite(value):
            return None, self.error_message
        return value, None


def _is_finite(value) -> bool:
    if isinstance(value, Decimal):
        return value.is_finite()
    return math.isfinite(value)


class IntValidator(NumericValidator):
    def __init__(self, input_provider: InputProvider, output_provider: OutputProvider, prompt: str):
        super().__init__(input_provider, output_provider, prompt, number_type=int)


class FloatValidator(NumericValidator):
    def __init__(self, input_provider: InputProvider, output_provider: OutputProvider, prompt: str):
        super().__init__(input_provider, output_provider, prompt, number_type=float)


class DecimalValidator(NumericValidator):
    def __init__(self, input_provider: InputProvider, output_provider: OutputProvider, prompt: str):
        super().__init__(input_provider, output_provider, prompt, number_type=Decimal)
