"""Builders for numbers."""

from ..providers import InputProvider, OutputProvider
from ..validators.numeric import NumericValidator
from .base import BuilderBase, IntegerRulesMixin, OrderingRulesMixin, SignRulesMixin


class NumericBuilder(OrderingRulesMixin, SignRulesMixin, BuilderBase):
    """
    Bounds and sign rules for ``float``, ``Decimal`` or ``int``.

    Example:
        >>> price = NumericBuilder(stdin, stdout, "Price", Decimal).with_positive().get()
    """

    def __init__(
        self,
        input_provider: InputProvider,
        output_provider: OutputProvider,
        prompt: str,
        number_type: type = float,
    ):
        super().__init__(NumericValidator(input_provider, output_provider, prompt, number_type))


class IntegerBuilder(OrderingRulesMixin, SignRulesMixin, IntegerRulesMixin, BuilderBase):
    """Everything :class:`NumericBuilder` offers plus parity, divisibility and Luhn rules."""

    def __init__(self, input_provider: InputProvider, output_provider: OutputProvider, prompt: str):
        super().__init__(NumericValidator(input_provider, output_provider, prompt, int))
