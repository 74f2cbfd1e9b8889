"""Builder for ``Enum`` and ``Flag`` members."""

from enum import Enum, Flag
from typing import Iterable, Optional, Type

from ..providers import InputProvider, OutputProvider
from ..rules.enums import (
    AllowedEnumValuesRule,
    DefinedEnumRule,
    ExcludedEnumValuesRule,
    HasFlagRule,
    NotDefaultEnumRule,
    NotHasFlagRule,
)
from ..validators.enums import EnumValidator
from .base import BuilderBase


class EnumBuilder(BuilderBase):
    """
    Rules for members of ``enum_type``.

    Example:
        >>> color = EnumBuilder(stdin, stdout, "Color", Color).with_not_default().get()
    """

    def __init__(
        self,
        input_provider: InputProvider,
        output_provider: OutputProvider,
        prompt: str,
        enum_type: Type[Enum],
        ignore_case: bool = True,
    ):
        super().__init__(EnumValidator(input_provider, output_provider, prompt, enum_type, ignore_case))
        self.enum_type = enum_type

    def with_defined(self, message: Optional[str] = None) -> "EnumBuilder":
        return self._add_rule(DefinedEnumRule(self.enum_type, message))

    def with_not_default(self, message: Optional[str] = None) -> "EnumBuilder":
        return self._add_rule(NotDefaultEnumRule(self.enum_type, message))

    def with_allowed_values(self, allowed_values: Iterable[Enum], message: Optional[str] = None) -> "EnumBuilder":
        return self._add_rule(AllowedEnumValuesRule(allowed_values, message))

    def with_excluded_values(self, excluded_values: Iterable[Enum], message: Optional[str] = None) -> "EnumBuilder":
        return self._add_rule(ExcludedEnumValuesRule(excluded_values, message))

    def with_has_flag(self, required_flag: Flag, message: Optional[str] = None) -> "EnumBuilder":
        return self._add_rule(HasFlagRule(required_flag, message))

    def with_not_has_flag(self, forbidden_flag: Flag, message: Optional[str] = None) -> "EnumBuilder":
        return self._add_rule(NotHasFlagRule(forbidden_flag, message))
