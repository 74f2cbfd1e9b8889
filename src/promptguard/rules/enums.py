"""
Rules for ``enum.Enum`` and ``enum.Flag`` members.

Members are rendered by name in messages. For flag types a combination of
members that was never declared by name (``Perm.READ | Perm.WRITE`` when
no ``READ_WRITE`` alias exists) is *not* considered defined.
"""

from enum import Enum, Flag
from typing import Iterable, Optional, Type

from .base import ValidationRule


def member_label(member: Enum) -> str:
    if member.name is not None:
        return member.name
    return str(member.value)


def default_member(enum_type: Type[Enum]) -> Enum:
    """Empty flag for flag types; otherwise the member whose value is 0, else the first member."""
    if issubclass(enum_type, Flag):
        return enum_type(0)
    for member in enum_type.__members__.values():
        if member.value == 0:
            return member
    return next(iter(enum_type))


class DefinedEnumRule(ValidationRule[Enum]):
    def __init__(self, enum_type: Type[Enum], message: Optional[str] = None):
        self.enum_type = enum_type
        super().__init__(message)

    def is_valid(self, value: Enum) -> bool:
        return any(value is member for member in self.enum_type.__members__.values())

    def default_message(self) -> str:
        return f"Value must be a defined {self.enum_type.__name__}"


class NotDefaultEnumRule(ValidationRule[Enum]):
    def __init__(self, enum_type: Type[Enum], message: Optional[str] = None):
        self.enum_type = enum_type
        self.default = default_member(enum_type)
        super().__init__(message)

    def is_valid(self, value: Enum) -> bool:
        return value != self.default

    def default_message(self) -> str:
        return f"Value cannot be the default {self.enum_type.__name__}"


class AllowedEnumValuesRule(ValidationRule[Enum]):
    def __init__(self, allowed_values: Iterable[Enum], message: Optional[str] = None):
        self.allowed_values = list(dict.fromkeys(allowed_values))
        super().__init__(message)

    def is_valid(self, value: Enum) -> bool:
        return value in self.allowed_values

    def default_message(self) -> str:
        labels = ", ".join(member_label(member) for member in self.allowed_values)
        return f"Value must be one of: {labels}"


class ExcludedEnumValuesRule(ValidationRule[Enum]):
    def __init__(self, excluded_values: Iterable[Enum], message: Optional[str] = None):
        self.excluded_values = list(excluded_values)
        super().__init__(message)

    def is_valid(self, value: Enum) -> bool:
        return value not in self.excluded_values

    def default_message(self) -> str:
        return "Value is not allowed"


class HasFlagRule(ValidationRule[Flag]):
    def __init__(self, required_flag: Flag, message: Optional[str] = None):
        self.required_flag = required_flag
        super().__init__(message)

    def is_valid(self, value: Flag) -> bool:
        return value & self.required_flag == self.required_flag

    def default_message(self) -> str:
        return f"Value must have the flag {member_label(self.required_flag)}"


class NotHasFlagRule(ValidationRule[Flag]):
    """Fails when *all* bits of ``forbidden_flag`` are set."""

    def __init__(self, forbidden_flag: Flag, message: Optional[str] = None):
        self.forbidden_flag = forbidden_flag
        super().__init__(message)

    def is_valid(self, value: Flag) -> bool:
        return value & self.forbidden_flag != self.forbidden_flag

    def default_message(self) -> str:
        return f"Value must not have the flag {member_label(self.forbidden_flag)}"
