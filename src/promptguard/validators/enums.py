"""
Enum parser.

Input is matched against member names (case-insensitive unless
``ignore_case=False``), then against integer values. For ``Flag`` types a
comma-separated list of names is combined with ``|``.
"""

from enum import Enum, Flag
from typing import Optional, Type

from ..providers import InputProvider, OutputProvider
from .base import ParseResult, Validator


class EnumValidator(Validator):
    def __init__(
        self,
        input_provider: InputProvider,
        output_provider: OutputProvider,
        prompt: str,
        enum_type: Type[Enum],
        ignore_case: bool = True,
    ):
        super().__init__(input_provider, output_provider, prompt)
        self.enum_type = enum_type
        self.ignore_case = ignore_case

    def lookup_name(self, name: str) -> Optional[Enum]:
        members = self.enum_type.__members__
        if name in members:
            return members[name]
        if self.ignore_case:
            folded = name.casefold()
            for member_name, member in members.items():
                if member_name.casefold() == folded:
                    return member
        return None

    def lookup_value(self, text: str) -> Optional[Enum]:
        try:
            number = int(text)
        except ValueError:
            return None
        # Flag(-n) is the complement of n, which the user never typed
        if number < 0 and issubclass(self.enum_type, Flag):
            return None
        try:
            return self.enum_type(number)
        except ValueError:
            return None

    def parse(self, text: str) -> Optional[Enum]:
        member = self.lookup_name(text)
        if member is not None:
            return member
        member = self.lookup_value(text)
        if member is not None:
            return member
        if issubclass(self.enum_type, Flag) and "," in text:
            names = [part.strip() for part in text.split(",")]
            flags = [self.lookup_name(name) for name in names if name]
            if flags and all(flag is not None for flag in flags):
                combined = flags[0]
                for flag in flags[1:]:
                    combined |= flag
                return combined
        return None

    def try_parse(self, raw: Optional[str]) -> ParseResult:
        type_name = self.enum_type.__name__
        if raw is None or not raw.strip():
            return None, f"Please enter a valid {type_name}"
        member = self.parse(raw.strip())
        if member is not None:
            return member, None
        valid_values = ", ".join(self.enum_type.__members__)
        return None, f"Please enter a valid {type_name}. Valid values: {valid_values}"
