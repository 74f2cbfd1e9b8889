"""
GUID rules for ``uuid.UUID`` values.
"""

from typing import Iterable, Optional
from uuid import UUID

from .base import ValidationRule

EMPTY_GUID = UUID(int=0)


class NonEmptyGuidRule(ValidationRule[UUID]):
    def is_valid(self, value: UUID) -> bool:
        return value != EMPTY_GUID

    def default_message(self) -> str:
        return "GUID cannot be empty"


class GuidVersionRule(ValidationRule[UUID]):
    """
    Version is the high nibble of byte 7 in the little-endian (``bytes_le``)
    layout, i.e. the first hex digit of the third group.

    Example:
        >>> GuidVersionRule(4).is_valid(UUID("16fd2706-8baf-433b-82eb-8c7fada847da"))
        True
    """

    def __init__(self, version: int, message: Optional[str] = None):
        self.version = version
        super().__init__(message)

    def is_valid(self, value: UUID) -> bool:
        return (value.bytes_le[7] & 0xF0) >> 4 == self.version

    def default_message(self) -> str:
        return f"GUID must be version {self.version}"


class ExcludedGuidRule(ValidationRule[UUID]):
    def __init__(self, excluded: Iterable[UUID], message: Optional[str] = None):
        self._excluded = frozenset(excluded)
        super().__init__(message)

    def is_valid(self, value: UUID) -> bool:
        return value not in self._excluded

    def default_message(self) -> str:
        return "This GUID is not allowed"


class AllowedGuidRule(ValidationRule[UUID]):
    def __init__(self, allowed: Iterable[UUID], message: Optional[str] = None):
        self._allowed = frozenset(allowed)
        super().__init__(message)

    def is_valid(self, value: UUID) -> bool:
        return value in self._allowed

    def default_message(self) -> str:
        return "This GUID is not in the allowed list"
