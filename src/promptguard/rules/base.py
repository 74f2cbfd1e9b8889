"""
Rule contract shared by every validator.

A rule is a pure predicate over an already-parsed value plus the message
shown when the predicate fails. The message is built once, in ``__init__``;
a caller-supplied message (even an empty one) replaces the default.
"""

from abc import ABC, abstractmethod
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class ValidationRule(ABC, Generic[T]):
    """
    Base class for validation rules.

    Subclasses store their parameters *before* calling ``super().__init__``
    so that :meth:`default_message` can use them.

    Attributes:
        message: Human-readable explanation shown when ``is_valid`` fails.
    """

    def __init__(self, message: Optional[str] = None):
        self.message = message if message is not None else self.default_message()

    @abstractmethod
    def is_valid(self, value: T) -> bool:
        """Return True when ``value`` satisfies the rule."""

    def default_message(self) -> str:
        """Message used when the caller did not supply one."""
        return "Invalid value"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r})"


class PredicateRule(ValidationRule[T]):
    """
    Rule backed by a plain predicate function.

    Used for rule families whose datetime/date/time variants share one
    implementation and differ only in how a comparable value is extracted.
    """

    def __init__(self, predicate: Callable[[T], bool], message: str):
        self._predicate = predicate
        super().__init__(message)

    def is_valid(self, value: T) -> bool:
        return bool(self._predicate(value))


class CustomRule(PredicateRule[T]):
    """
    User-supplied predicate with a mandatory message.

    Example:
        >>> rule = CustomRule(lambda n: n != 13, "Unlucky numbers are not accepted")
        >>> rule.is_valid(12)
        True
    """

    def __init__(self, predicate: Callable[[T], bool], message: str):
        super().__init__(predicate, message)
