"""
Input and output collaborator contracts.

A :class:`~promptguard.validators.base.Validator` never touches the terminal
itself; it talks to one :class:`InputProvider` and one
:class:`OutputProvider`. The console implementations live in
:mod:`promptguard.console`; tests use scripted in-memory ones.

Implementations must provide both the blocking and the ``async`` methods.
The validator only awaits the ``async`` ones, so a provider whose sync
methods are cheap may simply call them from the async twins.
"""

from abc import ABC, abstractmethod
from typing import Optional

from .cancellation import CancellationToken


class InputProvider(ABC):
    """Source of raw lines of user input."""

    @abstractmethod
    def get_input(self) -> Optional[str]:
        """
        Read one line.

        Returns:
            The line with surrounding whitespace removed, or None when no
            input is available (end of stream).
        """

    @abstractmethod
    async def get_input_async(
        self, cancellation: Optional[CancellationToken] = None
    ) -> Optional[str]:
        """Async twin of :meth:`get_input`."""


class OutputProvider(ABC):
    """Sink for prompts and error messages."""

    @abstractmethod
    def display_prompt(self, message: str) -> None:
        """Write ``message`` and a separator, without a trailing newline."""

    @abstractmethod
    def display_error(self, message: str) -> None:
        """
        Write a blank line and ``message``, then wait for one line of
        acknowledgement before returning.
        """

    @abstractmethod
    async def display_prompt_async(
        self, message: str, cancellation: Optional[CancellationToken] = None
    ) -> None:
        """Async twin of :meth:`display_prompt`."""

    @abstractmethod
    async def display_error_async(
        self, message: str, cancellation: Optional[CancellationToken] = None
    ) -> None:
        """Async twin of :meth:`display_error`."""
