"""
The parse/validate/retry loop.

One :class:`Validator` handles one prompt. Each attempt:

1. checks the cancellation token (raises :class:`ValidationCancelledError`);
2. shows the prompt and reads one line;
3. parses the line with :meth:`Validator.try_parse`; on failure the parse
   message is shown and the attempt ends;
4. runs the rules in insertion order and shows the message of the *first*
   failing rule only;
5. returns the value when every rule passes.

There is no retry limit. The blocking :meth:`Validator.get_valid_input`
runs the async loop to completion, so both paths produce the same
sequence of provider calls.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Generic, List, Optional, Tuple, TypeVar

from ..cancellation import CancellationToken
from ..exceptions import ValidationCancelledError
from ..providers import InputProvider, OutputProvider
from ..rules.base import ValidationRule

logger = logging.getLogger(__name__)

T = TypeVar("T")

ParseResult = Tuple[Optional[T], Optional[str]]


class Validator(ABC, Generic[T]):
    """
    Base class for typed validators.

    Subclasses implement :meth:`try_parse` only.

    Args:
        input_provider: Source of raw lines.
        output_provider: Sink for the prompt and error messages.
        prompt: Text shown before every read.
    """

    def __init__(
        self,
        input_provider: InputProvider,
        output_provider: OutputProvider,
        prompt: str,
    ):
        self.input_provider = input_provider
        self.output_provider = output_provider
        self.prompt = prompt
        self.rules: List[ValidationRule[T]] = []

    def add_rule(self, rule: ValidationRule[T]) -> "Validator[T]":
        """Append ``rule``; rules run in the order they were added."""
        self.rules.append(rule)
        return self

    @abstractmethod
    def try_parse(self, raw: Optional[str]) -> ParseResult:
        """
        Convert one raw line into a value.

        Returns:
            ``(value, None)`` on success, ``(None, message)`` on failure.
        """

    def first_failure(self, value: T) -> Optional[ValidationRule[T]]:
        """Return the first rule ``value`` fails, or None."""
        for rule in self.rules:
            if not rule.is_valid(value):
                return rule
        return None

    async def get_valid_input_async(
        self, cancellation: Optional[CancellationToken] = None
    ) -> T:
        """
        Prompt until the input parses and passes every rule.

        Raises:
            ValidationCancelledError: If ``cancellation`` is set at the start
                of an attempt.
        """
        attempt = 0
        while True:
            if cancellation is not None and cancellation.is_cancelled():
                logger.info("Input cancelled after %d attempt(s): %s", attempt, self.prompt)
                raise ValidationCancelledError(self.prompt, attempts=attempt)

            attempt += 1
            logger.debug("Attempt %d for %r", attempt, self.prompt)

            await self.output_provider.display_prompt_async(self.prompt, cancellation)
            raw = await self.input_provider.get_input_async(cancellation)

            value, error = self.try_parse(raw)
            if error is not None:
                logger.debug("Attempt %d: parse failed", attempt)
                await self.output_provider.display_error_async(error, cancellation)
                continue

            failed = self.first_failure(value)
            if failed is not None:
                logger.debug("Attempt %d: rule %s failed", attempt, type(failed).__name__)
                await self.output_provider.display_error_async(failed.message, cancellation)
                continue

            logger.debug("Attempt %d: accepted", attempt)
            return value

    def get_valid_input(self, cancellation: Optional[CancellationToken] = None) -> T:
        """
        Blocking version of :meth:`get_valid_input_async`.

        Must not be called from inside a running event loop; use the async
        method there.
        """
        return asyncio.run(self.get_valid_input_async(cancellation))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(prompt={self.prompt!r}, rules={len(self.rules)})"
