"""
Terminal input and output providers.

:class:`ConsoleInput` reads lines from stdin; :class:`ConsoleOutput` writes
prompts and coloured errors through ``typer.echo`` / ``typer.secho`` and,
after each error, waits for the user to press Enter.

The async methods run the blocking calls with ``asyncio.to_thread``. A
token cancelled before the call raises
:class:`~promptguard.exceptions.ValidationCancelledError`; a read already
waiting on the terminal is not interrupted.
"""

import asyncio
import logging
import sys
from typing import Optional, TextIO

import typer

from .cancellation import CancellationToken
from .exceptions import ValidationCancelledError
from .providers import InputProvider, OutputProvider
from .settings import ConsoleSettings

logger = logging.getLogger(__name__)


def _check(cancellation: Optional[CancellationToken]) -> None:
    if cancellation is not None and cancellation.is_cancelled():
        raise ValidationCancelledError()


def read_line(stream: Optional[TextIO] = None) -> Optional[str]:
    """Read one line; None at end of stream."""
    stream = stream if stream is not None else sys.stdin
    line = stream.readline()
    if line == "":
        return None
    return line.strip()


class ConsoleInput(InputProvider):
    """
    Reads trimmed lines from ``stream`` (stdin by default).

    Args:
        stream: Text stream to read from; resolved at each read when None
            so that redirected ``sys.stdin`` is honoured.
        eof_error: Raise ``EOFError`` at end of stream instead of returning
            None.
    """

    def __init__(self, stream: Optional[TextIO] = None, eof_error: bool = False):
        self.stream = stream
        self.eof_error = eof_error

    def get_input(self) -> Optional[str]:
        line = read_line(self.stream)
        if line is None:
            logger.debug("End of input stream")
            if self.eof_error:
                raise EOFError("End of input")
        return line

    async def get_input_async(
        self, cancellation: Optional[CancellationToken] = None
    ) -> Optional[str]:
        _check(cancellation)
        return await asyncio.to_thread(self.get_input)


class ConsoleOutput(OutputProvider):
    """
    Writes prompts and errors to the terminal.

    Args:
        settings: Separator, prompt template, colour and target stream.
        ack_stream: Stream the "press Enter" acknowledgement is read from
            (stdin by default).
    """

    def __init__(
        self,
        settings: Optional[ConsoleSettings] = None,
        ack_stream: Optional[TextIO] = None,
    ):
        self.settings = settings or ConsoleSettings()
        self.ack_stream = ack_stream

    def display_prompt(self, message: str) -> None:
        typer.echo(self.settings.render_prompt(message), nl=False, err=self.settings.use_stderr)

    def display_error(self, message: str) -> None:
        err = self.settings.use_stderr
        typer.echo("", err=err)
        typer.secho(message, fg=self.settings.error_color, err=err)
        typer.echo(self.settings.continue_message, nl=False, err=err)
        read_line(self.ack_stream)
        typer.echo("", err=err)

    async def display_prompt_async(
        self, message: str, cancellation: Optional[CancellationToken] = None
    ) -> None:
        _check(cancellation)
        await asyncio.to_thread(self.display_prompt, message)

    async def display_error_async(
        self, message: str, cancellation: Optional[CancellationToken] = None
    ) -> None:
        _check(cancellation)
        await asyncio.to_thread(self.display_error, message)
