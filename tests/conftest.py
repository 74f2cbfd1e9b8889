"""
Pytest configuration and shared fixtures for promptguard tests.

Provides scripted in-memory providers so validators can be driven without a
terminal. ``ScriptedInput`` and ``RecordingOutput`` share one ``trace`` list,
which records every provider call in order.
"""

import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

# Ensure src and tests directories are in path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent))

from promptguard.providers import InputProvider, OutputProvider


class ScriptExhausted(Exception):
    """Raised when a validator reads more lines than the script holds."""


class ScriptedInput(InputProvider):
    """Returns the scripted lines in order, trimmed like the console adapter."""

    def __init__(self, lines: Sequence[Optional[str]], trace: Optional[List[Tuple[str, Optional[str]]]] = None):
        self.lines = list(lines)
        self.trace = trace if trace is not None else []
        self.reads = 0

    def get_input(self) -> Optional[str]:
        if self.reads >= len(self.lines):
            raise ScriptExhausted(f"script ended after {self.reads} read(s)")
        line = self.lines[self.reads]
        self.reads += 1
        self.trace.append(("read", line))
        return line.strip() if line is not None else None

    async def get_input_async(self, cancellation=None) -> Optional[str]:
        return self.get_input()


class RecordingOutput(OutputProvider):
    """Records prompts and errors; the acknowledgement gate is a no-op."""

    def __init__(self, trace: Optional[List[Tuple[str, Optional[str]]]] = None):
        self.trace = trace if trace is not None else []

    @property
    def prompts(self) -> List[str]:
        return [message for kind, message in self.trace if kind == "prompt"]

    @property
    def errors(self) -> List[str]:
        return [message for kind, message in self.trace if kind == "error"]

    def display_prompt(self, message: str) -> None:
        self.trace.append(("prompt", message))

    def display_error(self, message: str) -> None:
        self.trace.append(("error", message))

    async def display_prompt_async(self, message: str, cancellation=None) -> None:
        self.display_prompt(message)

    async def display_error_async(self, message: str, cancellation=None) -> None:
        self.display_error(message)


def scripted(*lines: Optional[str]) -> Tuple[ScriptedInput, RecordingOutput]:
    """Create a provider pair sharing one trace."""
    trace: List[Tuple[str, Optional[str]]] = []
    return ScriptedInput(lines, trace), RecordingOutput(trace)


__all__ = [
    "ScriptExhausted",
    "ScriptedInput",
    "RecordingOutput",
    "scripted",
]
