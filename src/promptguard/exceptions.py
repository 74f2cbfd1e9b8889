"""
Core Exception Classes for promptguard.

User-input problems (unparseable text, failed rules) never surface as
exceptions: the validator loop reports them through the output provider
and asks again. The classes here cover the outcomes that do reach the
caller.

Design Principle:
    exceptions.py (BASE - zero dependencies)
        ^
    validators/ (CORE)
        ^
    builders/, facade.py, console.py, cli.py
"""

from typing import Any, Optional


class PromptGuardError(Exception):
    """Base class for every error raised by promptguard."""


class ValidationCancelledError(PromptGuardError):
    """
    Raised when a validation loop is aborted through its cancellation token.

    The loop checks the token once per attempt, before the prompt is shown.
    No value is returned and the rules are left untouched.

    Attributes:
        prompt: The prompt of the validator that was cancelled.
        attempts: Number of completed prompt/read cycles before cancellation.
    """

    def __init__(self, prompt: Optional[str] = None, attempts: int = 0):
        self.prompt = prompt
        self.attempts = attempts
        message = "Input request was cancelled"
        if prompt:
            message = f"{message}: {prompt!r}"
        super().__init__(message)

    def __repr__(self) -> str:
        return f"ValidationCancelledError(prompt={self.prompt!r}, attempts={self.attempts})"


class SettingsError(PromptGuardError):
    """
    Raised when console settings cannot be loaded or fail validation.

    Attributes:
        source: File path or description of the settings source.
        details: Underlying error (YAML or pydantic) when available.
    """

    def __init__(self, message: str, source: Optional[str] = None, details: Any = None):
        self.source = source
        self.details = details
        super().__init__(message)
