"""
Cooperative cancellation for validation loops.
"""

import threading


class CancellationToken:
    """
    Cooperative cancellation token for validation loops.

    A validator checks the token once per attempt, before displaying the
    prompt. A read that is already waiting for input is not interrupted by
    the token; that is left to the input provider.

    Thread Safety:
        The token is thread-safe and can be cancelled from another thread
        while a synchronous ``get()`` is blocked on the terminal.

    Example:
        >>> token = CancellationToken()
        >>> token.cancel()
        >>> for_integer("Age").get(cancellation=token)
        Traceback (most recent call last):
        ...
        promptguard.exceptions.ValidationCancelledError: ...
    """

    def __init__(self):
        """Initialize the cancellation token."""
        self._cancelled = threading.Event()

    def cancel(self) -> None:
        """Signal cancellation. Thread-safe."""
        self._cancelled.set()

    def is_cancelled(self) -> bool:
        """Check if cancellation was requested. Thread-safe."""
        return self._cancelled.is_set()

    def __repr__(self) -> str:
        return f"CancellationToken(cancelled={self.is_cancelled()})"
