"""
ExecutionContext - deadline-bound context shared by a batch of API calls.

A context is created once per user action, handed to every accessor call of
that action and cancelled when the action's scope exits:

    with ExecutionContext.with_timeout(15.0) as ctx:
        for path in paths:
            accessor.pause(ctx, path)

All calls share one deadline. Accessors ask remaining() for the time budget of
their next blocking call; remaining() raises DeadlineExceeded once the deadline
has passed or the context was cancelled.
"""
import threading
import time
from typing import Optional

from resource_browser.errors import DeadlineExceeded


class ExecutionContext:
    """
    Cancellable context with an optional monotonic deadline.

    Attributes:
        deadline: time.monotonic() value after which the context is expired,
            or None for no deadline
    """

    def __init__(self, deadline: Optional[float] = None):
        self.deadline = deadline
        self._cancelled = threading.Event()

    @classmethod
    def with_timeout(cls, timeout: float) -> 'ExecutionContext':
        """Create a context that expires `timeout` seconds from now."""
        return cls(deadline=time.monotonic() + timeout)

    @classmethod
    def background(cls) -> 'ExecutionContext':
        """Create a context without deadline."""
        return cls()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    @property
    def expired(self) -> bool:
        return self.deadline is not None and time.monotonic() >= self.deadline

    def cancel(self) -> None:
        """Cancel the context. Idempotent."""
        self._cancelled.set()

    def check(self) -> None:
        """
        Raises:
            DeadlineExceeded: if the context is cancelled or past its deadline
        """
        if self.cancelled:
            raise DeadlineExceeded("context canceled")
        if self.expired:
            raise DeadlineExceeded("context deadline exceeded")

    def remaining(self) -> Optional[float]:
        """
        Returns the time left before the deadline.

        Returns:
            Seconds left, or None when the context has no deadline

        Raises:
            DeadlineExceeded: if the context is cancelled or past its deadline
        """
        self.check()
        if self.deadline is None:
            return None
        return self.deadline - time.monotonic()

    def __enter__(self) -> 'ExecutionContext':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.cancel()
