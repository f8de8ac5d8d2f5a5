"""src/expsmooth/common/context.py

Cooperative cancellation for long-running loops.

Every fit/predict/metric loop calls ``ctx.check()`` once per element. A
cancelled context (or one whose deadline has passed) makes ``check``
raise ``CancelledError``; nothing is returned half-done.
"""

from __future__ import annotations

import threading
import time

from expsmooth.common.errors import CancelledError


class Context:
    """Cancellation signal shared between a caller and the engine."""

    def __init__(self, *, timeout: float | None = None) -> None:
        self._event = threading.Event()
        self._reason = "context cancelled"
        self._deadline = None if timeout is None else time.monotonic() + float(timeout)

    @classmethod
    def background(cls) -> "Context":
        """A context that is never cancelled and has no deadline."""
        return cls()

    @classmethod
    def with_timeout(cls, seconds: float) -> "Context":
        return cls(timeout=seconds)

    def cancel(self, reason: str = "context cancelled") -> None:
        self._reason = reason
        self._event.set()

    @property
    def cancelled(self) -> bool:
        if self._event.is_set():
            return True
        if self._deadline is not None and time.monotonic() >= self._deadline:
            self._reason = "context deadline exceeded"
            self._event.set()
            return True
        return False

    def check(self) -> None:
        """Raise CancelledError if the context is done."""
        if self.cancelled:
            raise CancelledError(self._reason)


def ensure_context(ctx: Context | None) -> Context:
    return ctx if ctx is not None else Context.background()
