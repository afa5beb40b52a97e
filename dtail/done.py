"""A thread-safe, idempotent shutdown signal."""

from __future__ import annotations

import threading


class Done:
    """Cleanup/shutdown helper that can be signalled once and waited on."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def __str__(self) -> str:
        return "Done(yes)" if self.is_done() else "Done(no)"

    def is_done(self) -> bool:
        """Return True once shutdown has been called."""
        return self._event.is_set()

    def wait(self, timeout: float | None = None) -> bool:
        """Block until shut down or the timeout passes; return whether done."""
        return self._event.wait(timeout)

    def shutdown(self) -> None:
        """Signal shutdown. Calling it more than once is harmless."""
        self._event.set()