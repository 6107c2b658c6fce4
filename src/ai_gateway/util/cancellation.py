"""Cooperative cancellation for gateway calls."""

import threading
from typing import Callable, Optional


class CancellationToken:
    """Token to check for and request cancellation of a dispatch."""

    def __init__(self, is_cancelled_fn: Optional[Callable[[], bool]] = None):
        """
        Args:
            is_cancelled_fn: Optional callback that returns True if cancellation is requested.
                           If None, only cancel() triggers cancellation.
        """
        self._is_cancelled_fn = is_cancelled_fn
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def is_cancelled(self) -> bool:
        """Check if cancellation has been requested."""
        if self._event.is_set():
            return True
        return bool(self._is_cancelled_fn and self._is_cancelled_fn())
