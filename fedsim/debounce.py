"""Coalesce rapid updates and act only once input has settled."""

import time
from typing import Any, Callable, Optional


class Debouncer:
    """Holds the latest pushed value until ``window`` seconds pass quietly.

    Every ``push`` supersedes the pending value and restarts the window.
    The clock is injectable so tests can drive time explicitly.
    """

    def __init__(self, window: float = 0.3, clock: Callable[[], float] = time.monotonic):
        if window < 0:
            raise ValueError(f"window must be non-negative, got {window}")
        self.window = window
        self._clock = clock
        self._value: Any = None
        self._pushed_at: Optional[float] = None

    @property
    def pending(self) -> bool:
        return self._pushed_at is not None

    def push(self, value: Any) -> None:
        self._value = value
        self._pushed_at = self._clock()

    def cancel(self) -> None:
        self._value = None
        self._pushed_at = None

    def remaining(self) -> float:
        """Seconds left before the pending value settles (0 if none)."""
        if self._pushed_at is None:
            return 0.0
        return max(0.0, self.window - (self._clock() - self._pushed_at))

    def poll(self) -> Optional[Any]:
        """Return the settled value once, or None while still in the window."""
        if self._pushed_at is None or self.remaining() > 0:
            return None
        value = self._value
        self.cancel()
        return value
