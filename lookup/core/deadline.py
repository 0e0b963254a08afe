# lookup/core/deadline.py
import threading
import time
from typing import Callable, List, Union


class Deadline:
    """
    An absolute point in time plus a cancellation signal.

    A Deadline is created once ("now + budget") and handed to a bounded
    operation. It is never extended: `child()` shares the same instant and
    adds a separate cancellation handle that is also cancelled whenever the
    parent is.
    """

    def __init__(self, expires_at: float):
        self.expires_at = expires_at
        self._signal = threading.Event()
        self._lock = threading.Lock()
        self._callbacks: List[Callable[[], None]] = []

    @classmethod
    def after(cls, budget: float) -> "Deadline":
        if budget is None or budget < 0:
            raise ValueError(f"budget must be a non-negative number of seconds, got {budget!r}")
        return cls(time.monotonic() + budget)

    @classmethod
    def coerce(cls, value: Union["Deadline", float, int]) -> "Deadline":
        """Use a Deadline as-is; turn a budget in seconds into one starting now."""
        if isinstance(value, Deadline):
            return value
        # An elapsed budget (<= 0) is still a valid deadline, just an expired one.
        return cls(time.monotonic() + max(float(value), 0.0))

    def child(self) -> "Deadline":
        child = Deadline(self.expires_at)
        self.on_cancel(child.cancel)
        return child

    def on_cancel(self, fn: Callable[[], None]) -> None:
        """Run `fn` once when this deadline is cancelled (right away if it already is)."""
        with self._lock:
            if not self._signal.is_set():
                self._callbacks.append(fn)
                return
        fn()

    def cancel(self) -> None:
        with self._lock:
            if self._signal.is_set():
                return
            self._signal.set()
            callbacks, self._callbacks = self._callbacks, []
        for fn in callbacks:
            fn()

    def cancelled(self) -> bool:
        return self._signal.is_set()

    def remaining(self) -> float:
        if self._signal.is_set():
            return 0.0
        return max(self.expires_at - time.monotonic(), 0.0)

    def expired(self) -> bool:
        return self._signal.is_set() or time.monotonic() >= self.expires_at

    def sleep(self, seconds: float) -> bool:
        """
        Wait up to `seconds`, waking early on cancellation or expiry.
        Returns True only if the full duration elapsed inside the deadline.
        """
        budget = self.remaining()
        if seconds >= budget:
            self._signal.wait(budget)
            return False
        return not self._signal.wait(seconds)

    def __repr__(self) -> str:
        return f"<Deadline(remaining={self.remaining():.3f}s, cancelled={self.cancelled()})>"
