# lookup/core/tickets.py
import logging
import queue
import threading
from typing import Callable, Optional, Tuple

from .deadline import Deadline
from .outcome import ErrorKind, Failure, Outcome, timeout

log = logging.getLogger(__name__)

# (ticket name, outcome) pairs flow through the conduit
Report = Tuple[str, Outcome]

# put by the caller deadline's cancel hook to wake a waiting coordinator
CANCELLED = ("", None)


def make_conduit(participants: int, deadline: Deadline) -> "queue.Queue[Report]":
    """
    One slot per participant plus one for the cancel wake-up, so nobody
    ever blocks on put.
    """
    conduit: "queue.Queue[Report]" = queue.Queue(maxsize=participants + 1)
    deadline.on_cancel(lambda: conduit.put_nowait(CANCELLED))
    return conduit


class RaceTicket:
    """
    One in-flight call running on its own daemon thread.

    The ticket owns a child of the shared deadline as its cancellation handle
    and reports exactly once into the conduit, even when nobody is listening
    any more.
    """

    def __init__(
        self,
        name: str,
        call: Callable[[Deadline], Outcome],
        deadline: Deadline,
        conduit: "queue.Queue[Report]",
    ):
        self.name = name
        self.deadline = deadline.child()
        self._call = call
        self._conduit = conduit
        self._thread = threading.Thread(target=self._run, name=f"ticket-{name}", daemon=True)

    def start(self) -> "RaceTicket":
        self._thread.start()
        return self

    def cancel(self) -> None:
        self.deadline.cancel()

    def join(self, timeout: Optional[float] = None) -> bool:
        """Wait for the thread to finish; True when it has."""
        self._thread.join(timeout)
        return not self._thread.is_alive()

    def _run(self) -> None:
        try:
            outcome = self._call(self.deadline)
        except Exception as e:
            log.exception("call %s raised instead of returning an outcome", self.name)
            outcome = Failure(ErrorKind.UNREACHABLE, source=self.name, detail=f"{type(e).__name__}: {e}")

        # A result produced after the deadline must never win.
        if outcome.ok and self.deadline.expired():
            outcome = timeout(self.name, "completed after the deadline")

        self._conduit.put_nowait((self.name, outcome))


def run_bounded(name: str, call: Callable[[Deadline], Outcome], deadline: Deadline) -> Outcome:
    """Run a single call on a ticket and wait for it no longer than `deadline`."""
    conduit = make_conduit(1, deadline)
    ticket = RaceTicket(name, call, deadline, conduit).start()
    try:
        report = conduit.get(timeout=deadline.remaining())
        if report is CANCELLED:
            log.warning("%s was cancelled by its caller", name)
            return timeout(name, "cancelled")
        return report[1]
    except queue.Empty:
        log.warning("%s did not finish before its deadline", name)
        return timeout(name)
    finally:
        ticket.cancel()
