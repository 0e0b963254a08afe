# lookup/core/race.py
import logging
import queue
import time
from functools import partial
from typing import List, Sequence, Union

from .base import ProviderCall
from .deadline import Deadline
from .outcome import ErrorKind, Failure, Outcome, timeout
from .tickets import CANCELLED, RaceTicket, make_conduit

log = logging.getLogger(__name__)


def race(
    providers: Sequence[ProviderCall],
    key: str,
    deadline: Union[Deadline, float],
) -> Outcome:
    """
    Run every provider concurrently under one deadline and return the first success.

    - first Success wins; the other tickets are cancelled and never awaited
    - provider failures do not end the race, only a success or the deadline does
    - if every provider fails before the deadline, return all_providers_failed
      right away with each failure in arrival order
    - deadline with no success -> Failure(timeout)
    - cancelling `deadline` wakes the race at once and cancels every ticket
    """
    if not providers:
        raise ValueError("race needs at least one provider")

    deadline = Deadline.coerce(deadline)
    conduit = make_conduit(len(providers), deadline)
    tickets = [
        RaceTicket(p.name, partial(p.fetch, key), deadline, conduit)
        for p in providers
    ]
    started = time.monotonic()
    for t in tickets:
        t.start()

    failures: List[Failure] = []
    try:
        while len(failures) < len(tickets):
            try:
                report = conduit.get(timeout=deadline.remaining())
            except queue.Empty:
                log.warning(
                    "race for %s timed out after %.3fs (%d/%d providers failed first)",
                    key, time.monotonic() - started, len(failures), len(tickets),
                )
                return timeout(None, f"no provider succeeded within the deadline ({len(failures)} failed)")

            if report is CANCELLED:
                log.warning("race for %s cancelled by its caller", key)
                return timeout(None, "race cancelled")

            name, outcome = report
            if outcome.ok:
                log.info("race for %s won by %s in %.3fs", key, name, time.monotonic() - started)
                return outcome

            log.info("provider %s failed for %s: %s", name, key, outcome)
            failures.append(outcome)

        # Providers that gave up because the deadline fired make this a
        # timeout, not an all-failed race.
        if deadline.expired() or any(f.kind == ErrorKind.TIMEOUT for f in failures):
            log.warning("race for %s timed out, every provider gave up at the deadline", key)
            return timeout(None, f"no provider succeeded within the deadline ({len(failures)} failed)")

        log.warning("race for %s: all %d providers failed", key, len(failures))
        return Failure(
            ErrorKind.ALL_PROVIDERS_FAILED,
            detail=f"all {len(failures)} providers failed",
            errors=tuple(failures),
        )
    finally:
        # Broadcast; stragglers stop at their next checkpoint.
        for t in tickets:
            t.cancel()
