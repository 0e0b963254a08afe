# lookup/core/pipeline.py
import logging
from functools import partial
from typing import Union

from .base import PersistenceCall, ProviderCall
from .deadline import Deadline
from .outcome import Outcome, Stage, Success, timeout
from .tickets import run_bounded

log = logging.getLogger(__name__)


def run(
    fetch: ProviderCall,
    persist: PersistenceCall,
    key: str,
    fetch_deadline: Union[Deadline, float],
    persist_deadline: Union[Deadline, float],
) -> Outcome:
    """
    Fetch a record, then persist it, each stage under its own deadline.

    The persist deadline is computed when stage 2 starts (a budget in seconds
    becomes "now + budget"); it never inherits what is left of the fetch
    deadline. A persist failure is terminal: the fetched record is not
    returned to the caller.
    """
    fetched = run_bounded(fetch.name, partial(fetch.fetch, key), Deadline.coerce(fetch_deadline))
    if not fetched.ok:
        log.warning("fetch %s failed for %s: %s", fetch.name, key, fetched)
        return fetched.at_stage(Stage.FETCH)

    deadline = Deadline.coerce(persist_deadline)
    if deadline.expired():
        log.warning("persist budget for %s already elapsed, skipping write", key)
        return timeout(persist.name, "persist deadline already elapsed").at_stage(Stage.PERSIST)

    saved = run_bounded(persist.name, partial(persist.persist, fetched.record), deadline)
    if not saved.ok:
        log.error("fetched %s from %s but could not persist it: %s", key, fetch.name, saved)
        return saved.at_stage(Stage.PERSIST)

    return Success(fetched.record)
