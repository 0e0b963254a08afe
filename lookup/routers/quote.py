import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException

from lookup import settings
from lookup.core import ErrorKind, Failure, PersistenceCall, ProviderCall, Stage, run
from lookup.deps import get_quote_provider, get_quote_writer

log = logging.getLogger(__name__)

# --------------------------------------------------------------------
# Router setup
# --------------------------------------------------------------------
router = APIRouter(prefix="", tags=["quote"])


def _status_for(failure: Failure) -> int:
    """
    fetch timed out          -> 408
    fetch failed otherwise   -> 502
    fetched but not saved    -> 500
    """
    if failure.stage == Stage.PERSIST:
        return 500
    if failure.kind == ErrorKind.TIMEOUT:
        return 408
    return 502


@router.get("/cotacao")
def cotacao(
    provider: ProviderCall = Depends(get_quote_provider),
    writer: PersistenceCall = Depends(get_quote_writer),
) -> Dict[str, Any]:
    """
    Fetch the current quote for QUOTE_PAIR and save it before answering.

    The upstream fetch gets FETCH_BUDGET_S; the insert then gets its own
    PERSIST_BUDGET_S, counted from when the fetch finished.

    Response JSON:
      {"pair": "USD-BRL", "bid": "5.4321", "source": "AwesomeAPI"}
    Failures come back as {"detail": {"kind", "stage", "source", ...}}.
    """
    outcome = run(
        provider,
        writer,
        settings.QUOTE_PAIR,
        settings.FETCH_BUDGET_S,
        settings.PERSIST_BUDGET_S,
    )
    if not outcome.ok:
        status = _status_for(outcome)
        log.warning("GET /cotacao -> %d: %s", status, outcome)
        raise HTTPException(status, outcome.to_dict())

    return outcome.record.model_dump()
