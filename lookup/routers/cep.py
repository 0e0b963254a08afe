import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException

from lookup import settings
from lookup.core import ErrorKind, Failure, ProviderCall, race
from lookup.deps import get_cep_providers

log = logging.getLogger(__name__)

router = APIRouter(prefix="", tags=["cep"])


def _status_for(failure: Failure) -> int:
    if failure.kind == ErrorKind.TIMEOUT:
        return 504
    kinds = {e.kind for e in failure.errors}
    if kinds == {ErrorKind.INVALID_REQUEST}:
        return 400
    if kinds == {ErrorKind.NOT_FOUND}:
        return 404
    return 502


@router.get("/cep/{cep}")
def lookup_cep(
    cep: str,
    providers: List[ProviderCall] = Depends(get_cep_providers),
) -> Dict[str, Any]:
    """
    Race every address provider for `cep`; the first valid answer wins.

    Returns the address with `source` naming the winning provider.
    400 when the CEP is malformed, 404 when every provider says it does
    not exist, 504 when nobody answered within CEP_BUDGET_S.
    """
    outcome = race(providers, cep, settings.CEP_BUDGET_S)
    if not outcome.ok:
        status = _status_for(outcome)
        log.info("GET /cep/%s -> %d: %s", cep, status, outcome)
        raise HTTPException(status, outcome.to_dict())
    return outcome.record.model_dump()
