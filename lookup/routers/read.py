from typing import Any, Dict, List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from lookup.db import get_db
from lookup.models import QuoteRow
from lookup.persistence import recent_quotes

router = APIRouter(prefix="", tags=["read"])

# -------------------------------------------------------------------
# Helper serializer: ORM row -> plain dict for JSON
# -------------------------------------------------------------------
def _quote_to_dict(q: QuoteRow) -> Dict[str, Any]:
    return {
        "id": q.id,
        "pair": q.pair,
        "bid": q.bid,
        "source": q.source,
        "created_at": q.created_at,
    }


@router.get("/cotacoes")
def list_quotes(
    limit: int = Query(20),
    pair: Optional[str] = Query(None, description="Filter by pair, e.g. USD-BRL"),
    db: Session = Depends(get_db),
) -> List[Dict[str, Any]]:
    """Saved quotes, newest first. `limit` is clamped to 1..200."""
    lim = max(1, min(int(limit), 200))
    return [_quote_to_dict(q) for q in recent_quotes(db, limit=lim, pair=pair)]
