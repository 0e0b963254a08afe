import logging
from typing import Callable, List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from lookup.core import Deadline, ErrorKind, Failure, Outcome, Success
from lookup.core.outcome import timeout
from lookup.models import QuoteRow
from lookup.normalizers import Quote

log = logging.getLogger(__name__)


class SqlQuoteWriter:
    """
    Inserts one quote row per call, bounded by the caller's deadline.

    The write runs on a ticket thread, so it opens its own session instead of
    sharing the request's. The deadline is checked before the insert and again
    before commit: a write that ran past its deadline by then is rolled back.
    A deadline that passes during commit() itself does not stop it.
    """
    name = "sql"

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def persist(self, record: Quote, deadline: Deadline) -> Outcome:
        if deadline.expired():
            return timeout(self.name, "deadline done before the write was issued")

        db = self.session_factory()
        try:
            db.add(QuoteRow(pair=record.pair, bid=record.bid, source=record.source))
            db.flush()
            if deadline.expired():
                db.rollback()
                log.warning("quote insert exceeded its deadline, rolled back: %s", record)
                return timeout(self.name, "write exceeded the deadline and was rolled back")
            # last checkpoint: a deadline that fires inside commit() cannot stop
            # it, so the row may land after the pipeline reported a timeout
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            log.exception("quote insert failed: pair=%s bid=%s", record.pair, record.bid)
            return Failure(ErrorKind.STORAGE_ERROR, source=self.name, detail=str(e))
        finally:
            db.close()

        return Success(None)


def recent_quotes(db: Session, limit: int = 20, pair: str | None = None) -> List[QuoteRow]:
    """Newest first."""
    stmt = select(QuoteRow).order_by(QuoteRow.id.desc()).limit(limit)
    if pair:
        stmt = stmt.where(QuoteRow.pair == pair)
    return list(db.execute(stmt).scalars().all())
