import logging
from pathlib import Path
from typing import Union

from lookup.core import Deadline, ErrorKind, Failure, Outcome, Success
from lookup.core.outcome import timeout
from lookup.normalizers import Quote

log = logging.getLogger(__name__)


class FileQuoteWriter:
    """Writes "Dólar: <bid>" to a text file, replacing what was there."""
    name = "file"

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def persist(self, record: Quote, deadline: Deadline) -> Outcome:
        if deadline.expired():
            return timeout(self.name, "deadline done before the write was issued")
        try:
            self.path.write_text(f"Dólar: {record.bid}", encoding="utf-8")
        except OSError as e:
            log.exception("could not write quote to %s", self.path)
            return Failure(ErrorKind.STORAGE_ERROR, source=self.name, detail=str(e))
        return Success(None)
