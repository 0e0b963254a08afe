# tests/fakes.py
import threading
import time
from typing import List, Optional

from lookup.core import Deadline, ErrorKind, Failure, Success
from lookup.core.outcome import timeout
from lookup.normalizers import Address, Quote


def address(source: str) -> Address:
    return Address(cep="01001-000", street="Praça da Sé", neighborhood="Sé",
                   city="São Paulo", state="SP", source=source)


class FakeProvider:
    """
    Answers after `delay` seconds with a record (default) or a failure.

    cooperative=True waits with deadline.sleep() and gives up on
    cancellation; cooperative=False blocks with time.sleep() like a
    transport that cannot be interrupted.
    """
    def __init__(self, name: str, delay: float = 0.0, failure: Optional[ErrorKind] = None,
                 record=None, cooperative: bool = True, raises: Optional[Exception] = None):
        self.name = name
        self.delay = delay
        self.failure = failure
        self.record = record
        self.cooperative = cooperative
        self.raises = raises
        self.calls = 0
        self.finished = threading.Event()
        self.saw_cancel = False
        self.closed = False

    def fetch(self, key: str, deadline: Deadline):
        self.calls += 1
        try:
            if self.cooperative:
                if not deadline.sleep(self.delay):
                    self.saw_cancel = deadline.cancelled()
                    return timeout(self.name)
            else:
                time.sleep(self.delay)
            if self.raises is not None:
                raise self.raises
            if self.failure is not None:
                return Failure(self.failure, source=self.name, detail="fake failure")
            return Success(self.record if self.record is not None else address(self.name))
        finally:
            self.finished.set()

    def close(self):
        self.closed = True


class FakeWriter:
    """Persistence call that remembers every record it was asked to write."""
    def __init__(self, name: str = "fake-writer", delay: float = 0.0,
                 failure: Optional[ErrorKind] = None, cooperative: bool = True):
        self.name = name
        self.delay = delay
        self.failure = failure
        self.cooperative = cooperative
        self.records: List = []

    @property
    def calls(self) -> int:
        return len(self.records)

    def persist(self, record, deadline: Deadline):
        self.records.append(record)
        if self.cooperative:
            if not deadline.sleep(self.delay):
                return timeout(self.name)
        else:
            time.sleep(self.delay)
        if self.failure is not None:
            return Failure(self.failure, source=self.name, detail="fake failure")
        return Success(None)


def quote(source: str = "AwesomeAPI", bid: str = "5.4321") -> Quote:
    return Quote(pair="USD-BRL", bid=bid, source=source)
