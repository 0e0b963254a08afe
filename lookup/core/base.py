# lookup/core/base.py
from typing import Any, Protocol

from .deadline import Deadline
from .outcome import Outcome


class ProviderCall(Protocol):
    name: str

    def fetch(self, key: str, deadline: Deadline) -> Outcome:
        """Fetch one record for `key`. Return Failure(timeout) once `deadline` is done."""
        ...


class PersistenceCall(Protocol):
    name: str

    def persist(self, record: Any, deadline: Deadline) -> Outcome:
        """Write `record` durably. Success carries no record."""
        ...
