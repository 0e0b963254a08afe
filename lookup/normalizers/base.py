# lookup/normalizers/base.py
from typing import Protocol
from .types import Payload, Record, Schema


class RecordNotFound(LookupError):
    """The provider answered, but flagged the key as unknown."""


class MalformedPayload(ValueError):
    """The payload does not have the shape the schema expects."""


class Normalizer(Protocol):
    def normalize_record(self, kind: Schema, payload: Payload, source: str) -> Record:
        """Return a NEW provider-agnostic record. Do not mutate `payload`."""
        ...
