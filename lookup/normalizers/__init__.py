from .rules import RuleNormalizer, norm_cep
from .types import Address, Payload, Quote, Record, Schema
from .base import MalformedPayload, Normalizer, RecordNotFound


def get_default_normalizer() -> Normalizer:
    return RuleNormalizer()


__all__ = [
    "get_default_normalizer",
    "RuleNormalizer",
    "norm_cep",
    "Address",
    "Payload",
    "Quote",
    "Record",
    "Schema",
    "MalformedPayload",
    "Normalizer",
    "RecordNotFound",
]
