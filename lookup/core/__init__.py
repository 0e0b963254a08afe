from .base import PersistenceCall, ProviderCall
from .deadline import Deadline
from .outcome import ErrorKind, Failure, Outcome, Stage, Success
from .pipeline import run
from .race import race

__all__ = [
    "Deadline",
    "ErrorKind",
    "Failure",
    "Outcome",
    "PersistenceCall",
    "ProviderCall",
    "Stage",
    "Success",
    "race",
    "run",
]
