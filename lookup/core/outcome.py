# lookup/core/outcome.py
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Generic, Optional, Tuple, TypeVar, Union

R = TypeVar("R")


class ErrorKind(str, Enum):
    INVALID_REQUEST = "invalid_request"
    UNREACHABLE = "unreachable"
    REMOTE_REJECTED = "remote_rejected"
    MALFORMED_RESPONSE = "malformed_response"
    NOT_FOUND = "not_found"
    TIMEOUT = "timeout"
    ALL_PROVIDERS_FAILED = "all_providers_failed"
    STORAGE_ERROR = "storage_error"


class Stage(str, Enum):
    FETCH = "fetch"
    PERSIST = "persist"


@dataclass(frozen=True)
class Success(Generic[R]):
    record: R
    ok = True


@dataclass(frozen=True)
class Failure:
    kind: ErrorKind
    source: Optional[str] = None       # provider or writer that failed
    detail: str = ""
    code: Optional[int] = None         # remote status code (remote_rejected)
    stage: Optional[Stage] = None      # set by the staged pipeline
    errors: Tuple["Failure", ...] = field(default_factory=tuple)
    ok = False

    def at_stage(self, stage: Stage) -> "Failure":
        return replace(self, stage=stage)

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict for JSON responses and log lines."""
        return {
            "kind": self.kind.value,
            "source": self.source,
            "detail": self.detail,
            "code": self.code,
            "stage": self.stage.value if self.stage else None,
            "errors": [e.to_dict() for e in self.errors],
        }

    def __str__(self) -> str:
        parts = [self.kind.value]
        if self.stage:
            parts.append(f"stage={self.stage.value}")
        if self.source:
            parts.append(f"source={self.source}")
        if self.code is not None:
            parts.append(f"code={self.code}")
        if self.detail:
            parts.append(self.detail)
        if self.errors:
            parts.append("[" + "; ".join(str(e) for e in self.errors) + "]")
        return " ".join(parts)


Outcome = Union[Success, Failure]


def timeout(source: Optional[str], detail: str = "deadline exceeded") -> Failure:
    return Failure(ErrorKind.TIMEOUT, source=source, detail=detail)
