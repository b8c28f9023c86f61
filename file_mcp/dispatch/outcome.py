from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union


class ErrorType(str, Enum):
    UNKNOWN_OPERATION = "UnknownOperation"
    VALIDATION_ERROR = "ValidationError"
    FILE_NOT_FOUND = "FileNotFound"
    INVALID_LINE_NUMBER = "InvalidLineNumber"
    PATH_OUTSIDE_WORKSPACE = "PathOutsideWorkspace"
    IO_FAILURE = "IOFailure"
    INTERNAL_ERROR = "InternalError"


@dataclass(frozen=True)
class Success:
    payload: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Failure:
    error: ErrorType
    message: str


Outcome = Union[Success, Failure]


@dataclass(frozen=True)
class Envelope:
    """Uniform response for every call; `ok` is always present."""

    ok: bool
    result: dict[str, Any] | None = None
    error: ErrorType | None = None
    message: str | None = None

    @classmethod
    def success(cls, result: dict[str, Any]) -> "Envelope":
        return cls(ok=True, result=result)

    @classmethod
    def failure(cls, error: ErrorType, message: str) -> "Envelope":
        return cls(ok=False, error=error, message=message)

    def to_dict(self) -> dict[str, Any]:
        if self.ok:
            return {"ok": True, "result": self.result or {}}
        return {"ok": False, "error": {"type": self.error.value, "message": self.message}}
