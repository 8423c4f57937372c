"""Tagged results returned by the data-access layer.

Repositories never raise for expected storage outcomes (missing row,
uniqueness violation, driver error). They return ``Ok`` with the value or
``Failure`` with one of the ``FailureKind`` tags, and the caller decides
which status code the failure deserves.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class FailureKind(str, Enum):
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    EXECUTION = "execution"


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True, slots=True)
class Failure:
    kind: FailureKind
    message: str

    @classmethod
    def not_found(cls, message: str) -> Failure:
        return cls(FailureKind.NOT_FOUND, message)

    @classmethod
    def conflict(cls, message: str) -> Failure:
        return cls(FailureKind.CONFLICT, message)

    @classmethod
    def execution(cls, message: str) -> Failure:
        return cls(FailureKind.EXECUTION, message)


Result = Union[Ok[T], Failure]
