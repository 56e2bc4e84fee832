from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

E = TypeVar("E")
T = TypeVar("T")


@dataclass(frozen=True)
class Failure(Generic[E]):
    error: E

    def is_failure(self) -> bool:
        return True

    def is_success(self) -> bool:
        return False


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    def is_failure(self) -> bool:
        return False

    def is_success(self) -> bool:
        return True


Result = Union[Failure[E], Success[T]]


def failure(error: E) -> Failure[E]:
    return Failure(error)


def success(value: T) -> Success[T]:
    return Success(value)
