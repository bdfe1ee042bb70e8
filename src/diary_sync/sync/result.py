"""Discriminated outcome of a diary operation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Literal, TypeVar, Union

from diary_sync.exceptions import DiarySyncError, UnexpectedError

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """The operation completed and produced a value."""

    value: T
    ok: Literal[True] = True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    """The operation failed; ``error`` says how."""

    error: DiarySyncError
    ok: Literal[False] = False

    @property
    def message(self) -> str:
        """Short human-readable text for the user."""
        return self.error.message

    def unwrap(self) -> None:
        raise self.error


SyncResult = Union[Success[T], Failure]


def unexpected(exc: BaseException) -> UnexpectedError:
    """Wrap an arbitrary exception caught at an operation boundary."""
    error = UnexpectedError(
        f"Unexpected error: {exc}",
        context={"error_type": type(exc).__name__},
    )
    error.__cause__ = exc
    return error
