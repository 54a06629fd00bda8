"""Result types for railway-oriented programming.

Handlers, repositories and adapters return a Result instead of raising, so
every failure path (validation, missing event, full event, storage or
transport outage) is explicit at the call site and easy to test.

Usage:
    def reserve_seat(count: int, capacity: int) -> Result[int, str]:
        if count >= capacity:
            return Failure(error="Event is full")
        return Success(value=count + 1)

    match reserve_seat(9, 10):
        case Success(value=seats):
            print(f"Seats taken: {seats}")
        case Failure(error=error):
            print(f"Rejected: {error}")
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


Result: TypeAlias = Success[T] | Failure[E]
