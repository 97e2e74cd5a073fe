"""Result types for railway-oriented programming.

Every fallible operation in type_more returns a Result instead of raising.
A caller either receives the validated value or a typed error describing
why the input was rejected.

Usage:
    from type_more import Email
    from type_more.core.result import Failure, Success

    match Email.parse("user@example.com"):
        case Success(value=email):
            print(f"Parsed: {email}")
        case Failure(error=error):
            print(f"Rejected: {error}")
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

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


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]
