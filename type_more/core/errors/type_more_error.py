"""Base error class for Railway-Oriented Programming.

TypeMoreError is the base class for every error the library returns.
Errors flow through the library as data (inside Failure), not exceptions.

Architecture:
- Does NOT inherit from Exception (not raised, returned in Result)
- Uses dataclass inheritance (NOT Protocol/ABC)
- Type-safe with Result[T, TypeMoreError]

Usage:
    from type_more.core.errors import TypeMoreError
    from type_more.core.enums import ErrorCode

    @dataclass(frozen=True, slots=True, kw_only=True)
    class MyError(TypeMoreError):
        pass  # Inherits code, message, details
"""

from dataclasses import dataclass

from type_more.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class TypeMoreError:
    """Base error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code (enum).
        message: Human-readable error message.
        details: Optional context for debugging.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"
