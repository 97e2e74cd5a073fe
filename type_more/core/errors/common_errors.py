"""Error kinds returned by the validated types.

Error Types:
- ParseError: malformed input (expected, recoverable)
- UnhandledError: internal failure that should not occur in normal operation
- HashError: failure reported by the hashing collaborator

ParseError and UnhandledError form the parse taxonomy. HashError is kept
apart from it and names the algorithm whose backend reported the failure.

Usage:
    from type_more.core.errors import ParseError
    from type_more.core.enums import ErrorCode
    from type_more.core.result import Failure

    return Failure(error=ParseError(
        code=ErrorCode.INVALID_EMAIL,
        message="invalid email",
    ))
"""

from dataclasses import dataclass

from type_more.core.errors.type_more_error import TypeMoreError


@dataclass(frozen=True, slots=True, kw_only=True)
class ParseError(TypeMoreError):
    """Raw input could not be interpreted as the requested type.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message naming what was invalid.
        details: Additional context.
    """

    def __str__(self) -> str:
        return f"parse error! {self.message}"


@dataclass(frozen=True, slots=True, kw_only=True)
class UnhandledError(TypeMoreError):
    """Unexpected internal failure (e.g. a validation pattern that fails to compile).

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        details: Additional context.
    """

    def __str__(self) -> str:
        return f"unhandled error! {self.message}"


@dataclass(frozen=True, slots=True, kw_only=True)
class HashError(TypeMoreError):
    """Hashing backend failure (invalid cost, malformed digest, ...).

    Attributes:
        code: ErrorCode enum (HASH_FAILED, HASH_VERIFY_FAILED, ...).
        message: Message reported by the hashing backend.
        algorithm: Name of the hash algorithm (bcrypt, argon2).
        details: Additional context.
    """

    algorithm: str

    def __str__(self) -> str:
        return f"{self.algorithm} error! {self.message}"
