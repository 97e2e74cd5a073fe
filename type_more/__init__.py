"""type_more: validated string types.

Parse, don't validate: raw strings become Email, Url, RawPassword or
HashedPassword values, or a typed error explaining why they could not.

Usage:
    from type_more import Email, Failure, Success

    match Email.parse("user@example.com"):
        case Success(value=email):
            ...
        case Failure(error=error):
            ...
"""

from type_more.core import (
    ErrorCode,
    Failure,
    HashError,
    ParseError,
    Result,
    Success,
    TypeMoreError,
    UnhandledError,
)
from type_more.domain.value_objects import (
    Argon2,
    Bcrypt,
    Email,
    HashAlgorithm,
    HashedPassword,
    PasswordStrength,
    Protocol,
    RawPassword,
    Url,
)

__version__ = "0.1.0"

__all__ = [
    "Argon2",
    "Bcrypt",
    "Email",
    "ErrorCode",
    "Failure",
    "HashAlgorithm",
    "HashError",
    "HashedPassword",
    "ParseError",
    "PasswordStrength",
    "Protocol",
    "RawPassword",
    "Result",
    "Success",
    "TypeMoreError",
    "UnhandledError",
    "Url",
]
