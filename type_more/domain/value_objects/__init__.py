"""Domain value objects with validation.

Immutable value objects constructed only through validating parse functions.
"""

from type_more.domain.value_objects.email import Email, validate_email
from type_more.domain.value_objects.hash_algorithm import Argon2, Bcrypt, HashAlgorithm
from type_more.domain.value_objects.hashed_password import HashedPassword
from type_more.domain.value_objects.password import (
    PasswordStrength,
    RawPassword,
    meets_strength,
)
from type_more.domain.value_objects.url import Protocol, Url

__all__ = [
    "Argon2",
    "Bcrypt",
    "Email",
    "HashAlgorithm",
    "HashedPassword",
    "PasswordStrength",
    "Protocol",
    "RawPassword",
    "Url",
    "meets_strength",
    "validate_email",
]
