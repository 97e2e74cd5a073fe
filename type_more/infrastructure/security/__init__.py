"""Security infrastructure adapters.

This package contains the password hashing implementations:
- bcrypt (default)
- argon2id (argon2-cffi)
"""

from type_more.infrastructure.security.argon2_password_service import Argon2PasswordService
from type_more.infrastructure.security.bcrypt_password_service import BcryptPasswordService

__all__ = [
    "Argon2PasswordService",
    "BcryptPasswordService",
]
