"""Password hashing protocol for domain layer.

This protocol defines the interface for password hashing and verification.
Infrastructure layer provides concrete implementations (bcrypt, argon2).

Architecture:
    - Domain defines protocol (port)
    - Infrastructure implements adapters (BcryptPasswordService, Argon2PasswordService)
    - Backend exceptions never cross the port: they come back as HashError
"""

from typing import Protocol

from type_more.core.errors import HashError
from type_more.core.result import Result
from type_more.domain.value_objects.hash_algorithm import HashAlgorithm


class PasswordHashingProtocol(Protocol):
    """Password hashing and verification interface.

    Implementations:
        - BcryptPasswordService: bcrypt, cost = rounds (default 12)
        - Argon2PasswordService: argon2id, cost = time cost (default 3)

    Usage:
        hasher = get_password_hasher(Bcrypt)

        match hasher.hash_password("SecurePass123!"):
            case Success(value=digest):
                ...

        hasher.verify_password("SecurePass123!", digest)  # Success(value=True)
    """

    algorithm: type[HashAlgorithm]

    def hash_password(self, password: str, cost: int | None = None) -> Result[str, HashError]:
        """Hash a plaintext password.

        Args:
            password: Plaintext password to hash.
            cost: Work factor, or None for the configured default.

        Returns:
            Success with the self-describing digest, or Failure with HashError
            (e.g. cost out of range).

        Note:
            - Same password produces different digests (random salt)
        """
        ...

    def verify_password(self, password: str, password_hash: str) -> Result[bool, HashError]:
        """Verify a plaintext password against a digest.

        Args:
            password: Plaintext candidate.
            password_hash: Digest produced by the same algorithm.

        Returns:
            Success(True) on match, Success(False) on mismatch, Failure with
            HashError if the digest is malformed.
        """
        ...
