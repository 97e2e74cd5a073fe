"""Bcrypt password hashing service (adapter).

This service implements the PasswordHashingProtocol using bcrypt.

Architecture:
    - Implements PasswordHashingProtocol (no inheritance required)
    - Structural typing via Protocol
    - Provided by get_password_hasher(Bcrypt)

Cost factor:
    Logarithmic: each +1 doubles computation time. bcrypt accepts 4-31.
    - 4 = fast, tests only
    - 12 = ~250ms (default)

Password length:
    bcrypt only reads the first 72 bytes of a password. Secrets are encoded
    as UTF-8 and truncated to that limit for both hashing and verification.
"""

import bcrypt
import structlog

from type_more.core.config import get_settings
from type_more.core.enums import ErrorCode
from type_more.core.errors import HashError
from type_more.core.result import Failure, Result, Success
from type_more.domain.value_objects.hash_algorithm import Bcrypt

logger = structlog.get_logger(__name__)

MAX_PASSWORD_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:MAX_PASSWORD_BYTES]


class BcryptPasswordService:
    """Bcrypt password hashing service.

    Usage:
        service = BcryptPasswordService(cost_factor=12)

        # Hash password
        result = service.hash_password("SecurePass123!")

        # Verify password
        service.verify_password("SecurePass123!", result.value)  # Success(value=True)
    """

    algorithm = Bcrypt

    def __init__(self, cost_factor: int | None = None) -> None:
        """Initialize bcrypt password service.

        Args:
            cost_factor: Default rounds used when hash_password gets no cost.
                None reads TYPE_MORE_BCRYPT_ROUNDS (default 12).
        """
        self._cost_factor = (
            get_settings().bcrypt_rounds if cost_factor is None else cost_factor
        )

    @property
    def cost_factor(self) -> int:
        return self._cost_factor

    def hash_password(self, password: str, cost: int | None = None) -> Result[str, HashError]:
        """Hash a plaintext password using bcrypt.

        Args:
            password: Plaintext password to hash.
            cost: Rounds for this hash, or None for the service default.

        Returns:
            Success with the digest (bcrypt format: $2b$<cost>$<salt><hash>,
            60 characters), or Failure with HashError when bcrypt rejects the
            cost.

        Note:
            - Each call produces different hash (random salt)
            - Hash is one-way (cannot be reversed)
        """
        rounds = self._cost_factor if cost is None else cost
        try:
            salt = bcrypt.gensalt(rounds=rounds)
            password_hash = bcrypt.hashpw(_encode(password), salt)
        except ValueError as e:
            logger.warning("password_hash_failed", algorithm="bcrypt", cost=rounds, error_message=str(e))
            return Failure(
                error=HashError(
                    code=ErrorCode.HASH_FAILED,
                    message=str(e),
                    algorithm=Bcrypt.name,
                )
            )

        # bcrypt returns bytes
        return Success(value=password_hash.decode("utf-8"))

    def verify_password(self, password: str, password_hash: str) -> Result[bool, HashError]:
        """Verify a plaintext password against a bcrypt hash.

        Args:
            password: Plaintext password to verify.
            password_hash: Stored bcrypt digest.

        Returns:
            Success(True) if the password matches, Success(False) if not,
            Failure with HashError if the digest is not a bcrypt digest.

        Note:
            - bcrypt.checkpw does constant-time comparison
        """
        try:
            return Success(
                value=bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
            )
        except ValueError as e:
            logger.warning("password_verify_failed", algorithm="bcrypt", error_message=str(e))
            return Failure(
                error=HashError(
                    code=ErrorCode.HASH_VERIFY_FAILED,
                    message=str(e),
                    algorithm=Bcrypt.name,
                )
            )
