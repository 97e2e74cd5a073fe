"""Argon2id password hashing service (adapter) using argon2-cffi.

Cost is the argon2 time cost (iterations). Memory cost and parallelism are
fixed per service instance. Verification reads parameters from the digest
itself, so digests made with other parameters still verify.
"""

import structlog
from argon2 import PasswordHasher
from argon2.exceptions import (
    HashingError,
    InvalidHashError,
    VerificationError,
    VerifyMismatchError,
)

from type_more.core.config import get_settings
from type_more.core.enums import ErrorCode
from type_more.core.errors import HashError
from type_more.core.result import Failure, Result, Success
from type_more.domain.value_objects.hash_algorithm import Argon2

logger = structlog.get_logger(__name__)

# argon2 parameters are 32-bit unsigned ints
MAX_TIME_COST = 2**32 - 1


class Argon2PasswordService:
    """Argon2id password hashing service.

    Args:
        time_cost: Default iterations (None reads TYPE_MORE_ARGON2_TIME_COST).
        memory_cost: Memory in KiB (None reads TYPE_MORE_ARGON2_MEMORY_COST).
        parallelism: Lanes (None reads TYPE_MORE_ARGON2_PARALLELISM).
    """

    algorithm = Argon2

    def __init__(
        self,
        time_cost: int | None = None,
        memory_cost: int | None = None,
        parallelism: int | None = None,
    ) -> None:
        settings = get_settings()
        self._time_cost = settings.argon2_time_cost if time_cost is None else time_cost
        self._memory_cost = settings.argon2_memory_cost if memory_cost is None else memory_cost
        self._parallelism = settings.argon2_parallelism if parallelism is None else parallelism

    def _hasher(self, time_cost: int) -> PasswordHasher:
        return PasswordHasher(
            time_cost=time_cost,
            memory_cost=self._memory_cost,
            parallelism=self._parallelism,
        )

    def hash_password(self, password: str, cost: int | None = None) -> Result[str, HashError]:
        """Hash a plaintext password using Argon2id.

        Args:
            password: Plaintext password to hash.
            cost: Time cost for this hash, or None for the service default.

        Returns:
            Success with the digest ($argon2id$v=19$m=...,t=...,p=...$...),
            or Failure with HashError.
        """
        time_cost = self._time_cost if cost is None else cost
        if not 1 <= time_cost <= MAX_TIME_COST:
            return self._failure(
                ErrorCode.HASH_FAILED,
                f"time cost must be between 1 and {MAX_TIME_COST}, got {time_cost}",
            )
        try:
            return Success(value=self._hasher(time_cost).hash(password))
        except (HashingError, OverflowError) as e:
            logger.warning("password_hash_failed", algorithm="argon2", cost=time_cost, error_message=str(e))
            return self._failure(ErrorCode.HASH_FAILED, str(e))

    def verify_password(self, password: str, password_hash: str) -> Result[bool, HashError]:
        """Verify a plaintext password against an Argon2 hash.

        Returns:
            Success(True) on match, Success(False) on mismatch, Failure with
            HashError for malformed digests.
        """
        try:
            return Success(value=self._hasher(self._time_cost).verify(password_hash, password))
        except VerifyMismatchError:
            return Success(value=False)
        except (InvalidHashError, VerificationError) as e:
            logger.warning("password_verify_failed", algorithm="argon2", error_message=str(e))
            return self._failure(ErrorCode.HASH_VERIFY_FAILED, str(e) or "invalid hash")

    @staticmethod
    def _failure(code: ErrorCode, message: str) -> Failure[HashError]:
        return Failure(error=HashError(code=code, message=message, algorithm=Argon2.name))
