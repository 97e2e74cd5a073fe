"""HashedPassword value object.

A digest plus the tag of the algorithm that produced it. HashedPassword is
generic over the tag (HashedPassword[Bcrypt], HashedPassword[Argon2]) and the
tag is also stored at runtime: verifying with a hasher for another algorithm
is refused instead of silently returning False.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

import structlog

from type_more.core.container import get_password_hasher
from type_more.core.enums import ErrorCode
from type_more.core.errors import HashError
from type_more.core.result import Failure, Result, Success
from type_more.domain.value_objects.hash_algorithm import Bcrypt, HashAlgorithm

if TYPE_CHECKING:
    from type_more.domain.protocols import PasswordHashingProtocol

logger = structlog.get_logger(__name__)

A = TypeVar("A", bound=HashAlgorithm)


@dataclass(frozen=True)
class HashedPassword(Generic[A]):
    """Digest produced by exactly one hash algorithm.

    Attributes:
        digest: Self-describing digest string (safe to store).
        algorithm: Tag of the algorithm that produced ``digest``.

    Example:
        >>> hashed = HashedPassword.hash("SecurePass123!").value
        >>> hashed.verify("SecurePass123!")
        Success(value=True)
        >>> hashed.verify("WrongPass")
        Success(value=False)
    """

    digest: str
    algorithm: type[A]

    @classmethod
    def hash(
        cls,
        secret: object,
        cost: int | None = None,
        *,
        algorithm: type[A] = Bcrypt,  # type: ignore[assignment]
        hasher: PasswordHashingProtocol | None = None,
    ) -> Result[HashedPassword[A], HashError]:
        """Hash a secret with the given algorithm.

        Args:
            secret: Plaintext (``str()`` is applied).
            cost: Work factor, or None for the configured default.
            algorithm: Algorithm tag (default Bcrypt).
            hasher: Hashing adapter override (default from the container).

        Returns:
            Success with HashedPassword, or Failure with HashError.
        """
        hasher = hasher or get_password_hasher(algorithm)
        mismatch = _check_algorithm(hasher, algorithm)
        if mismatch is not None:
            return Failure(error=mismatch)

        result = hasher.hash_password(str(secret), cost)
        if isinstance(result, Failure):
            return result
        return Success(value=cls(digest=result.value, algorithm=algorithm))

    @classmethod
    def from_digest(
        cls,
        digest: str,
        *,
        algorithm: type[A] = Bcrypt,  # type: ignore[assignment]
    ) -> HashedPassword[A]:
        """Wrap a stored digest for later verification."""
        return cls(digest=digest, algorithm=algorithm)

    def verify(
        self,
        candidate: object,
        *,
        hasher: PasswordHashingProtocol | None = None,
    ) -> Result[bool, HashError]:
        """Verify a plaintext candidate against the digest.

        Args:
            candidate: Plaintext candidate (``str()`` is applied).
            hasher: Hashing adapter override (default from the container).

        Returns:
            Success(True) on match, Success(False) on mismatch, Failure with
            HashError for a malformed digest or an adapter for another
            algorithm.
        """
        hasher = hasher or get_password_hasher(self.algorithm)
        mismatch = _check_algorithm(hasher, self.algorithm)
        if mismatch is not None:
            return Failure(error=mismatch)
        return hasher.verify_password(str(candidate), self.digest)

    def __str__(self) -> str:
        return self.digest


def _check_algorithm(
    hasher: PasswordHashingProtocol, algorithm: type[HashAlgorithm]
) -> HashError | None:
    if hasher.algorithm is algorithm:
        return None
    logger.warning(
        "hash_algorithm_mismatch",
        expected=algorithm.name,
        actual=hasher.algorithm.name,
    )
    return HashError(
        code=ErrorCode.HASH_ALGORITHM_MISMATCH,
        message=f"{hasher.algorithm.name} hasher cannot handle {algorithm.name} digests",
        algorithm=algorithm.name,
    )
