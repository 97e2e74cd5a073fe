"""Plaintext password with a declared strength tier.

A RawPassword is only created through one of the four tier validators. It
holds the secret until it is hashed, at which point the secret is released
and the handle can no longer be used.

Password Requirements (each tier includes the previous one; lengths are
UTF-8 bytes):
    - weak: at least 8 bytes
    - moderate: plus at least one ASCII digit
    - strong: plus at least one uppercase letter
    - extreme: at least 10 bytes, plus one symbol from ~`@#$%^&*()_+
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import TYPE_CHECKING, Any, NoReturn, TypeVar

from type_more.core.enums import ErrorCode
from type_more.core.errors import HashError, ParseError, TypeMoreError
from type_more.core.result import Failure, Result, Success
from type_more.domain.value_objects.hash_algorithm import Bcrypt, HashAlgorithm
from type_more.domain.value_objects.hashed_password import HashedPassword

if TYPE_CHECKING:
    from type_more.domain.protocols import PasswordHashingProtocol


A = TypeVar("A", bound=HashAlgorithm)

MIN_LENGTH = 8
EXTREME_MIN_LENGTH = 10
SYMBOLS = "~`@#$%^&*()_+"


class PasswordStrength(str, Enum):
    """Strength tiers, ordered by increasing required complexity."""

    WEAK = "weak"
    MODERATE = "moderate"
    STRONG = "strong"
    EXTREME = "extreme"

    def __str__(self) -> str:
        return self.value


def _has_digit(password: str) -> bool:
    return any(c.isascii() and c.isdigit() for c in password)


def _has_uppercase(password: str) -> bool:
    return any(c.isupper() for c in password)


def _has_symbol(password: str) -> bool:
    return any(c in SYMBOLS for c in password)


# tier -> (minimum length, character checks)
_REQUIREMENTS: dict[PasswordStrength, tuple[int, tuple[Callable[[str], bool], ...]]] = {
    PasswordStrength.WEAK: (MIN_LENGTH, ()),
    PasswordStrength.MODERATE: (MIN_LENGTH, (_has_digit,)),
    PasswordStrength.STRONG: (MIN_LENGTH, (_has_digit, _has_uppercase)),
    PasswordStrength.EXTREME: (EXTREME_MIN_LENGTH, (_has_digit, _has_uppercase, _has_symbol)),
}


def meets_strength(password: str, strength: PasswordStrength) -> bool:
    """Check every requirement of a tier (a single failed check rejects).

    Args:
        password: Plaintext candidate.
        strength: Tier to check against.

    Returns:
        True if the password satisfies all of the tier's requirements.
    """
    min_length, checks = _REQUIREMENTS[strength]
    length = len(password.encode("utf-8"))
    return length >= min_length and all(check(password) for check in checks)


class RawPassword:
    """Plaintext password tagged with the tier it was validated against.

    The secret is never shown by ``str``/``repr`` and cannot be pickled.
    ``into_hash`` consumes the password: the secret is cleared and any later
    use of the handle raises RuntimeError.

    Example:
        >>> password = RawPassword.strong("Secret123").value
        >>> password.strength_label()
        'strong'
        >>> hashed = password.into_hash().value
        >>> password.is_consumed
        True
    """

    __slots__ = ("_secret", "_strength")

    def __init__(self, secret: str, strength: PasswordStrength) -> None:
        self._secret: str | None = secret
        self._strength = strength

    @classmethod
    def parse(cls, secret: Any, strength: PasswordStrength) -> Result[RawPassword, TypeMoreError]:
        """Validate a secret against a tier.

        Args:
            secret: Plaintext (``str()`` is applied).
            strength: Requested tier.

        Returns:
            Success with RawPassword recording ``strength``, or Failure with
            ParseError("invalid <tier> password").
        """
        password = str(secret)
        if not meets_strength(password, strength):
            return Failure(
                error=ParseError(
                    code=ErrorCode.INVALID_PASSWORD,
                    message=f"invalid {strength.value} password",
                    details={"strength": strength.value},
                )
            )
        return Success(value=cls(password, strength))

    @classmethod
    def weak(cls, secret: Any) -> Result[RawPassword, TypeMoreError]:
        """At least 8 bytes."""
        return cls.parse(secret, PasswordStrength.WEAK)

    @classmethod
    def moderate(cls, secret: Any) -> Result[RawPassword, TypeMoreError]:
        """At least 8 bytes and an ASCII digit."""
        return cls.parse(secret, PasswordStrength.MODERATE)

    @classmethod
    def strong(cls, secret: Any) -> Result[RawPassword, TypeMoreError]:
        """At least 8 bytes, an ASCII digit and an uppercase letter."""
        return cls.parse(secret, PasswordStrength.STRONG)

    @classmethod
    def extreme(cls, secret: Any) -> Result[RawPassword, TypeMoreError]:
        """At least 10 bytes, an ASCII digit, an uppercase letter and a symbol."""
        return cls.parse(secret, PasswordStrength.EXTREME)

    @property
    def strength(self) -> PasswordStrength:
        return self._strength

    def strength_label(self) -> str:
        return self._strength.value

    @property
    def is_consumed(self) -> bool:
        return self._secret is None

    def into_hash(
        self,
        cost: int | None = None,
        *,
        algorithm: type[A] = Bcrypt,  # type: ignore[assignment]
        hasher: PasswordHashingProtocol | None = None,
    ) -> Result[HashedPassword[A], HashError]:
        """Hash the secret and release it.

        The secret is cleared before hashing runs, so it is gone from this
        handle whether hashing succeeds or fails.

        Args:
            cost: Work factor, or None for the configured default.
            algorithm: Algorithm tag (default Bcrypt).
            hasher: Hashing adapter override.

        Returns:
            Success with HashedPassword, or Failure with HashError.

        Raises:
            RuntimeError: If the password was already consumed.
        """
        secret = self._take_secret()
        return HashedPassword.hash(secret, cost, algorithm=algorithm, hasher=hasher)

    def _take_secret(self) -> str:
        if self._secret is None:
            raise RuntimeError("RawPassword has already been consumed")
        secret, self._secret = self._secret, None
        return secret

    def __str__(self) -> str:
        """Return masked password for security."""
        return "********"

    def __repr__(self) -> str:
        state = "consumed" if self.is_consumed else "********"
        return f"RawPassword({state}, strength={self._strength.value})"

    def __reduce__(self) -> NoReturn:
        raise TypeError("RawPassword cannot be serialized")
