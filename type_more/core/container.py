"""Container module - hashing adapter factory.

Adapters are stateless, so one instance per algorithm is shared across the
process. Infrastructure imports happen inside the factory to keep core free
of import-time dependencies on other layers.

Usage:
    from type_more.core.container import get_password_hasher
    from type_more.domain.value_objects import Bcrypt

    hasher = get_password_hasher(Bcrypt)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from type_more.domain.protocols import PasswordHashingProtocol
    from type_more.domain.value_objects.hash_algorithm import HashAlgorithm


@lru_cache()
def get_password_hasher(algorithm: "type[HashAlgorithm]") -> "PasswordHashingProtocol":
    """Get password hashing adapter singleton for an algorithm.

    Default work factors come from Settings (TYPE_MORE_* environment).

    Args:
        algorithm: Algorithm tag (Bcrypt or Argon2).

    Returns:
        Hashing adapter implementing PasswordHashingProtocol.

    Raises:
        ValueError: If no adapter exists for the algorithm.
    """
    from type_more.infrastructure.security import (
        Argon2PasswordService,
        BcryptPasswordService,
    )

    adapters: dict[type[HashAlgorithm], type[PasswordHashingProtocol]] = {
        BcryptPasswordService.algorithm: BcryptPasswordService,
        Argon2PasswordService.algorithm: Argon2PasswordService,
    }
    if algorithm not in adapters:
        raise ValueError(f"No hashing adapter for algorithm: {algorithm!r}")
    return adapters[algorithm]()
