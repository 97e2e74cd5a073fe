"""Hash algorithm tags.

Tags carry no data. They parameterize HashedPassword so a type checker can
tell a bcrypt digest from an argon2 digest, and are kept at runtime so the
hashing adapters can refuse a digest produced by another algorithm.
"""

from typing import ClassVar


class HashAlgorithm:
    """Base class for hash algorithm tags (never instantiated)."""

    name: ClassVar[str]


class Bcrypt(HashAlgorithm):
    """bcrypt ($2b$ digests)."""

    name = "bcrypt"


class Argon2(HashAlgorithm):
    """Argon2id ($argon2id$ digests)."""

    name = "argon2"
