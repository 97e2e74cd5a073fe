"""Integration tests for the raw password -> hashed password flow.

Runs real bcrypt and argon2 through the container, the way callers use the
library: validate a RawPassword, hash it, store the digest, verify later.
"""

import pytest

from type_more import (
    Argon2,
    Bcrypt,
    ErrorCode,
    Failure,
    HashedPassword,
    RawPassword,
    Success,
)


@pytest.mark.integration
class TestHashedPasswordBcrypt:
    """HashedPassword with the default bcrypt adapter."""

    def test_hash_with_default_cost_verifies(self):
        """Default cost (12) end to end."""
        hashed = HashedPassword.hash("SecurePass123!", None).value

        assert hashed.digest.startswith("$2b$12$")
        assert hashed.verify("SecurePass123!") == Success(value=True)
        assert hashed.verify("WrongPass123!") == Success(value=False)

    def test_same_secret_hashes_differently_but_both_verify(self, fast_hashing):
        first = HashedPassword.hash("SecurePass123!").value
        second = HashedPassword.hash("SecurePass123!").value

        assert first.digest != second.digest
        assert first.verify("SecurePass123!") == Success(value=True)
        assert second.verify("SecurePass123!") == Success(value=True)

    def test_invalid_cost_is_hash_error(self, fast_hashing):
        result = HashedPassword.hash("SecurePass123!", 2)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.HASH_FAILED

    def test_stored_digest_verifies_after_reload(self, fast_hashing):
        digest = HashedPassword.hash("SecurePass123!").value.digest

        reloaded = HashedPassword.from_digest(digest, algorithm=Bcrypt)

        assert reloaded.verify("SecurePass123!") == Success(value=True)

    def test_malformed_stored_digest_is_error(self):
        result = HashedPassword.from_digest("not-a-digest").verify("anything")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.HASH_VERIFY_FAILED


@pytest.mark.integration
class TestHashedPasswordArgon2:
    """HashedPassword with the argon2 adapter."""

    def test_argon2_hash_and_verify(self, fast_hashing):
        hashed = HashedPassword.hash("SecurePass123!", algorithm=Argon2).value

        assert hashed.algorithm is Argon2
        assert hashed.digest.startswith("$argon2id$")
        assert hashed.verify("SecurePass123!") == Success(value=True)
        assert hashed.verify("nope") == Success(value=False)

    def test_bcrypt_digest_tagged_argon2_is_error(self, fast_hashing):
        bcrypt_digest = HashedPassword.hash("SecurePass123!").value.digest

        result = HashedPassword.from_digest(bcrypt_digest, algorithm=Argon2).verify(
            "SecurePass123!"
        )

        assert isinstance(result, Failure)
        assert result.error.algorithm == "argon2"


@pytest.mark.integration
class TestRawPasswordIntoHash:
    """RawPassword consumed by real hashing."""

    def test_strong_password_into_bcrypt_hash(self, fast_hashing):
        password = RawPassword.strong("Secret123").value

        hashed = password.into_hash().value

        assert password.is_consumed
        assert hashed.algorithm is Bcrypt
        assert hashed.verify("Secret123") == Success(value=True)

    def test_long_weak_password_into_bcrypt_hash(self, fast_hashing):
        password = RawPassword.weak("a" * 100).value

        hashed = password.into_hash().value

        assert hashed.verify("a" * 100) == Success(value=True)
        assert hashed.verify("b" * 100) == Success(value=False)

    def test_extreme_password_into_argon2_hash(self, fast_hashing):
        password = RawPassword.extreme("Secret123#x").value

        hashed = password.into_hash(algorithm=Argon2).value

        assert hashed.verify("Secret123#x") == Success(value=True)
        with pytest.raises(RuntimeError):
            password.into_hash(algorithm=Argon2)
