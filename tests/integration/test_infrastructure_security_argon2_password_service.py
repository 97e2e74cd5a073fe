"""Integration tests for Argon2 password hashing service.

Tests the Argon2PasswordService implementation with real argon2-cffi.
Memory cost is kept at 1 MiB so the tests stay fast.
"""

import pytest

from type_more.core.enums import ErrorCode
from type_more.core.result import Failure, Success
from type_more.infrastructure.security import Argon2PasswordService, BcryptPasswordService


@pytest.fixture
def service():
    return Argon2PasswordService(time_cost=1, memory_cost=1024, parallelism=1)


@pytest.mark.integration
class TestArgon2PasswordServiceIntegration:
    """Integration tests for Argon2 password service."""

    def test_hash_password_creates_argon2id_hash(self, service):
        result = service.hash_password("SecurePass123!")

        assert isinstance(result, Success)
        assert result.value.startswith("$argon2id$")
        assert "t=1" in result.value

    def test_explicit_cost_sets_time_cost(self, service):
        result = service.hash_password("SecurePass123!", 2)

        assert "t=2" in result.value

    def test_hash_password_creates_unique_salts(self, service):
        hash1 = service.hash_password("SecurePass123!").value
        hash2 = service.hash_password("SecurePass123!").value

        assert hash1 != hash2
        assert service.verify_password("SecurePass123!", hash1) == Success(value=True)
        assert service.verify_password("SecurePass123!", hash2) == Success(value=True)

    def test_verify_wrong_password_is_false(self, service):
        password_hash = service.hash_password("CorrectPassword123").value

        assert service.verify_password("WrongPassword456", password_hash) == Success(value=False)

    @pytest.mark.parametrize("cost", [0, -1, 2**32, 2**40])
    def test_out_of_range_cost_is_hash_error(self, service, cost):
        result = service.hash_password("SecurePass123!", cost)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.HASH_FAILED
        assert result.error.algorithm == "argon2"

    def test_malformed_hash_is_error(self, service):
        result = service.verify_password("password", "not-an-argon2-hash")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.HASH_VERIFY_FAILED

    def test_bcrypt_digest_is_not_an_argon2_digest(self, service):
        bcrypt_hash = BcryptPasswordService(cost_factor=4).hash_password("password").value

        result = service.verify_password("password", bcrypt_hash)

        assert isinstance(result, Failure)
        assert result.error.algorithm == "argon2"

    def test_oversized_memory_cost_is_hash_error(self):
        service = Argon2PasswordService(time_cost=1, memory_cost=2**40, parallelism=1)

        result = service.hash_password("SecurePass123!")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.HASH_FAILED
