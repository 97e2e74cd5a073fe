"""Pytest configuration shared by unit and integration tests.

This configuration ensures:
1. Cached settings and hashing adapters never leak between tests
2. Integration tests can opt into cheap work factors (fast_hashing)
3. Unit tests get an in-memory hasher that never touches bcrypt/argon2
"""

import pytest

from type_more.core.config import get_settings
from type_more.core.container import get_password_hasher
from type_more.core.enums import ErrorCode
from type_more.core.errors import HashError
from type_more.core.result import Failure, Result, Success
from type_more.domain.value_objects import Argon2, Bcrypt, HashAlgorithm

HASH_ENV_VARS = (
    "TYPE_MORE_BCRYPT_ROUNDS",
    "TYPE_MORE_ARGON2_TIME_COST",
    "TYPE_MORE_ARGON2_MEMORY_COST",
    "TYPE_MORE_ARGON2_PARALLELISM",
)


@pytest.fixture(autouse=True)
def clear_cached_settings(monkeypatch):
    """Start every test from default settings and fresh adapters."""
    for name in HASH_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    get_password_hasher.cache_clear()
    yield
    get_settings.cache_clear()
    get_password_hasher.cache_clear()


@pytest.fixture
def fast_hashing(monkeypatch):
    """Lowest work factors so real hashing stays fast."""
    monkeypatch.setenv("TYPE_MORE_BCRYPT_ROUNDS", "4")
    monkeypatch.setenv("TYPE_MORE_ARGON2_TIME_COST", "1")
    monkeypatch.setenv("TYPE_MORE_ARGON2_MEMORY_COST", "1024")
    monkeypatch.setenv("TYPE_MORE_ARGON2_PARALLELISM", "1")
    get_settings.cache_clear()
    get_password_hasher.cache_clear()


class FakePasswordHasher:
    """Reversible stand-in for a hashing adapter (unit tests only).

    Digest format: fake$<cost>$<reversed password>. Negative costs fail the
    way a real backend rejects an out-of-range work factor.
    """

    def __init__(self, algorithm: type[HashAlgorithm] = Bcrypt) -> None:
        self.algorithm = algorithm
        self.hash_calls: list[int | None] = []

    def hash_password(self, password: str, cost: int | None = None) -> Result[str, HashError]:
        self.hash_calls.append(cost)
        if cost is not None and cost < 0:
            return Failure(
                error=HashError(
                    code=ErrorCode.HASH_FAILED,
                    message="Invalid rounds",
                    algorithm=self.algorithm.name,
                )
            )
        return Success(value=f"fake${cost}${password[::-1]}")

    def verify_password(self, password: str, password_hash: str) -> Result[bool, HashError]:
        if not password_hash.startswith("fake$"):
            return Failure(
                error=HashError(
                    code=ErrorCode.HASH_VERIFY_FAILED,
                    message="Invalid salt",
                    algorithm=self.algorithm.name,
                )
            )
        return Success(value=password_hash.rsplit("$", 1)[1] == password[::-1])


@pytest.fixture
def fake_hasher():
    return FakePasswordHasher(Bcrypt)


@pytest.fixture
def fake_argon2_hasher():
    return FakePasswordHasher(Argon2)
