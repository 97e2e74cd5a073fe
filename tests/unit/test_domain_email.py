"""Unit tests for the Email value object.

Tests cover:
- Accepted and rejected addresses (pattern boundaries)
- No normalization: the stored text is the input text
- Direct construction guard, immutability, equality
- str/to_text/repr
"""

from dataclasses import FrozenInstanceError

import pytest

from type_more.core.enums import ErrorCode
from type_more.core.errors import ParseError
from type_more.core.result import Failure, Success
from type_more.domain.value_objects import Email, validate_email


@pytest.mark.unit
class TestEmailParse:
    """Test Email.parse."""

    @pytest.mark.parametrize(
        "raw",
        [
            "test@example.com",
            "user.name+tag@sub.example.co.uk",
            "first_last%x@example-mail.io",
            "UPPER@EXAMPLE.COM",
            "1234@numbers.org",
        ],
    )
    def test_valid_email_round_trips_text(self, raw):
        result = Email.parse(raw)

        assert isinstance(result, Success)
        assert result.value.value == raw
        assert str(result.value) == raw
        assert result.value.to_text() == raw

    def test_email_is_not_case_folded(self):
        result = Email.parse("User@Example.COM")

        assert result.value.value == "User@Example.COM"
        assert result.value != Email.parse("user@example.com").value

    @pytest.mark.parametrize(
        "raw",
        [
            "invalid-email",
            "",
            "a@b",
            "user@example.c",
            "user@example.com1",
            "user example@example.com",
            "user@@example.com",
            "@example.com",
            "user@.com",
            "test@example.com\n",
            " test@example.com",
        ],
    )
    def test_invalid_email_fails_with_parse_error(self, raw):
        result = Email.parse(raw)

        assert isinstance(result, Failure)
        assert isinstance(result.error, ParseError)
        assert result.error.code == ErrorCode.INVALID_EMAIL
        assert result.error.message == "invalid email"
        assert str(result.error) == "parse error! invalid email"

    @pytest.mark.parametrize("raw", [None, 42, b"test@example.com"])
    def test_non_string_fails(self, raw):
        result = Email.parse(raw)

        assert isinstance(result, Failure)
        assert result.error.message == "invalid email"

    def test_validate_email_returns_raw_string(self):
        assert validate_email("a.b@example.com") == Success(value="a.b@example.com")


@pytest.mark.unit
class TestEmailValueObject:
    """Test Email construction guard and value semantics."""

    def test_direct_construction_validates(self):
        with pytest.raises(ValueError, match="invalid email"):
            Email("not-an-email")

    def test_email_is_immutable(self):
        email = Email("test@example.com")

        with pytest.raises(FrozenInstanceError):
            email.value = "other@example.com"  # type: ignore[misc]

    def test_equal_emails_compare_and_hash_equal(self):
        first = Email.parse("test@example.com").value
        second = Email("test@example.com")

        assert first == second
        assert len({first, second}) == 1

    def test_repr(self):
        assert repr(Email("test@example.com")) == "Email('test@example.com')"

    def test_format_uses_text(self):
        assert f"{Email('test@example.com')}" == "test@example.com"
