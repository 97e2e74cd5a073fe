"""Email value object with validation.

Immutable value object that only exists for well-formed addresses.
The stored string is exactly the input: no normalization, no case-folding.
"""

from dataclasses import dataclass
from typing import Any, ClassVar

from pydantic import GetCoreSchemaHandler, ValidationError
from pydantic_core import CoreSchema

from type_more.core.enums import ErrorCode
from type_more.core.errors import TypeMoreError
from type_more.core.result import Failure, Result, Success
from type_more.core.serialization import from_json, text_value_schema, to_json
from type_more.core.validation import validate_pattern


def validate_email(raw: Any) -> Result[str, TypeMoreError]:
    """Validate email format.

    Args:
        raw: Candidate email address.

    Returns:
        Success with the unchanged address if valid, Failure with ParseError
        ("invalid email") otherwise.
    """
    return validate_pattern(
        raw,
        Email.PATTERN,
        code=ErrorCode.INVALID_EMAIL,
        message="invalid email",
    )


@dataclass(frozen=True)
class Email:
    """Email value object with format validation.

    Valid addresses look like ``local@domain.tld``: the local part is one or
    more of ``[A-Za-z0-9._%+-]``, the domain one or more of ``[A-Za-z0-9.-]``
    and the final label two or more ASCII letters.

    Attributes:
        value: The email address string (validated, unchanged).

    Raises:
        ValueError: If constructed directly with an invalid address.

    Example:
        >>> Email.parse("user@example.com")
        Success(value=Email('user@example.com'))
        >>> str(Email("user@example.com"))
        'user@example.com'
    """

    value: str

    PATTERN: ClassVar[str] = r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}"

    def __post_init__(self) -> None:
        """Validate email format after initialization.

        Raises:
            ValueError: If the address does not match the email pattern.
        """
        result = validate_email(self.value)
        if isinstance(result, Failure):
            raise ValueError(str(result.error))

    @classmethod
    def parse(cls, raw: Any) -> Result["Email", TypeMoreError]:
        """Parse a raw string into an Email.

        Args:
            raw: Candidate email address.

        Returns:
            Success with Email, or Failure with ParseError("invalid email").
        """
        result = validate_email(raw)
        if isinstance(result, Failure):
            return result
        return Success(value=cls(result.value))

    @classmethod
    def from_json(cls, text: str | bytes) -> Result["Email", ValidationError]:
        """Deserialize a JSON string scalar, re-running full validation."""
        return from_json(cls, text)

    def to_json(self) -> str:
        """Serialize to a JSON string scalar, e.g. '"user@example.com"'."""
        return to_json(self)

    def to_text(self) -> str:
        return self.value

    def __str__(self) -> str:
        """Return email address as string.

        Returns:
            str: The email address.
        """
        return self.value

    def __repr__(self) -> str:
        return f"Email('{self.value}')"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        return text_value_schema(cls, cls.parse)
