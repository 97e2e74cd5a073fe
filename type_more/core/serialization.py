"""JSON bridging for validated text types.

Each validated text type serializes to a single JSON string scalar (never an
object) and deserializes by re-running its full parse. Pydantic does the
JSON encoding and decoding, so the same schema also lets the types be used
as pydantic model fields.

Errors:
    Deserialization failures (not JSON, not a string, or a string that fails
    validation) surface as pydantic's own ValidationError. For validation
    failures its message carries the parse message, e.g.
    "Value error, parse error! invalid email".

Usage:
    from type_more import Email
    from type_more.core.serialization import from_json, to_json

    to_json(email)                      # '"user@example.com"'
    from_json(Email, '"user@example.com"')  # Success(value=Email(...))
"""

from collections.abc import Callable
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError
from pydantic_core import core_schema

from type_more.core.errors import TypeMoreError
from type_more.core.result import Failure, Result, Success

T = TypeVar("T")


def text_value_schema(
    cls: type[T],
    parse: Callable[[str], Result[T, TypeMoreError]],
) -> core_schema.CoreSchema:
    """Build the pydantic core schema for a validated text type.

    JSON input must be a string and is parsed with ``parse``. Python input may
    also be an existing instance. Output is always ``str(value)``.

    Args:
        cls: The validated type.
        parse: The type's parse function.

    Returns:
        Core schema usable from ``__get_pydantic_core_schema__``.
    """

    def _parse_or_raise(raw: str) -> T:
        result = parse(raw)
        if isinstance(result, Failure):
            # pydantic wraps ValueError into its ValidationError
            raise ValueError(str(result.error))
        return result.value

    from_text = core_schema.no_info_after_validator_function(
        _parse_or_raise, core_schema.str_schema()
    )
    return core_schema.json_or_python_schema(
        json_schema=from_text,
        python_schema=core_schema.union_schema(
            [core_schema.is_instance_schema(cls), from_text]
        ),
        serialization=core_schema.plain_serializer_function_ser_schema(str),
    )


@lru_cache(maxsize=None)
def _adapter(cls: type[Any]) -> TypeAdapter[Any]:
    return TypeAdapter(cls)


def to_json(value: Any) -> str:
    """Serialize a validated value to its JSON string scalar.

    Args:
        value: An Email, Url, or other type using ``text_value_schema``.

    Returns:
        The quoted text form, e.g. '"test@example.com"'.
    """
    return _adapter(type(value)).dump_json(value).decode("utf-8")


def from_json(cls: type[T], text: str | bytes) -> Result[T, ValidationError]:
    """Deserialize a JSON string scalar into a validated value.

    Args:
        cls: Target type.
        text: JSON document holding a single string.

    Returns:
        Success with the validated value, or Failure with pydantic's
        ValidationError.
    """
    try:
        return Success(value=_adapter(cls).validate_json(text))
    except ValidationError as e:
        return Failure(error=e)
