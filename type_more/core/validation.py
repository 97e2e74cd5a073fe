"""Pattern validation returning Result types.

Validation patterns are the contract for what counts as a valid value.
They are applied with full-string matching (anchored at both ends, no
trailing-newline leniency).

Usage:
    from type_more.core.enums import ErrorCode
    from type_more.core.validation import validate_pattern

    result = validate_pattern(
        raw,
        EMAIL_PATTERN,
        code=ErrorCode.INVALID_EMAIL,
        message="invalid email",
    )
"""

import re
from functools import lru_cache
from typing import Any

import structlog

from type_more.core.enums import ErrorCode
from type_more.core.errors import ParseError, UnhandledError
from type_more.core.result import Failure, Result, Success

logger = structlog.get_logger(__name__)


@lru_cache(maxsize=32)
def compile_pattern(pattern: str) -> Result[re.Pattern[str], UnhandledError]:
    """Compile a validation pattern once per process.

    Args:
        pattern: Regular expression source.

    Returns:
        Success with the compiled pattern, or Failure with UnhandledError
        if the pattern itself is malformed.
    """
    try:
        return Success(value=re.compile(pattern))
    except re.error as e:
        logger.error("validation_pattern_invalid", pattern=pattern, error_message=str(e))
        return Failure(
            error=UnhandledError(
                code=ErrorCode.INVALID_REGEX_PATTERN,
                message="invalid regex pattern",
                details={"reason": str(e)},
            )
        )


def validate_pattern(
    value: Any,
    pattern: str,
    *,
    code: ErrorCode,
    message: str,
) -> Result[str, ParseError | UnhandledError]:
    """Validate that a value fully matches a pattern.

    Args:
        value: Raw input. Anything other than a str is rejected.
        pattern: Regular expression source the whole value must match.
        code: Error code reported on mismatch.
        message: Error message reported on mismatch.

    Returns:
        Success with the unchanged value if it matches, Failure with
        ParseError otherwise (UnhandledError if the pattern is malformed).
    """
    compiled = compile_pattern(pattern)
    if isinstance(compiled, Failure):
        return compiled

    if not isinstance(value, str) or compiled.value.fullmatch(value) is None:
        return Failure(error=ParseError(code=code, message=message))
    return Success(value=value)
