"""Core errors package.

Usage:
    from type_more.core.errors import ParseError, UnhandledError, HashError
"""

from type_more.core.errors.common_errors import HashError, ParseError, UnhandledError
from type_more.core.errors.type_more_error import TypeMoreError

__all__ = [
    "TypeMoreError",
    "ParseError",
    "UnhandledError",
    "HashError",
]
