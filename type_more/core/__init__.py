"""Core shared kernel.

This module provides foundational utilities used across all layers:
- Result types for railway-oriented programming
- Error classes returned inside Failure
- Pattern validation and JSON bridging

The core module has NO import-time dependencies on other layers.
"""

from type_more.core.enums import ErrorCode
from type_more.core.errors import HashError, ParseError, TypeMoreError, UnhandledError
from type_more.core.result import Failure, Result, Success

__all__ = [
    "ErrorCode",
    "Failure",
    "HashError",
    "ParseError",
    "Result",
    "Success",
    "TypeMoreError",
    "UnhandledError",
]
