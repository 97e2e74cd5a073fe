"""Core enums package.

Usage:
    from type_more.core.enums import ErrorCode
"""

from type_more.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode"]
