"""Machine-readable error codes.

Error codes follow ENTITY_REASON naming convention and travel alongside the
human-readable message inside every error carried by a Failure.

Categories:
- Parse errors (INVALID_*): malformed input rejected at construction time
- Internal errors (INVALID_REGEX_PATTERN): should never occur in practice
- Hashing errors (HASH_*): reported by the hashing collaborator
"""

from enum import Enum


class ErrorCode(Enum):
    """Machine-readable error codes."""

    # Parse errors
    INVALID_EMAIL = "invalid_email"
    INVALID_PROTOCOL = "invalid_protocol"
    INVALID_DOMAIN = "invalid_domain"
    INVALID_URL = "invalid_url"
    INVALID_PASSWORD = "invalid_password"

    # Internal errors
    INVALID_REGEX_PATTERN = "invalid_regex_pattern"

    # Hashing errors
    HASH_FAILED = "hash_failed"
    HASH_VERIFY_FAILED = "hash_verify_failed"
    HASH_ALGORITHM_MISMATCH = "hash_algorithm_mismatch"
