"""Client-level error codes (machine-readable).

Error codes follow ENTITY_REASON naming convention and are attached to every
FortniteAPIError so callers can branch on the failure without parsing text.

Categories:
- Construction errors (INVALID_CREDENTIALS, UNSUPPORTED_LANGUAGE)
- Request errors (REQUEST_FAILED)
"""

from enum import Enum


class ErrorCode(Enum):
    """Client-level error codes (machine-readable)."""

    # Construction errors
    INVALID_CREDENTIALS = "invalid_credentials"
    UNSUPPORTED_LANGUAGE = "unsupported_language"

    # Request errors
    REQUEST_FAILED = "request_failed"
