"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from fortnite_api_io.core.enums import ErrorCode
"""

from fortnite_api_io.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode"]
