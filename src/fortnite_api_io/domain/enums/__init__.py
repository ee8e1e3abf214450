"""Domain enums package.

Usage:
    from fortnite_api_io.domain.enums import ApiVersion, Language, supports_language
"""

from fortnite_api_io.domain.enums.api_version import API_HOST, ApiVersion
from fortnite_api_io.domain.enums.language import (
    DEFAULT_LANGUAGE,
    SUPPORTED_LANGUAGES,
    Language,
    supports_language,
)

__all__ = [
    "API_HOST",
    "ApiVersion",
    "DEFAULT_LANGUAGE",
    "Language",
    "SUPPORTED_LANGUAGES",
    "supports_language",
]
