"""Languages accepted by the fortniteapi.io ``lang`` query parameter.

The API localises item names, descriptions, news and challenge text. Any
code outside this list is rejected at client construction.

Reference:
    - https://fortniteapi.io
"""

from enum import StrEnum


class Language(StrEnum):
    """Supported response language codes.

    Examples:
        >>> Language.BRAZILIAN_PORTUGUESE.value
        'pt-BR'
        >>> supports_language("cy")
        False
    """

    ENGLISH = "en"
    ARABIC = "ar"
    GERMAN = "de"
    SPANISH = "es"
    LATIN_AMERICAN_SPANISH = "es-419"
    FRENCH = "fr"
    ITALIAN = "it"
    JAPANESE = "ja"
    KOREAN = "ko"
    POLISH = "pl"
    BRAZILIAN_PORTUGUESE = "pt-BR"
    RUSSIAN = "ru"
    TURKISH = "tr"
    SIMPLIFIED_CHINESE = "zh-CN"
    TRADITIONAL_CHINESE = "zh-Hant"

    @classmethod
    def values(cls) -> list[str]:
        """Get all language codes as strings.

        Returns:
            List of language code strings.
        """
        return [language.value for language in cls]


SUPPORTED_LANGUAGES: frozenset[str] = frozenset(Language.values())

DEFAULT_LANGUAGE = Language.ENGLISH.value


def supports_language(lang: str) -> bool:
    """Check whether the API supports a language code.

    Matching is case sensitive (``pt-BR`` is supported, ``pt-br`` is not).

    Args:
        lang: Language code to check.

    Returns:
        True if the code is in the allow-list.
    """
    return lang in SUPPORTED_LANGUAGES
