"""Immutable client configuration value object.

Every option the client recognises is listed here with its default, so a
missing key can never silently change behaviour. Validation of the language
happens in RequestClient so that the error carries the client's message.

Usage:
    from fortnite_api_io.domain.value_objects import ClientConfig

    config = ClientConfig(default_language="fr", ignore_warnings=True)
"""

from dataclasses import dataclass

from fortnite_api_io.domain.enums import DEFAULT_LANGUAGE


@dataclass(frozen=True, slots=True, kw_only=True)
class ClientConfig:
    """Options accepted by the API facades.

    Attributes:
        default_language: Language used when a method is called without
            ``lang``. Must be one of the supported codes.
        ignore_warnings: Suppress deprecation notices for legacy methods.
    """

    default_language: str = DEFAULT_LANGUAGE
    ignore_warnings: bool = False
