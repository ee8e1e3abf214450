"""Client error hierarchy.

Construction errors are raised immediately and are not recoverable: the client
cannot be used without a credential or with a language the API rejects.
Request errors wrap the underlying httpx/JSON exception (chained with ``from``)
and propagate to the caller; nothing is retried.

Error Hierarchy:
    FortniteAPIError (base - inherits from Exception)
    ├── InvalidCredentialsError (missing API key)
    ├── UnsupportedLanguageError (default language not in allow-list)
    └── RequestFailedError (network failure or non-JSON body)

Usage:
    from fortnite_api_io.core.errors import FortniteAPIError, RequestFailedError

    try:
        shop = await api.get_daily_shop()
    except RequestFailedError as e:
        print(e.code, e.uri)
"""

from fortnite_api_io.core.enums import ErrorCode


class FortniteAPIError(Exception):
    """Base client error.

    Attributes:
        code: Machine-readable error code (enum).
        message: Human-readable error message.
    """

    code: ErrorCode

    def __init__(self, message: str, *, code: ErrorCode) -> None:
        """Initialize client error.

        Args:
            message: Human-readable error message.
            code: Machine-readable error code.
        """
        super().__init__(message)
        self.code = code
        self.message = message


class InvalidCredentialsError(FortniteAPIError):
    """Raised when the client is constructed without an API key."""

    def __init__(self) -> None:
        super().__init__(
            "Invalid Credentials Supplied.",
            code=ErrorCode.INVALID_CREDENTIALS,
        )


class UnsupportedLanguageError(FortniteAPIError):
    """Raised when the configured default language is not supported.

    Attributes:
        language: The rejected language code.
    """

    def __init__(self, language: str) -> None:
        """Initialize unsupported language error.

        Args:
            language: The rejected language code.
        """
        super().__init__(
            f"Supplied default language {language} is not supported",
            code=ErrorCode.UNSUPPORTED_LANGUAGE,
        )
        self.language = language


class RequestFailedError(FortniteAPIError):
    """Raised when a request cannot be completed or its body is not JSON.

    Attributes:
        uri: The URI that was requested.
    """

    def __init__(self, message: str, *, uri: str) -> None:
        """Initialize request failure.

        Args:
            message: Human-readable error message.
            uri: The URI that was requested.
        """
        super().__init__(message, code=ErrorCode.REQUEST_FAILED)
        self.uri = uri
