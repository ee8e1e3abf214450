"""fortniteapi.io API versions and their base URLs."""

from enum import StrEnum

API_HOST = "https://fortniteapi.io"


class ApiVersion(StrEnum):
    """Versioned base path of the REST API."""

    V1 = "v1"
    V2 = "v2"

    @property
    def base_url(self) -> str:
        """Fully qualified base URL for this version (no trailing slash)."""
        return f"{API_HOST}/{self.value}"
