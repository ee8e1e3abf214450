"""Domain value objects package."""

from fortnite_api_io.domain.value_objects.client_config import ClientConfig

__all__ = ["ClientConfig"]
