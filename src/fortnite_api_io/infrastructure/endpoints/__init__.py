"""Endpoint URL builders, one module per API version.

Usage:
    from fortnite_api_io.infrastructure.endpoints import v1, v2

    v1.get_daily_shop("en")  # "https://fortniteapi.io/v1/shop?lang=en"
"""

from fortnite_api_io.infrastructure.endpoints import v1, v2

__all__ = ["v1", "v2"]
