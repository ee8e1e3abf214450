"""Per-version API facades.

Usage:
    from fortnite_api_io.api import FortniteAPI, FortniteAPIV2
"""

from fortnite_api_io.api.v1 import FortniteAPI
from fortnite_api_io.api.v2 import FortniteAPIV2

__all__ = ["FortniteAPI", "FortniteAPIV2"]
