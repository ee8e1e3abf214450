"""URI assembly shared by the versioned endpoint modules."""

from collections.abc import Iterable
from urllib.parse import urlencode

from fortnite_api_io.domain.enums import ApiVersion

# Kept literal so joined id lists read "id=a,b" on the wire.
LIST_SEPARATOR = ","


def build_uri(
    version: ApiVersion,
    path: str,
    params: dict[str, str | int] | None = None,
) -> str:
    """Build a fully qualified URI on a versioned base path.

    Query parameters keep their insertion order.

    Args:
        version: API version providing the base URL.
        path: Resource path, starting with ``/``.
        params: Query parameters, or None for a bare path.

    Returns:
        The URI, e.g. ``https://fortniteapi.io/v1/shop?lang=en``.
    """
    uri = f"{version.base_url}{path}"
    if params:
        uri += "?" + urlencode(params, safe=LIST_SEPARATOR)
    return uri


def join_values(values: Iterable[str]) -> str:
    """Join list-valued parameters into a single query value."""
    return LIST_SEPARATOR.join(values)
