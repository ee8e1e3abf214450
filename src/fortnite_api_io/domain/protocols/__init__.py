"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance.

Usage:
    from fortnite_api_io.domain.protocols import TransportProtocol
"""

from fortnite_api_io.domain.protocols.transport_protocol import TransportProtocol

__all__ = ["TransportProtocol"]
