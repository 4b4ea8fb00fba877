"""
Terra transports.

Implements the adapter pattern for different ways of reaching the server:
- REST (httpx)
- Mock (scripted replies, for testing)

All transports implement the Transport interface.
"""

from infrastructure.transport.base import HttpMethod, Transport, TransportResponse
from infrastructure.transport.factory import make_transport
from infrastructure.transport.mock import MockTransport, SentRequest
from infrastructure.transport.rest import RestTransport

__all__ = [
    # Abstract base
    "Transport",
    "TransportResponse",
    "HttpMethod",
    # Concrete implementations
    "RestTransport",
    "MockTransport",
    "SentRequest",
    # Factory (most commonly used)
    "make_transport",
]
