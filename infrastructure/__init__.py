"""
Infrastructure layer: External dependencies and I/O boundaries.

Contains adapters for:
- Terra transports (REST over httpx, scripted Mock)
- Configuration loading (YAML, environment)
- Observability (logging)

This is the only layer that performs I/O operations.
"""

# Most commonly used - exposed at top level for convenience
from infrastructure.config import ClientConfig, TransportKind, load_client_config
from infrastructure.transport import HttpMethod, Transport, TransportResponse, make_transport

__all__ = [
    # Transports (most commonly used)
    "make_transport",
    "Transport",
    "TransportResponse",
    "HttpMethod",
    # Configuration (most commonly used)
    "load_client_config",
    "ClientConfig",
    "TransportKind",
]
