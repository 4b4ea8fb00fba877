"""
Application layer: request building, error translation and the Terra client.

This layer coordinates between the domain model and the transport,
implementing every call the Terra API offers.

Most callers only need TerraClient:

    with TerraClient(cfg=load_client_config(CLIENT_FILE)) as terra:
        terra.authenticate()
        category = terra.categories.get("PKT", "mexican-restaurants")
"""

from application.client import TerraClient
from application.request import CLEAR, Request
from application.translator import translate_response

__all__ = [
    # Main entry point
    "TerraClient",
    # Request building
    "Request",
    "CLEAR",
    "translate_response",
]
