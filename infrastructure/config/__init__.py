"""
Configuration management: models and loading.

Handles:
- ClientConfig: Terra connection settings
- TransportKind: transport backend selection
- Environment variable overrides (TERRA_*)

The loader module performs file I/O; models are pure Pydantic classes.
"""

from infrastructure.config.loader import load_client_config
from infrastructure.config.models import ClientConfig, TransportKind

__all__ = [
    "ClientConfig",
    "TransportKind",
    "load_client_config",
]
