"""Factory for creating transports."""

import logging
from collections.abc import Iterable, Mapping

from infrastructure.config.models import ClientConfig, TransportKind

from .base import Transport, TransportResponse
from .mock import MockTransport, ReplyKey
from .rest import RestTransport

logger = logging.getLogger(__name__)


def make_transport(
    cfg: ClientConfig,
    *,
    use_mock: bool = False,
    mock_replies: Mapping[ReplyKey, Iterable[TransportResponse]] | None = None,
) -> Transport:
    """
    Create the transport selected by the config.
    Args:
        cfg: Client configuration containing transport settings
        use_mock: If True, use the MockTransport regardless of cfg
        mock_replies: Optional scripted replies for the MockTransport
    Returns:
        A MockTransport or a RestTransport connected to cfg.base_url.
    """
    if use_mock or cfg.transport is TransportKind.MOCK:
        return MockTransport(cfg=cfg, replies=mock_replies)

    logger.debug("Creating RestTransport for %s", cfg.base_url)
    return RestTransport.from_cfg(cfg)
