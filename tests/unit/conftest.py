from typing import Any

import pytest

from application.client import TerraClient
from infrastructure.config.models import ClientConfig, TransportKind
from infrastructure.observability.logging import clear_request_context, clear_session_context
from infrastructure.transport.mock import MockTransport


@pytest.fixture(autouse=True)
def _reset_log_context():
    yield
    clear_request_context()
    clear_session_context()


@pytest.fixture
def cfg() -> ClientConfig:
    return ClientConfig(base_url="http://terra.test/api/", transport=TransportKind.MOCK)


@pytest.fixture
def transport(cfg: ClientConfig) -> MockTransport:
    return MockTransport(cfg=cfg)


@pytest.fixture
def client(cfg: ClientConfig, transport: MockTransport) -> TerraClient:
    return TerraClient(cfg=cfg, transport=transport)


@pytest.fixture
def make_record():
    """Build a wire-shaped meme record; Heading records get `pid` instead of `slug`."""

    def _make(definition: str, key: str, *, opco: str = "PKT", **fields: Any) -> dict[str, Any]:
        key_field = "pid" if definition == "Heading" else "slug"
        record: dict[str, Any] = {
            "definition": definition,
            "opco": opco,
            key_field: key,
            "name": key.replace("-", " ").title(),
            "language": "en",
            "version": "v1",
        }
        record.update(fields)
        return record

    return _make
