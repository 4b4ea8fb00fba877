import logging
from collections.abc import Mapping

import httpx

from infrastructure.config.models import ClientConfig
from infrastructure.transport.base import HttpMethod, Transport, TransportResponse

logger = logging.getLogger(__name__)


class RestTransport(Transport):
    """
    HTTP transport backed by a single pooled httpx.Client.

    - GET/DELETE parameters go in the query string, POST/PUT parameters are form-encoded
    - Any status code is returned as-is; httpx.RequestError (connect, timeout, protocol,
      undecodable content, redirect loops) is turned into a body-less TransportResponse
    """

    def __init__(self, *, cfg: ClientConfig | None = None, client: httpx.Client) -> None:
        super().__init__(cfg=cfg)
        self.client = client

    @classmethod
    def from_cfg(cls, cfg: ClientConfig) -> "RestTransport":
        headers = {"Accept": "application/json", "User-Agent": cfg.user_agent, **cfg.headers}
        client = httpx.Client(
            base_url=cfg.base_url,
            timeout=cfg.timeout_s,
            verify=cfg.verify_tls,
            headers=headers,
        )
        return cls(cfg=cfg, client=client)

    def send(
        self,
        *,
        path: str,
        method: HttpMethod,
        params: Mapping[str, str],
        headers: Mapping[str, str] | None = None,
    ) -> TransportResponse:
        kwargs = {"data": dict(params)} if method.sends_body else {"params": dict(params)}
        try:
            resp = self.client.request(method.value, path, headers=headers, **kwargs)
        except httpx.RequestError as e:
            logger.warning("%s %s failed at transport level: %s", method.value, path, e)
            return TransportResponse(status=0, body=None, error=str(e) or type(e).__name__)

        logger.debug("%s %s -> %d (%d bytes)", method.value, path, resp.status_code, len(resp.content))
        return TransportResponse(status=resp.status_code, body=resp.text)

    def close(self) -> None:
        self.client.close()
