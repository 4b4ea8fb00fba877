"""Base transport interface for talking to the Terra server."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from infrastructure.config.models import ClientConfig

logger = logging.getLogger(__name__)


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    @property
    def sends_body(self) -> bool:
        """POST/PUT parameters travel form-encoded in the body; GET/DELETE use the query string."""
        return self in (HttpMethod.POST, HttpMethod.PUT)


@dataclass(frozen=True)
class TransportResponse:
    """
    Raw outcome of one call.

    `body` is None only when the transport itself failed (connection refused, timeout...);
    `error` then carries the transport's message and `status` is 0.
    """

    status: int
    body: str | None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300 and self.body is not None


class Transport(ABC):
    """
    Abstract base class for Terra transports.

    All concrete transports must implement:
    - send(): execute one request and return its raw outcome; never raise for HTTP errors
    """

    cfg: ClientConfig | None

    def __init__(self, *, cfg: ClientConfig | None = None) -> None:
        self.cfg = cfg

    @abstractmethod
    def send(
        self,
        *,
        path: str,
        method: HttpMethod,
        params: Mapping[str, str],
        headers: Mapping[str, str] | None = None,
    ) -> TransportResponse:
        """Execute one request.

        Args:
            path: Resource path relative to the base URL, e.g. "category/children"
            method: HTTP verb
            params: Already-serialized parameters (query string or form body, depending on method)
            headers: Optional per-request headers

        Returns:
            TransportResponse; transport faults are reported in it rather than raised
        """
        raise NotImplementedError

    def close(self) -> None:
        """Release any connections held by the transport."""

    def __enter__(self) -> "Transport":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()
