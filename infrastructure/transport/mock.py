"""Scripted transport for tests and offline runs."""

import json
import logging
from collections import defaultdict, deque
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from infrastructure.config.models import ClientConfig
from infrastructure.transport.base import HttpMethod, Transport, TransportResponse

logger = logging.getLogger(__name__)

ReplyKey = tuple[str, str]


@dataclass(frozen=True)
class SentRequest:
    """One call observed by the MockTransport."""

    method: HttpMethod
    path: str
    params: dict[str, str] = field(default_factory=dict)
    headers: dict[str, str] = field(default_factory=dict)


def _key(method: str, path: str) -> tuple[HttpMethod, str]:
    return HttpMethod(method.upper()), path.strip("/")


class MockTransport(Transport):
    """
    Answers requests from scripted replies instead of the network.

    Replies are queued per (method, path) and consumed first-in, first-out.
    Calls with nothing queued answer 404 with an `error` body, the way the server
    answers for an unknown resource. Every call is recorded in `calls`.
    """

    def __init__(
        self,
        *,
        cfg: ClientConfig | None = None,
        replies: Mapping[ReplyKey, Iterable[TransportResponse]] | None = None,
    ) -> None:
        super().__init__(cfg=cfg)
        self._replies: dict[tuple[HttpMethod, str], deque[TransportResponse]] = defaultdict(deque)
        self.calls: list[SentRequest] = []
        for (method, path), queued in (replies or {}).items():
            self._replies[_key(method, path)].extend(queued)
        logger.info("Initialized Mock transport (no real HTTP calls will be made)")

    def reply(self, method: str, path: str, body: Any = None, *, status: int = 200) -> "MockTransport":
        """Queue a reply. Non-string bodies are JSON-encoded."""
        text = body if isinstance(body, str) else json.dumps(body)
        self._replies[_key(method, path)].append(TransportResponse(status=status, body=text))
        return self

    def fail(self, method: str, path: str, error: str = "connection refused") -> "MockTransport":
        """Queue a transport-level failure (no body)."""
        self._replies[_key(method, path)].append(TransportResponse(status=0, body=None, error=error))
        return self

    def pending(self) -> int:
        """Number of scripted replies not consumed yet."""
        return sum(len(q) for q in self._replies.values())

    def send(
        self,
        *,
        path: str,
        method: HttpMethod,
        params: Mapping[str, str],
        headers: Mapping[str, str] | None = None,
    ) -> TransportResponse:
        key = _key(method, path)
        self.calls.append(SentRequest(method=key[0], path=key[1], params=dict(params), headers=dict(headers or {})))

        queue = self._replies.get(key)
        if queue:
            return queue.popleft()

        logger.debug("No scripted reply for %s %s", key[0].value, key[1])
        return TransportResponse(
            status=404,
            body=json.dumps({"error": f"No scripted reply for {key[0].value} {key[1]}"}),
        )
