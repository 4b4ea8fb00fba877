"""Request builder: one outbound Terra call and its typed result."""

import logging
from collections.abc import Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any, TypeVar

from application.constants import SECRET_PARAMS, USER_CREDENTIALS
from application.translator import translate_response
from domain.errors import ServerError
from domain.lookup import Lookup
from domain.schemas import Node
from domain.taxonomy.decoder import decode_as, decode_list, decode_many, decode_strings, parse_json
from infrastructure.observability.logging import clear_request_context, set_log_context
from infrastructure.transport.base import HttpMethod

if TYPE_CHECKING:
    from application.client import TerraClient

logger = logging.getLogger(__name__)

N = TypeVar("N", bound=Node)


class _Clear:
    def __repr__(self) -> str:
        return "CLEAR"


# Sent as an empty value; the server then clears the field (an omitted parameter leaves it alone)
CLEAR: Any = _Clear()


def serialize_value(value: Any) -> str:
    """Render one parameter value the way the server reads it."""
    if value is CLEAR:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (list, tuple, set, frozenset)):
        return ",".join(serialize_value(v) for v in value)
    return str(value)


def redact(params: Mapping[str, str]) -> dict[str, str]:
    return {k: ("***" if k in SECRET_PARAMS else v) for k, v in params.items()}


class Request:
    """
    A single call to the Terra server, built up with chained `add_parameter` calls.

    Get one from `TerraClient.request()`; the session credential is attached automatically.
    Finish with one of the terminal calls:

    - fetch_one(model): one entity of a known kind
    - fetch_list(model): an array of one known kind
    - fetch_nodes(): a polymorphic array (unknown/malformed records are skipped)
    - fetch_strings(): an array of plain strings
    - find_one(model): like fetch_one, but returns a Lookup instead of raising on server errors
    - fetch_text(): the raw body
    - send(): no result; raises on any failure
    """

    def __init__(self, client: "TerraClient", resource: str, method: HttpMethod = HttpMethod.GET) -> None:
        self.client = client
        self.resource = resource.strip("/")
        self.method = method
        self.params: dict[str, str] = {}

        credential = client.credential
        if credential is not None:
            self.params[USER_CREDENTIALS] = credential

    def add_parameter(self, name: str, value: Any) -> "Request":
        """Set a parameter; None values are skipped so the server sees the field as omitted."""
        if value is not None:
            self.params[name] = serialize_value(value)
        return self

    def _execute(self, expected: type[Node] | None = None) -> str:
        label = f"{self.method.value} {self.resource}"
        set_log_context(request=label)
        try:
            logger.debug("Sending %s params=%s", label, redact(self.params))
            response = self.client.transport.send(path=self.resource, method=self.method, params=self.params)
            return translate_response(response, expected=expected)
        finally:
            clear_request_context()

    def fetch_one(self, model: type[N]) -> N:
        return decode_as(model, parse_json(self._execute(model)))

    def fetch_list(self, model: type[N]) -> list[N]:
        return decode_list(model, parse_json(self._execute(model)))

    def fetch_nodes(self) -> list[Node]:
        return decode_many(parse_json(self._execute()))

    def fetch_strings(self) -> list[str]:
        return decode_strings(parse_json(self._execute()))

    def find_one(self, model: type[N]) -> Lookup[N]:
        """Fetch one entity, reporting server rejections (not-found included) in the result."""
        try:
            return Lookup.found(self.fetch_one(model))
        except ServerError as e:
            return Lookup.from_error(e)

    def fetch_text(self) -> str:
        return self._execute()

    def send(self) -> None:
        self._execute()
