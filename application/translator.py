"""Turns raw transport outcomes into response bodies or typed errors."""

import json
import logging

from domain.errors import DecodeError, ServerError, TerraError, TransportError, UnknownKindError
from domain.schemas import Node
from domain.taxonomy.decoder import decode_as, decode_one
from infrastructure.transport.base import TransportResponse

logger = logging.getLogger(__name__)


def translate_response(response: TransportResponse, *, expected: type[Node] | None = None) -> str:
    """
    Return the body of a successful response, or raise the error it represents.

    Args:
        response: Raw transport outcome
        expected: Entity kind the call would have returned; used to decode a `duplicate`
            payload on conflicts. Without it the payload is decoded by its definition tag.

    Raises:
        TransportError: the transport failed, or the error body could not be interpreted
        ServerError: the server rejected the call with an `error` body
    """
    if response.ok:
        return response.body  # type: ignore[return-value]

    if response.body is None:
        raise TransportError(response.error or f"Transport failure (status {response.status})")

    raise _error_from_body(response, expected)


def _error_from_body(response: TransportResponse, expected: type[Node] | None) -> TerraError:
    body = response.body or ""
    try:
        payload = json.loads(body)
    except ValueError:
        logger.warning("Unreadable error body (status %d): %.200s", response.status, body)
        return TransportError(body)

    if not isinstance(payload, dict) or not isinstance(payload.get("error"), str):
        logger.warning("Error body without an 'error' message (status %d): %.200s", response.status, body)
        return TransportError(body)

    message = payload["error"]
    duplicate = None
    if "duplicate" in payload:
        try:
            if expected is not None:
                duplicate = decode_as(expected, payload["duplicate"])
            else:
                duplicate = decode_one(payload["duplicate"])
        except (DecodeError, UnknownKindError):
            logger.warning("Undecodable duplicate in %d response: %.200s", response.status, body)
            return TransportError(body)

    logger.debug("Server rejected request: %d %s", response.status, message)
    return ServerError(response.status, message, duplicate)
