"""Error taxonomy for Terra client calls."""

from http import HTTPStatus
from typing import Any


class TerraError(Exception):
    """Base class for every error raised by the Terra client."""


class TransportError(TerraError):
    """No interpretable server response (network fault, empty or garbled error body).

    Never retried by the client.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ServerError(TerraError):
    """
    The Terra server rejected the request with an interpretable error body.

    The message is human-friendly and may be shown to an end user as-is.
    Programmatic handling should branch on `status` (and `duplicate` for conflicts),
    never on the message text:

    - 404: the meme (or user) does not exist
    - 406: validation failure
    - 409: slug conflict; `duplicate` holds the pre-existing entity when the server sent it
    - 412: stale version token (optimistic concurrency conflict)
    - 5xx: server fault
    """

    def __init__(self, status: int, message: str, duplicate: Any | None = None) -> None:
        super().__init__(message)
        self.status = int(status)
        self.message = message
        self.duplicate = duplicate

    @property
    def is_not_found(self) -> bool:
        return self.status == HTTPStatus.NOT_FOUND

    @property
    def is_validation_failure(self) -> bool:
        return self.status == HTTPStatus.NOT_ACCEPTABLE

    @property
    def is_conflict(self) -> bool:
        return self.status == HTTPStatus.CONFLICT

    @property
    def is_stale_version(self) -> bool:
        return self.status == HTTPStatus.PRECONDITION_FAILED

    @property
    def is_server_fault(self) -> bool:
        return self.status >= 500

    def __str__(self) -> str:
        return f"{self.status}: {self.message}"


class DecodeError(TerraError):
    """A record did not match the shape of the entity it was decoded as."""

    def __init__(self, message: str, record: Any | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.record = record


class UnknownKindError(TerraError):
    """A record carried a `definition` tag this client does not know."""

    def __init__(self, definition: Any, record: Any | None = None) -> None:
        super().__init__(f"Unknown definition tag: {definition!r}")
        self.definition = definition
        self.record = record
