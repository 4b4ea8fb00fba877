"""
Discriminated decoding of Terra JSON records into entities.

Pure functions: callers hand in already-received response text or parsed JSON.
Listing endpoints that return a single known kind are decoded strictly; polymorphic
listings (search, traversal, parents) skip records this client cannot decode so that
newer server-side kinds do not break older clients.
"""

import json
import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import ValidationError

from domain.errors import DecodeError, UnknownKindError
from domain.schemas import Node
from domain.taxonomy.registry import model_for

logger = logging.getLogger(__name__)

N = TypeVar("N", bound=Node)


def parse_json(body: str) -> Any:
    """Parse a response body, raising DecodeError when it is not JSON."""
    try:
        return json.loads(body)
    except ValueError as e:
        raise DecodeError(f"Response body is not valid JSON: {body[:200]!r}") from e


def _describe(err: ValidationError) -> str:
    return "; ".join(f"{'.'.join(str(p) for p in e['loc']) or '<record>'}: {e['msg']}" for e in err.errors())


def _ensure_list(records: Any) -> list[Any]:
    if not isinstance(records, list):
        raise DecodeError(f"Expected a JSON array, got {type(records).__name__}", record=records)
    return records


def decode_as(model: type[N], record: Any) -> N:
    """
    Decode one record as a statically known entity kind.

    Raises:
        DecodeError: record is not an object, misses a required field, has a field of the
            wrong shape, or carries a `definition` tag of another kind
    """
    if not isinstance(record, Mapping):
        raise DecodeError(
            f"Expected a JSON object for {model.__name__}, got {type(record).__name__}",
            record=record,
        )
    try:
        return model.model_validate(dict(record))
    except ValidationError as e:
        raise DecodeError(f"Record does not match {model.__name__}: {_describe(e)}", record=record) from e


def decode_one(record: Any) -> Node:
    """
    Decode one record by dispatching on its `definition` tag.

    Raises:
        UnknownKindError: the tag is missing or unrecognized
        DecodeError: the record does not match the model selected by its tag
    """
    if not isinstance(record, Mapping):
        raise DecodeError(f"Expected a JSON object, got {type(record).__name__}", record=record)
    model = model_for(record.get("definition"), record=record)
    return decode_as(model, record)


def decode_list(model: type[N], records: Any) -> list[N]:
    """Decode an array of one known kind; any bad record fails the whole list."""
    return [decode_as(model, record) for record in _ensure_list(records)]


def decode_many(records: Any) -> list[Node]:
    """
    Decode a heterogeneous array, keeping every record that decodes.

    Unknown kinds and malformed records are logged and left out; order of the
    remaining nodes is preserved.
    """
    nodes: list[Node] = []
    for i, record in enumerate(_ensure_list(records)):
        try:
            nodes.append(decode_one(record))
        except UnknownKindError as e:
            logger.warning("Skipping record %d: unknown definition %r", i, e.definition)
        except DecodeError as e:
            logger.warning("Skipping record %d: %s", i, e.message)
    return nodes


def decode_strings(values: Any) -> list[str]:
    """Decode an array of plain strings, such as a history listing."""
    values = _ensure_list(values)
    bad = [v for v in values if not isinstance(v, str)]
    if bad:
        raise DecodeError(f"Expected an array of strings, found {type(bad[0]).__name__}", record=values)
    return values
