"""
Domain layer: Terra entities and error types with no I/O.

Contains:
- schemas: Pydantic models for memes, operating companies and users
- errors: TransportError / ServerError / DecodeError / UnknownKindError
- lookup: explicit found / not-found / failed result
- taxonomy: definition registry and discriminated decoder
"""

from domain.errors import DecodeError, ServerError, TerraError, TransportError, UnknownKindError
from domain.lookup import Lookup, LookupStatus
from domain.schemas import (
    Category,
    Definition,
    Heading,
    Meme,
    Node,
    OperatingCompany,
    Option,
    Property,
    Superheading,
    Synonym,
    Taxonomy,
    User,
)

__all__ = [
    # Capabilities
    "Node",
    "Meme",
    "Definition",
    # Entities
    "OperatingCompany",
    "Taxonomy",
    "Category",
    "Heading",
    "Superheading",
    "Property",
    "Option",
    "Synonym",
    "User",
    # Errors
    "TerraError",
    "TransportError",
    "ServerError",
    "DecodeError",
    "UnknownKindError",
    # Results
    "Lookup",
    "LookupStatus",
]
