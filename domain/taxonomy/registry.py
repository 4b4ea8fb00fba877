from typing import Any

from domain.errors import UnknownKindError
from domain.schemas import (
    Category,
    Definition,
    Heading,
    Node,
    OperatingCompany,
    Option,
    Property,
    Superheading,
    Synonym,
    Taxonomy,
)

# Definition tag -> entity model
# Must cover every Definition member
MODEL_BY_DEFINITION: dict[Definition, type[Node]] = {
    Definition.OPERATING_COMPANY: OperatingCompany,
    Definition.TAXONOMY: Taxonomy,
    Definition.CATEGORY: Category,
    Definition.HEADING: Heading,
    Definition.SUPERHEADING: Superheading,
    Definition.PROPERTY: Property,
    Definition.OPTION: Option,
    Definition.SYNONYM: Synonym,
}


def model_for(definition: Any, record: Any | None = None) -> type[Node]:
    """Return the entity model for a `definition` tag, or raise UnknownKindError."""
    try:
        return MODEL_BY_DEFINITION[Definition(definition)]
    except (ValueError, KeyError, TypeError) as e:
        raise UnknownKindError(definition, record=record) from e
