from application.constants import EXTERNAL, LANG, NAME, OPCO, SLUG
from application.services.base import SynonymHostService
from domain.schemas import Category, Property, Taxonomy
from infrastructure.transport.base import HttpMethod


class PropertiesService(SynonymHostService[Property]):
    """Properties are the "verbs" relating options to categories, e.g. "cuisine". They cannot be deleted."""

    resource = "property"
    model = Property

    def all(self, opco: str) -> list[Property]:
        return self.request("properties").add_parameter(OPCO, opco).fetch_list(Property)

    def create(
        self,
        opco: str,
        name: str,
        slug: str | None = None,
        external: str | None = None,
        language: str | None = None,
        related_to: Taxonomy | Category | None = None,
    ) -> Property:
        """Create a property, optionally attaching it straight to a taxonomy or category."""
        request = (
            self.request(self.resource, HttpMethod.POST)
            .add_parameter(OPCO, opco)
            .add_parameter(NAME, name)
            .add_parameter(SLUG, slug)
            .add_parameter(EXTERNAL, external)
            .add_parameter(LANG, language)
        )
        if isinstance(related_to, Taxonomy):
            request.add_parameter("taxonomy", related_to.slug)
        elif isinstance(related_to, Category):
            request.add_parameter("category", related_to.slug)
        return request.fetch_one(Property)
