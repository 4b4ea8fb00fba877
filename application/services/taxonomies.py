from application.constants import LANG, NAME, OPCO, OPTION, PROPERTY, SLUG
from application.services.base import DeletableMemeService, SynonymHostService
from domain.schemas import Category, Option, Property, Taxonomy
from infrastructure.transport.base import HttpMethod


class TaxonomiesService(SynonymHostService[Taxonomy], DeletableMemeService[Taxonomy]):
    """Taxonomies group categories; properties and options attached here are inherited by all of them."""

    resource = "taxonomy"
    model = Taxonomy

    def all(self, opco: str) -> list[Taxonomy]:
        return self.request("taxonomies").add_parameter(OPCO, opco).fetch_list(Taxonomy)

    def create(
        self,
        opco: str,
        name: str,
        slug: str | None = None,
        language: str | None = None,
    ) -> Taxonomy:
        return (
            self.request(self.resource, HttpMethod.POST)
            .add_parameter(OPCO, opco)
            .add_parameter(NAME, name)
            .add_parameter(SLUG, slug)
            .add_parameter(LANG, language)
            .fetch_one(Taxonomy)
        )

    def children(self, taxonomy: Taxonomy) -> list[Category]:
        """Top-level categories in the taxonomy."""
        return self.client.categories.children(taxonomy)

    def properties(self, taxonomy: Taxonomy) -> list[Property]:
        return self._for("taxonomy/properties", taxonomy).fetch_list(Property)

    def add_property(self, taxonomy: Taxonomy, prop: Property) -> None:
        self._as_subject("taxonomy/property", taxonomy, HttpMethod.PUT).add_parameter(PROPERTY, prop.slug).send()

    def remove_property(self, taxonomy: Taxonomy, prop: Property) -> None:
        self._as_subject("taxonomy/property", taxonomy, HttpMethod.DELETE).add_parameter(PROPERTY, prop.slug).send()

    def options(self, taxonomy: Taxonomy) -> list[Property]:
        """
        Options attached directly to the taxonomy, grouped by property.

        Each returned Property has `options` populated. Any record that is not a
        Property fails the whole call with DecodeError.
        """
        return self._for("taxonomy/options", taxonomy).fetch_list(Property)

    def property_options(self, taxonomy: Taxonomy, prop: Property) -> list[Option]:
        """Options attached to the taxonomy through one property."""
        return self._for("taxonomy/options", taxonomy).add_parameter(PROPERTY, prop.slug).fetch_list(Option)

    def add_option(self, taxonomy: Taxonomy, prop: Property, option: Option) -> None:
        (
            self._as_subject("taxonomy/option", taxonomy, HttpMethod.PUT)
            .add_parameter(PROPERTY, prop.slug)
            .add_parameter(OPTION, option.slug)
            .send()
        )

    def remove_option(self, taxonomy: Taxonomy, prop: Property, option: Option) -> None:
        (
            self._as_subject("taxonomy/option", taxonomy, HttpMethod.DELETE)
            .add_parameter(PROPERTY, prop.slug)
            .add_parameter(OPTION, option.slug)
            .send()
        )
