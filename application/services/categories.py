from application.constants import (
    CHILD,
    DIRECTION,
    LANG,
    MAP_FROM,
    MAP_TO,
    MAP_TO_OPCO,
    NAME,
    OPCO,
    OPTION,
    PARENT,
    PROPERTY,
    SLUG,
)
from application.services.base import DeletableMemeService, SynonymHostService
from domain.schemas import Category, Heading, Node, Option, Property, Taxonomy
from infrastructure.transport.base import HttpMethod


class CategoriesService(SynonymHostService[Category], DeletableMemeService[Category]):
    resource = "category"
    model = Category

    def children(self, parent: Taxonomy | Category) -> list[Category]:
        """Direct children of a category, or the top-level categories of a taxonomy."""
        if isinstance(parent, Taxonomy):
            request = self.request("taxonomy/categories").add_parameter(OPCO, parent.opco).add_parameter(SLUG, parent.slug)
        else:
            request = self._for("category/children", parent)
        return request.fetch_list(Category)

    def create(
        self,
        opco: str,
        name: str,
        slug: str | None = None,
        language: str | None = None,
        parent: Taxonomy | Category | None = None,
    ) -> Category:
        """
        Create a category, optionally under a taxonomy or another category.

        Without a slug the server derives one from the name ("Mexican Restaurants" ->
        "mexican-restaurants"); a 409 ServerError carries the existing category as `duplicate`.
        """
        request = (
            self.request(self.resource, HttpMethod.POST)
            .add_parameter(OPCO, opco)
            .add_parameter(NAME, name)
            .add_parameter(SLUG, slug)
            .add_parameter(LANG, language)
        )
        if isinstance(parent, Taxonomy):
            request.add_parameter("taxonomy", parent.slug)
        elif isinstance(parent, Category):
            request.add_parameter("category", parent.slug)
        return request.fetch_one(Category)

    def parents(self, category: Category) -> list[Node]:
        """Parent categories and/or taxonomies."""
        return self._for("category/parents", category).fetch_nodes()

    def add_child(self, parent: Category, child: Category) -> None:
        (
            self.request("category/children", HttpMethod.PUT)
            .add_parameter(OPCO, parent.opco)
            .add_parameter(PARENT, parent.slug)
            .add_parameter(CHILD, child.slug)
            .send()
        )

    def remove_child(self, parent: Category, child: Category) -> None:
        (
            self.request("category/children", HttpMethod.DELETE)
            .add_parameter(OPCO, parent.opco)
            .add_parameter(PARENT, parent.slug)
            .add_parameter(CHILD, child.slug)
            .send()
        )

    def properties(self, category: Category) -> list[Property]:
        return self._for("category/properties", category).fetch_list(Property)

    def add_property(self, category: Category, prop: Property) -> None:
        self._as_subject("category/property", category, HttpMethod.PUT).add_parameter(PROPERTY, prop.slug).send()

    def remove_property(self, category: Category, prop: Property) -> None:
        self._as_subject("category/property", category, HttpMethod.DELETE).add_parameter(PROPERTY, prop.slug).send()

    def options(self, category: Category) -> list[Property]:
        """Options attached directly to this category, grouped under their properties."""
        return self._for("category/options", category).fetch_list(Property)

    def add_option(self, category: Category, prop: Property, option: Option) -> None:
        (
            self._as_subject("category/option", category, HttpMethod.PUT)
            .add_parameter(PROPERTY, prop.slug)
            .add_parameter(OPTION, option.slug)
            .send()
        )

    def remove_option(self, category: Category, prop: Property, option: Option) -> None:
        (
            self._as_subject("category/option", category, HttpMethod.DELETE)
            .add_parameter(PROPERTY, prop.slug)
            .add_parameter(OPTION, option.slug)
            .send()
        )

    def mapped_to(self, category: Category) -> list[Category]:
        """Categories this one maps to (possibly in other opcos)."""
        return self._for("category/mappings", category).add_parameter(DIRECTION, "to").fetch_list(Category)

    def mapped_from(self, category: Category) -> list[Category]:
        """Categories mapping to this one."""
        return self._for("category/mappings", category).add_parameter(DIRECTION, "from").fetch_list(Category)

    def mapped_headings(self, category: Category) -> list[Heading]:
        """Headings mapping to this category."""
        return self._for("category/headings", category).add_parameter(DIRECTION, "from").fetch_list(Heading)

    def _mapping(self, resource: str, method: HttpMethod, source: Category | Heading, target: Category) -> None:
        (
            self.request(resource, method)
            .add_parameter(OPCO, source.opco)
            .add_parameter(MAP_FROM, source.key)
            .add_parameter(MAP_TO_OPCO, target.opco)
            .add_parameter(MAP_TO, target.slug)
            .send()
        )

    def map_category(self, source: Category, target: Category) -> None:
        """Map `source` onto `target`; `source` then inherits the target's properties and options."""
        self._mapping("category/mapping", HttpMethod.PUT, source, target)

    def unmap_category(self, source: Category, target: Category) -> None:
        self._mapping("category/mapping", HttpMethod.DELETE, source, target)

    def map_heading(self, source: Heading, target: Category) -> None:
        self._mapping("heading/mapping", HttpMethod.PUT, source, target)

    def unmap_heading(self, source: Heading, target: Category) -> None:
        self._mapping("heading/mapping", HttpMethod.DELETE, source, target)

    def inheritance(self, category: Category) -> list[Property]:
        """Every property/option reaching this category through parents and mappings (server-computed)."""
        return self._for("category/inheritance", category).fetch_list(Property)
