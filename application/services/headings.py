from application.constants import LANG, NAME, OPCO, PID
from application.services.base import DeletableMemeService, SynonymHostService
from domain.schemas import Category, Heading, Property, Superheading
from infrastructure.transport.base import HttpMethod


class HeadingsService(SynonymHostService[Heading], DeletableMemeService[Heading]):
    """Opco sales headings, keyed by `pid` rather than slug."""

    resource = "heading"
    model = Heading
    key_param = PID

    def all(self, opco: str) -> list[Heading]:
        return self.request("headings").add_parameter(OPCO, opco).fetch_list(Heading)

    def create(
        self,
        opco: str,
        name: str,
        pid: str | None = None,
        language: str | None = None,
        parent: Superheading | None = None,
    ) -> Heading:
        request = (
            self.request(self.resource, HttpMethod.POST)
            .add_parameter(OPCO, opco)
            .add_parameter(NAME, name)
            .add_parameter(PID, pid)
            .add_parameter(LANG, language)
        )
        if parent is not None:
            request.add_parameter("superheading", parent.slug)
        return request.fetch_one(Heading)

    def parents(self, heading: Heading) -> list[Superheading]:
        return self._for("heading/parents", heading).fetch_list(Superheading)

    def mapped_to(self, heading: Heading) -> list[Category]:
        return self._for("heading/mappings", heading).fetch_list(Category)

    def map_heading(self, heading: Heading, category: Category) -> None:
        self.client.categories.map_heading(heading, category)

    def unmap_heading(self, heading: Heading, category: Category) -> None:
        self.client.categories.unmap_heading(heading, category)

    def inheritance(self, heading: Heading) -> list[Property]:
        """Properties (with options) the heading inherits from the categories it maps to."""
        return self._for("heading/inheritance", heading).fetch_list(Property)
