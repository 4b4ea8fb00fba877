from application.constants import EXTERNAL, LANG, NAME, OPCO, SLUG
from application.services.base import DeletableMemeService, SynonymHostService
from domain.schemas import Superheading
from infrastructure.transport.base import HttpMethod


class SuperheadingsService(SynonymHostService[Superheading], DeletableMemeService[Superheading]):
    resource = "superheading"
    model = Superheading

    def all(self, opco: str) -> list[Superheading]:
        return self.request("superheadings").add_parameter(OPCO, opco).fetch_list(Superheading)

    def create(
        self,
        opco: str,
        name: str,
        slug: str | None = None,
        external: str | None = None,
        language: str | None = None,
    ) -> Superheading:
        return (
            self.request(self.resource, HttpMethod.POST)
            .add_parameter(OPCO, opco)
            .add_parameter(NAME, name)
            .add_parameter(SLUG, slug)
            .add_parameter(EXTERNAL, external)
            .add_parameter(LANG, language)
            .fetch_one(Superheading)
        )
