from application.constants import EXTERNAL, LANG, NAME, OPCO, PROPERTY, SLUG, SUBOPTION
from application.services.base import DeletableMemeService, SynonymHostService
from domain.schemas import Category, Option, Property, Taxonomy
from infrastructure.transport.base import HttpMethod


class OptionsService(SynonymHostService[Option], DeletableMemeService[Option]):
    resource = "option"
    model = Option

    def all(self, opco: str) -> list[Option]:
        return self.request("options").add_parameter(OPCO, opco).fetch_list(Option)

    def create(
        self,
        opco: str,
        name: str,
        slug: str | None = None,
        external: str | None = None,
        language: str | None = None,
        related_to: Taxonomy | Category | None = None,
        related_by: Property | None = None,
    ) -> Option:
        """
        Create an option.

        With `related_by`, the option is also attached to `related_to` through that
        property; `related_to` is ignored without it.
        """
        request = (
            self.request(self.resource, HttpMethod.POST)
            .add_parameter(OPCO, opco)
            .add_parameter(NAME, name)
            .add_parameter(SLUG, slug)
            .add_parameter(EXTERNAL, external)
            .add_parameter(LANG, language)
        )
        if related_by is not None:
            if isinstance(related_to, Taxonomy):
                request.add_parameter("taxonomy", related_to.slug)
            elif isinstance(related_to, Category):
                request.add_parameter("category", related_to.slug)
            request.add_parameter(PROPERTY, related_by.slug)
        return request.fetch_one(Option)

    def suboptions(self, option: Option) -> list[Option]:
        return self._for("option/sub", option).fetch_list(Option)

    def add_suboption(self, option: Option, suboption: Option) -> None:
        self._as_subject("option/sub", option, HttpMethod.PUT).add_parameter(SUBOPTION, suboption.slug).send()

    def remove_suboption(self, option: Option, suboption: Option) -> None:
        self._as_subject("option/sub", option, HttpMethod.DELETE).add_parameter(SUBOPTION, suboption.slug).send()
