from application.constants import LOGIN, MAX, OPCO, START
from application.services.base import Service
from domain.schemas import Heading, OperatingCompany, Property, Superheading, Taxonomy, User
from infrastructure.transport.base import HttpMethod


class OperatingCompaniesService(Service):
    def all(self) -> list[OperatingCompany]:
        return self.request("opcos").fetch_list(OperatingCompany)

    def get(self, opco: str) -> OperatingCompany:
        return self.request("opco").add_parameter(OPCO, opco).fetch_one(OperatingCompany)

    def taxonomies(self, opco: str) -> list[Taxonomy]:
        return self.client.taxonomies.all(opco)

    def properties(self, opco: str) -> list[Property]:
        return self.client.properties.all(opco)

    def superheadings(self, opco: str) -> list[Superheading]:
        return self.client.superheadings.all(opco)

    def headings(self, opco: str) -> list[Heading]:
        return self.client.headings.all(opco)

    def add_user(self, opco: str, user: User) -> None:
        """Give a user access to the opco."""
        self.request("opco/user", HttpMethod.PUT).add_parameter(OPCO, opco).add_parameter(LOGIN, user.login).send()

    def remove_user(self, opco: str, user: User) -> None:
        self.request("opco/user", HttpMethod.DELETE).add_parameter(OPCO, opco).add_parameter(LOGIN, user.login).send()

    def history(self, opco: str, start: int = 0, max_results: int = 100) -> list[str]:
        """Recent change descriptions for the opco, newest first."""
        return (
            self.request("opco/history")
            .add_parameter(OPCO, opco)
            .add_parameter(START, start)
            .add_parameter(MAX, max_results)
            .fetch_strings()
        )
