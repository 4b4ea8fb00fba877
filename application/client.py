"""Session-holding entry point to a Terra server."""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from application.constants import (
    FUNCTION_RESOURCE,
    LANG,
    LOGIN,
    MAX,
    NAME,
    OPCO,
    PASSWORD,
    SEARCH_RESOURCE,
    SESSION_RESOURCE,
    SLUG,
    SLUG_RESOURCE,
    START,
    TEST_RESET_RESOURCE,
    UUID_RESOURCE,
)
from application.request import Request
from application.services import (
    CategoriesService,
    HeadingsService,
    OperatingCompaniesService,
    OptionsService,
    PropertiesService,
    SuperheadingsService,
    SynonymsService,
    TaxonomiesService,
    UsersService,
)
from domain.schemas import Meme, Node, User
from infrastructure.config.models import ClientConfig
from infrastructure.observability.logging import clear_session_context, set_log_context
from infrastructure.transport.base import HttpMethod, Transport, TransportResponse
from infrastructure.transport.factory import make_transport
from infrastructure.transport.mock import ReplyKey

logger = logging.getLogger(__name__)


class TerraClient:
    """
    Connection to one Terra server for one user account.

    Every request goes through this client or one of its services. After `authenticate()`
    the user's session credential is attached to every request; authenticating again replaces
    it wholesale, so keep one client per account rather than sharing it between users.
    """

    def __init__(self, *, cfg: ClientConfig, transport: Transport | None = None) -> None:
        self.cfg = cfg
        self.transport = transport if transport is not None else make_transport(cfg)
        self.user: User | None = None

    @classmethod
    def from_config(
        cls,
        cfg: ClientConfig,
        *,
        use_mock: bool = False,
        mock_replies: Mapping[ReplyKey, Iterable[TransportResponse]] | None = None,
    ) -> "TerraClient":
        return cls(cfg=cfg, transport=make_transport(cfg, use_mock=use_mock, mock_replies=mock_replies))

    @property
    def credential(self) -> str | None:
        return self.user.user_credentials if self.user is not None else None

    def request(self, resource: str, method: HttpMethod = HttpMethod.GET) -> Request:
        """Low-level hook used by the services; handy for endpoints they do not wrap."""
        return Request(self, resource, method)

    # ---- session ----

    def authenticate(self, login: str | None = None, password: str | None = None) -> "TerraClient":
        """
        Log in and keep the returned session credential for later calls.

        Falls back to the login/password from the config. Returns the client for chaining.
        """
        login = login if login is not None else self.cfg.login
        password = password if password is not None else self.cfg.password
        if login is None or password is None:
            raise ValueError("authenticate() needs a login and password (none given, none configured)")

        user = (
            self.request(SESSION_RESOURCE, HttpMethod.POST)
            .add_parameter(LOGIN, login)
            .add_parameter(PASSWORD, password)
            .fetch_one(User)
        )
        self.user = user
        set_log_context(login=user.login, credential=user.user_credentials)
        logger.info("Authenticated as %s", user.login)
        return self

    def sign_out(self) -> None:
        """Forget the session credential locally."""
        if self.user is not None:
            logger.info("Signed out %s", self.user.login)
        self.user = None
        clear_session_context()

    # ---- server utilities ----

    def search(
        self,
        language: str,
        terms: str,
        definitions: Iterable[Any] | None = None,
        opco: str | None = None,
        start: int = 0,
        max_results: int = 10,
    ) -> list[Node]:
        """
        Free-text search across memes, in order of relevance.

        Searches are per language (stemming is language-specific) but may span opcos
        unless `opco` is given. `definitions` limits the kinds returned, e.g. ["Category"].
        """
        return (
            self.request(SEARCH_RESOURCE)
            .add_parameter(LANG, language)
            .add_parameter("q", terms)
            .add_parameter("definitions", list(definitions) if definitions is not None else None)
            .add_parameter(OPCO, opco)
            .add_parameter(START, start)
            .add_parameter(MAX, max_results)
            .fetch_nodes()
        )

    def _function_request(self, name: str, start: Meme | None) -> Request:
        request = self.request(FUNCTION_RESOURCE).add_parameter(NAME, name)
        if start is not None:
            request.add_parameter(OPCO, start.opco).add_parameter("definition", start.definition).add_parameter(
                SLUG, start.key
            )
        return request

    def traverse(self, name: str, start: Meme | None = None) -> str:
        """Run a server-side traversal function (e.g. "edsa::taxonomy") and return its raw output."""
        return self._function_request(name, start).fetch_text()

    def traverse_nodes(self, name: str, start: Meme | None = None) -> list[Node]:
        """Run a traversal function whose output is an array of memes."""
        return self._function_request(name, start).fetch_nodes()

    def slugify(self, value: str) -> str:
        """Ask the server for the slug it would derive from `value`."""
        return self.request(SLUG_RESOURCE).add_parameter("value", value).fetch_text()

    def uuid(self) -> str:
        return self.request(UUID_RESOURCE).fetch_text()

    def reset_test_portfolio(self) -> None:
        """Clear every meme out of the TEST portfolio. Fails if that portfolio is not set up."""
        self.request(TEST_RESET_RESOURCE).fetch_text()

    # ---- services ----

    @property
    def operating_companies(self) -> OperatingCompaniesService:
        return OperatingCompaniesService(self)

    @property
    def taxonomies(self) -> TaxonomiesService:
        return TaxonomiesService(self)

    @property
    def categories(self) -> CategoriesService:
        return CategoriesService(self)

    @property
    def headings(self) -> HeadingsService:
        return HeadingsService(self)

    @property
    def superheadings(self) -> SuperheadingsService:
        return SuperheadingsService(self)

    @property
    def properties(self) -> PropertiesService:
        return PropertiesService(self)

    @property
    def options(self) -> OptionsService:
        return OptionsService(self)

    @property
    def synonyms(self) -> SynonymsService:
        return SynonymsService(self)

    @property
    def users(self) -> UsersService:
        return UsersService(self)

    # ---- lifecycle ----

    def close(self) -> None:
        self.transport.close()

    def __enter__(self) -> "TerraClient":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()
