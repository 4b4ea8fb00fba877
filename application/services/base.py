"""Shared protocol for the per-kind Terra services."""

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, ClassVar, Generic, TypeVar

from application.constants import CLEARABLE_FIELDS, EXTERNAL, LANG, NAME, OPCO, SLUG, VERSION
from application.request import CLEAR, Request
from domain.lookup import Lookup
from domain.schemas import Meme, Synonym
from infrastructure.transport.base import HttpMethod

if TYPE_CHECKING:
    from application.client import TerraClient

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=Meme)


class Service:
    """Stateless facade over one area of the Terra API, bound to an (optionally authenticated) client."""

    def __init__(self, client: "TerraClient") -> None:
        self.client = client

    def request(self, resource: str, method: HttpMethod = HttpMethod.GET) -> Request:
        return self.client.request(resource, method)


class MemeService(Service, Generic[M]):
    """
    Read and update for one meme kind.

    Subclasses bind:
    - resource: singular resource path, e.g. "category"; also the parameter name other
      calls use to refer to a meme of this kind
    - model: entity class decoded from responses
    - key_param: wire name of the natural key ("slug", or "pid" for headings)

    Status codes callers should expect from mutating calls:
    404 the meme does not exist, 406 validation failed, 409 slug already taken
    (`ServerError.duplicate` holds the existing meme), 412 stale version token.
    """

    resource: ClassVar[str]
    model: ClassVar[type[Meme]]
    key_param: ClassVar[str] = SLUG

    def _for(self, resource: str, meme: Meme, method: HttpMethod = HttpMethod.GET) -> Request:
        """Request about `meme`, identified by its opco and natural key."""
        return self.request(resource, method).add_parameter(OPCO, meme.opco).add_parameter(self.key_param, meme.key)

    def _as_subject(self, resource: str, meme: Meme, method: HttpMethod) -> Request:
        """Relation request naming `meme` by this kind's resource name (e.g. category=<slug>)."""
        return self.request(resource, method).add_parameter(OPCO, meme.opco).add_parameter(self.resource, meme.key)

    def get(self, opco: str, key: str) -> M:
        return (
            self.request(self.resource)
            .add_parameter(OPCO, opco)
            .add_parameter(self.key_param, key)
            .fetch_one(self.model)  # type: ignore[return-value]
        )

    def find(self, opco: str, key: str) -> Lookup[M]:
        """Like get(), but reports not-found (and other server rejections) in the result."""
        return (
            self.request(self.resource)
            .add_parameter(OPCO, opco)
            .add_parameter(self.key_param, key)
            .find_one(self.model)  # type: ignore[return-value]
        )

    def update(self, meme: M, *, clear: Iterable[str] = ()) -> M:
        """
        Submit a locally edited copy (see `model_copy(update=...)`) and return the server's version.

        Fields left as None are not sent and stay unchanged on the server; name them in
        `clear` ("name", "external", "language") to blank them instead. The instance passed
        in is never modified.
        """
        request = (
            self._for(self.resource, meme, HttpMethod.PUT)
            .add_parameter(NAME, meme.name)
            .add_parameter(EXTERNAL, meme.external)
            .add_parameter(LANG, meme.language)
            .add_parameter(VERSION, meme.version)
        )
        for field in clear:
            try:
                request.add_parameter(CLEARABLE_FIELDS[field], CLEAR)
            except KeyError as e:
                raise ValueError(f"Cannot clear {field!r}; clearable fields: {sorted(CLEARABLE_FIELDS)}") from e
        return request.fetch_one(self.model)  # type: ignore[return-value]


class DeletableMemeService(MemeService[M]):
    """Meme kinds the server lets you delete (every kind except properties)."""

    def delete(self, meme: M) -> None:
        """Delete the meme. Children and relations are orphaned on the server; 412 if `meme` is stale."""
        self._for(self.resource, meme, HttpMethod.DELETE).add_parameter(VERSION, meme.version).send()


class SynonymHostService(MemeService[M]):
    """Meme kinds that synonyms can be attached to, via `<resource>/synonym(s)`."""

    def synonyms(self, host: M) -> list[Synonym]:
        return self._for(f"{self.resource}/synonyms", host).fetch_list(Synonym)

    def create_synonym(
        self,
        host: M,
        name: str,
        slug: str | None = None,
        language: str | None = None,
    ) -> Synonym:
        """Create a new synonym already attached to `host`. Slug defaults to the server's slugified name."""
        return (
            self.request(f"{self.resource}/synonym", HttpMethod.POST)
            .add_parameter(OPCO, host.opco)
            .add_parameter(NAME, name)
            .add_parameter(SLUG, slug)
            .add_parameter(LANG, language)
            .add_parameter(self.resource, host.key)
            .fetch_one(Synonym)
        )

    def _attach(self, host: M, slug: str) -> None:
        self._as_subject(f"{self.resource}/synonym", host, HttpMethod.PUT).add_parameter(SLUG, slug).send()

    def add_synonym(self, host: M, synonym: Synonym | str, language: str | None = None) -> Synonym:
        """
        Attach a synonym to `host`.

        Given a Synonym, it is attached as-is. Given a name, the server slugifies it; an
        existing synonym with that slug is attached and returned, otherwise a new one is
        created under that slug. Lookup errors other than not-found are raised unchanged.
        """
        if isinstance(synonym, Synonym):
            self._attach(host, synonym.slug)
            return synonym

        slug = self.client.slugify(synonym)
        existing = self.client.synonyms.find(host.opco, slug)
        if existing.is_found:
            self._attach(host, slug)
            return existing.unwrap()
        if existing.is_missing:
            logger.debug("No synonym %s:%s yet; creating it under %s %s", host.opco, slug, self.resource, host.key)
            return self.create_synonym(host, synonym, slug=slug, language=language)
        return existing.unwrap()

    def remove_synonym(self, host: M, synonym: Synonym) -> None:
        self._as_subject(f"{self.resource}/synonym", host, HttpMethod.DELETE).add_parameter(SLUG, synonym.slug).send()
