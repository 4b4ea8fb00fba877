"""Pydantic models for the Terra node graph."""

from enum import Enum
from typing import Any, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr


class Definition(str, Enum):
    """Kind tags carried in the `definition` field of meme records."""

    OPERATING_COMPANY = "OperatingCompany"
    TAXONOMY = "Taxonomy"
    CATEGORY = "Category"
    HEADING = "Heading"
    SUPERHEADING = "Superheading"
    PROPERTY = "Property"
    OPTION = "Option"
    SYNONYM = "Synonym"


class Node(BaseModel):
    """
    Anything in Terra with a stable identity.

    Identity is the string `<kind>:<natural key parts>` (e.g. "category:PKT:steakhouses").
    It is computed once when the instance is built and carried over by `model_copy`,
    so a locally edited copy still compares equal to the snapshot it came from.
    The kind is always part of the key: a Category and a Heading never compare equal.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    kind: ClassVar[str] = "node"

    _identity: str = PrivateAttr(default="")

    def model_post_init(self, __context: Any) -> None:
        self._identity = ":".join([self.kind, *self._natural_key()])

    def _natural_key(self) -> tuple[str, ...]:
        raise NotImplementedError

    @property
    def identity_key(self) -> str:
        return self._identity

    def to_record(self) -> dict[str, Any]:
        """Wire-shaped dict; feeding it back through the decoder yields an equal node."""
        return self.model_dump(mode="json")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self._identity == other._identity

    def __hash__(self) -> int:
        return hash(self._identity)


class Meme(Node):
    """
    A node owned by an operating company: categories, headings, options, etc.

    The natural key (`key`) is unique only within (opco, definition).
    """

    definition: str
    opco: str = Field(..., description="Three or four letter operating company code, e.g. 'PKT'.")
    name: str | None = None
    external: str | None = Field(
        default=None,
        description="Third-party identifier; should be unique within the opco but the server does not enforce it.",
    )
    language: str | None = Field(default=None, description="Two-letter ISO language code of `name`.")
    version: str | None = Field(
        default=None,
        description="Opaque optimistic-concurrency token issued by the server; required on update/delete.",
    )

    @property
    def key(self) -> str:
        raise NotImplementedError

    def _natural_key(self) -> tuple[str, ...]:
        return (self.opco, self.key)


class SlugMeme(Meme):
    """Meme identified by a slug."""

    slug: str

    @property
    def key(self) -> str:
        return self.slug


class OperatingCompany(Node):
    """An operating company (portfolio), such as PKT. Usually you just pass its code around."""

    kind: ClassVar[str] = "operatingcompany"

    definition: Literal["OperatingCompany"] = "OperatingCompany"
    slug: str = Field(..., description="Three or four letter code, e.g. 'PKT'.")
    name: str | None = None
    language: str | None = Field(default=None, description="Default language for memes created in this opco.")

    @property
    def opco(self) -> str:
        return self.slug

    @property
    def key(self) -> str:
        return self.slug

    def _natural_key(self) -> tuple[str, ...]:
        return (self.slug,)


class Taxonomy(SlugMeme):
    """A collection of categories; options attached to it are inherited by all its categories."""

    kind: ClassVar[str] = "taxonomy"

    definition: Literal["Taxonomy"] = "Taxonomy"


class Category(SlugMeme):
    kind: ClassVar[str] = "category"

    definition: Literal["Category"] = "Category"


class Heading(Meme):
    """An opco sales heading. Headings map onto categories and inherit their properties and options."""

    kind: ClassVar[str] = "heading"

    definition: Literal["Heading"] = "Heading"
    pid: str = Field(..., description="The operating company's own identifier for the heading.")

    @property
    def key(self) -> str:
        return self.pid


class Superheading(SlugMeme):
    kind: ClassVar[str] = "superheading"

    definition: Literal["Superheading"] = "Superheading"


class Option(SlugMeme):
    kind: ClassVar[str] = "option"

    definition: Literal["Option"] = "Option"


class Property(SlugMeme):
    """
    The "verb" relating an option to a category or taxonomy (e.g. "cuisine").

    `options` is only populated when the property comes back from an options or
    inheritance listing; plain get/all calls leave it as None.
    """

    kind: ClassVar[str] = "property"

    definition: Literal["Property"] = "Property"
    options: list[Option] | None = None


class Synonym(SlugMeme):
    kind: ClassVar[str] = "synonym"

    definition: Literal["Synonym"] = "Synonym"


class User(Node):
    """A Terra user account."""

    kind: ClassVar[str] = "user"

    login: str
    email: str | None = None
    roles: list[str] = Field(default_factory=list, description="'Super' and/or 'Administrator'.")
    disabled: bool = False
    user_credentials: str | None = Field(
        default=None,
        repr=False,
        description="Session credential issued on login; sent with every later request.",
    )
    # Never returned by the server; only submitted on update.
    password: str | None = Field(default=None, repr=False, exclude=True)
    password_confirmation: str | None = Field(default=None, repr=False, exclude=True)

    def _natural_key(self) -> tuple[str, ...]:
        return (self.login,)
