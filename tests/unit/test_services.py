import pytest

from domain.errors import DecodeError, ServerError
from domain.schemas import Category, Heading, Option, Property, Superheading, Synonym, Taxonomy, User


def _sent(transport) -> list[tuple[str, str]]:
    return [(c.method.value, c.path) for c in transport.calls]


@pytest.fixture
def category() -> Category:
    return Category(opco="PKT", slug="steakhouses", name="Steakhouses", language="en", version="v1")


def test_update_returns_new_instance_and_leaves_input_untouched(client, transport, category, make_record) -> None:
    transport.reply("PUT", "category", make_record("Category", "steakhouses", name="Steak Houses", version="v2"))
    edited = category.model_copy(update={"name": "Steak Houses"})

    updated = client.categories.update(edited)

    assert category.name == "Steakhouses" and category.version == "v1"
    assert edited.name == "Steak Houses" and edited.version == "v1"
    assert updated is not edited
    assert updated.version == "v2"
    assert updated == category
    assert transport.calls[0].params == {
        "opco": "PKT",
        "slug": "steakhouses",
        "name": "Steak Houses",
        "lang": "en",
        "v": "v1",
    }


def test_update_can_clear_fields(client, transport, make_record) -> None:
    transport.reply("PUT", "option", make_record("Option", "mexican", version="v2"))
    option = Option(opco="PKT", slug="mexican", external="EXT-9", version="v1")

    client.options.update(option.model_copy(update={"external": None}), clear=["external"])

    assert transport.calls[0].params == {"opco": "PKT", "slug": "mexican", "external": "", "v": "v1"}


def test_update_rejects_unknown_clear_field(client, category) -> None:
    with pytest.raises(ValueError):
        client.categories.update(category, clear=["slug"])


def test_delete_sends_version_for_every_kind(client, transport) -> None:
    transport.reply("DELETE", "superheading", "")
    transport.reply("DELETE", "synonym", "")
    transport.reply("DELETE", "heading", "")

    client.superheadings.delete(Superheading(opco="PKT", slug="food", version="s4"))
    client.synonyms.delete(Synonym(opco="PKT", slug="tex-mex", version="y2"))
    client.headings.delete(Heading(opco="PKT", pid="1234", version="h7"))

    assert [c.params for c in transport.calls] == [
        {"opco": "PKT", "slug": "food", "v": "s4"},
        {"opco": "PKT", "slug": "tex-mex", "v": "y2"},
        {"opco": "PKT", "pid": "1234", "v": "h7"},
    ]


def test_properties_offer_no_delete(client) -> None:
    assert not hasattr(client.properties, "delete")
    assert hasattr(client.categories, "delete")
    assert hasattr(client.synonyms, "delete")


def test_add_synonym_creates_when_slug_is_unknown(client, transport, category, make_record) -> None:
    transport.reply("GET", "slug", "tex-mex")
    transport.reply("GET", "synonym", {"error": "Synonym not found"}, status=404)
    transport.reply("POST", "category/synonym", make_record("Synonym", "tex-mex", name="Tex Mex", version="y1"))

    synonym = client.categories.add_synonym(category, "Tex Mex", language="en")

    assert _sent(transport) == [("GET", "slug"), ("GET", "synonym"), ("POST", "category/synonym")]
    assert transport.calls[0].params == {"value": "Tex Mex"}
    assert transport.calls[1].params == {"opco": "PKT", "slug": "tex-mex"}
    assert transport.calls[2].params == {
        "opco": "PKT",
        "name": "Tex Mex",
        "slug": "tex-mex",
        "lang": "en",
        "category": "steakhouses",
    }
    assert synonym.identity_key == "synonym:PKT:tex-mex"


def test_add_synonym_attaches_and_returns_existing(client, transport, category, make_record) -> None:
    transport.reply("GET", "slug", "tex-mex")
    transport.reply("GET", "synonym", make_record("Synonym", "tex-mex", name="Tex-Mex", version="y9"))
    transport.reply("PUT", "category/synonym", "")

    synonym = client.categories.add_synonym(category, "Tex Mex")

    assert _sent(transport) == [("GET", "slug"), ("GET", "synonym"), ("PUT", "category/synonym")]
    assert transport.calls[2].params == {"opco": "PKT", "category": "steakhouses", "slug": "tex-mex"}
    assert synonym.name == "Tex-Mex"
    assert synonym.version == "y9"


def test_add_synonym_propagates_other_lookup_errors(client, transport, category) -> None:
    transport.reply("GET", "slug", "tex-mex")
    transport.reply("GET", "synonym", {"error": "Database unavailable"}, status=500)

    with pytest.raises(ServerError) as exc:
        client.categories.add_synonym(category, "Tex Mex")

    assert exc.value.status == 500
    assert _sent(transport) == [("GET", "slug"), ("GET", "synonym")]


def test_add_existing_synonym_object_goes_straight_to_attach(client, transport) -> None:
    transport.reply("PUT", "heading/synonym", "")
    heading = Heading(opco="PKT", pid="1234")
    synonym = Synonym(opco="PKT", slug="steaks")

    assert client.headings.add_synonym(heading, synonym) is synonym
    assert _sent(transport) == [("PUT", "heading/synonym")]
    assert transport.calls[0].params == {"opco": "PKT", "heading": "1234", "slug": "steaks"}


def test_headings_are_keyed_by_pid(client, transport, make_record) -> None:
    transport.reply("GET", "heading", make_record("Heading", "1234"))

    heading = client.headings.get("PKT", "1234")

    assert transport.calls[0].params == {"opco": "PKT", "pid": "1234"}
    assert heading.identity_key == "heading:PKT:1234"


def test_category_create_under_taxonomy_or_category(client, transport, make_record) -> None:
    transport.reply("POST", "category", make_record("Category", "pizza"))
    transport.reply("POST", "category", make_record("Category", "deep-dish"))

    client.categories.create("PKT", "Pizza", parent=Taxonomy(opco="PKT", slug="restaurants"))
    client.categories.create("PKT", "Deep Dish", slug="deep-dish", parent=Category(opco="PKT", slug="pizza"))

    assert transport.calls[0].params == {"opco": "PKT", "name": "Pizza", "taxonomy": "restaurants"}
    assert transport.calls[1].params == {"opco": "PKT", "name": "Deep Dish", "slug": "deep-dish", "category": "pizza"}


def test_category_create_conflict_exposes_duplicate(client, transport, make_record) -> None:
    transport.reply(
        "POST",
        "category",
        {"error": "Slug already in use", "duplicate": make_record("Category", "pizza", version="v5")},
        status=409,
    )

    with pytest.raises(ServerError) as exc:
        client.categories.create("PKT", "Pizza")

    assert exc.value.is_conflict
    assert exc.value.duplicate == Category(opco="PKT", slug="pizza")
    assert exc.value.duplicate.version == "v5"


def test_category_children_of_taxonomy_and_category(client, transport, make_record) -> None:
    transport.reply("GET", "taxonomy/categories", [make_record("Category", "pizza")])
    transport.reply("GET", "category/children", [make_record("Category", "deep-dish")])

    top = client.taxonomies.children(Taxonomy(opco="PKT", slug="restaurants"))
    sub = client.categories.children(Category(opco="PKT", slug="pizza"))

    assert top == [Category(opco="PKT", slug="pizza")]
    assert sub == [Category(opco="PKT", slug="deep-dish")]
    assert transport.calls[0].params == {"opco": "PKT", "slug": "restaurants"}


def test_category_parents_are_polymorphic(client, transport, make_record) -> None:
    transport.reply(
        "GET",
        "category/parents",
        [make_record("Taxonomy", "restaurants"), make_record("Category", "food"), make_record("Gadget", "x")],
    )

    parents = client.categories.parents(Category(opco="PKT", slug="pizza"))

    assert parents == [Taxonomy(opco="PKT", slug="restaurants"), Category(opco="PKT", slug="food")]


def test_relation_calls_name_both_ends(client, transport) -> None:
    for method, path in [
        ("PUT", "category/children"),
        ("PUT", "category/option"),
        ("DELETE", "taxonomy/property"),
        ("PUT", "option/sub"),
        ("PUT", "category/mapping"),
        ("DELETE", "heading/mapping"),
    ]:
        transport.reply(method, path, "")
    pizza = Category(opco="PKT", slug="pizza")
    cuisine = Property(opco="PKT", slug="cuisine")
    italian = Option(opco="PKT", slug="italian")

    client.categories.add_child(pizza, Category(opco="PKT", slug="deep-dish"))
    client.categories.add_option(pizza, cuisine, italian)
    client.taxonomies.remove_property(Taxonomy(opco="PKT", slug="restaurants"), cuisine)
    client.options.add_suboption(italian, Option(opco="PKT", slug="sicilian"))
    client.categories.map_category(pizza, Category(opco="CAN", slug="pizzerias"))
    client.headings.unmap_heading(Heading(opco="PKT", pid="1234"), pizza)

    assert [c.params for c in transport.calls] == [
        {"opco": "PKT", "parent": "pizza", "child": "deep-dish"},
        {"opco": "PKT", "category": "pizza", "property": "cuisine", "option": "italian"},
        {"opco": "PKT", "taxonomy": "restaurants", "property": "cuisine"},
        {"opco": "PKT", "option": "italian", "suboption": "sicilian"},
        {"opco": "PKT", "from": "pizza", "to_opco": "CAN", "to": "pizzerias"},
        {"opco": "PKT", "from": "1234", "to_opco": "PKT", "to": "pizza"},
    ]


def test_mappings_pass_direction(client, transport) -> None:
    transport.reply("GET", "category/mappings", [])
    transport.reply("GET", "category/mappings", [])

    client.categories.mapped_to(Category(opco="PKT", slug="pizza"))
    client.categories.mapped_from(Category(opco="PKT", slug="pizza"))

    assert [c.params["dir"] for c in transport.calls] == ["to", "from"]


def test_inheritance_returns_properties_with_options(client, transport, make_record) -> None:
    transport.reply(
        "GET",
        "category/inheritance",
        [make_record("Property", "cuisine", options=[make_record("Option", "italian"), make_record("Option", "mexican")])],
    )

    (prop,) = client.categories.inheritance(Category(opco="PKT", slug="pizza"))

    assert prop == Property(opco="PKT", slug="cuisine")
    assert [o.slug for o in prop.options] == ["italian", "mexican"]


def test_taxonomy_options_are_decoded_strictly(client, transport, make_record) -> None:
    taxonomy = Taxonomy(opco="PKT", slug="restaurants")
    transport.reply("GET", "taxonomy/options", [make_record("Property", "cuisine", options=[])])
    transport.reply("GET", "taxonomy/options", [make_record("Property", "cuisine"), make_record("Option", "stray")])
    transport.reply("GET", "taxonomy/options", [make_record("Option", "italian")])

    assert client.taxonomies.options(taxonomy)[0].options == []
    with pytest.raises(DecodeError):
        client.taxonomies.options(taxonomy)
    assert client.taxonomies.property_options(taxonomy, Property(opco="PKT", slug="cuisine")) == [
        Option(opco="PKT", slug="italian")
    ]
    assert transport.calls[2].params == {"opco": "PKT", "slug": "restaurants", "property": "cuisine"}


def test_option_create_only_relates_with_a_property(client, transport, make_record) -> None:
    transport.reply("POST", "option", make_record("Option", "italian"))
    transport.reply("POST", "option", make_record("Option", "sicilian"))
    pizza = Category(opco="PKT", slug="pizza")

    client.options.create("PKT", "Italian", related_to=pizza)
    client.options.create("PKT", "Sicilian", related_to=pizza, related_by=Property(opco="PKT", slug="cuisine"))

    assert transport.calls[0].params == {"opco": "PKT", "name": "Italian"}
    assert transport.calls[1].params == {"opco": "PKT", "name": "Sicilian", "category": "pizza", "property": "cuisine"}


def test_heading_create_under_superheading(client, transport, make_record) -> None:
    transport.reply("POST", "heading", make_record("Heading", "1234"))

    client.headings.create("PKT", "Steak", pid="1234", parent=Superheading(opco="PKT", slug="food"))

    assert transport.calls[0].params == {"opco": "PKT", "name": "Steak", "pid": "1234", "superheading": "food"}


def test_operating_companies(client, transport, make_record) -> None:
    transport.reply("GET", "opcos", [{"definition": "OperatingCompany", "slug": "PKT", "name": "Pages", "language": "fr"}])
    transport.reply("GET", "taxonomies", [make_record("Taxonomy", "restaurants")])
    transport.reply("PUT", "opco/user", "")
    transport.reply("GET", "opco/history", ["created pizza", "mapped pizza"])

    (opco,) = client.operating_companies.all()
    taxonomies = client.operating_companies.taxonomies("PKT")
    client.operating_companies.add_user("PKT", User(login="ann"))
    history = client.operating_companies.history("PKT", max_results=2)

    assert opco.opco == "PKT" and opco.identity_key == "operatingcompany:PKT"
    assert taxonomies == [Taxonomy(opco="PKT", slug="restaurants")]
    assert transport.calls[2].params == {"opco": "PKT", "login": "ann"}
    assert history == ["created pizza", "mapped pizza"]
    assert transport.calls[3].params == {"opco": "PKT", "from": "0", "max": "2"}


def test_users(client, transport) -> None:
    transport.reply("POST", "user", {"login": "bob", "email": "bob@example.com"})
    transport.reply("PUT", "user/disable", {"login": "bob", "disabled": True})
    transport.reply("PUT", "role/user", "")
    transport.reply("GET", "user/history", ["logged in", 7])

    bob = client.users.create("bob", "bob@example.com", "pw", "pw", opco="PKT")
    disabled = client.users.disable(bob)
    client.users.add_role(bob, "Administrator")

    assert transport.calls[0].params == {
        "login": "bob",
        "password": "pw",
        "confirmation": "pw",
        "email": "bob@example.com",
        "opco": "PKT",
    }
    assert disabled.disabled is True and disabled == bob
    assert transport.calls[2].params == {"role": "Administrator", "login": "bob"}
    with pytest.raises(DecodeError):
        client.users.history(bob)
