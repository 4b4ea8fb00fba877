import logging

import pytest

from domain.errors import DecodeError, UnknownKindError
from domain.schemas import Category, Heading, Option, Property
from domain.taxonomy.decoder import (
    decode_as,
    decode_list,
    decode_many,
    decode_one,
    decode_strings,
    parse_json,
)


def test_decode_one_dispatches_on_definition(make_record) -> None:
    node = decode_one(make_record("Heading", "1234", external="EXT-1"))

    assert isinstance(node, Heading)
    assert node.pid == "1234"
    assert node.external == "EXT-1"


def test_decode_one_rejects_unknown_or_missing_tag(make_record) -> None:
    with pytest.raises(UnknownKindError) as exc:
        decode_one(make_record("Widget", "gear"))
    assert exc.value.definition == "Widget"

    record = make_record("Category", "pizza")
    del record["definition"]
    with pytest.raises(UnknownKindError):
        decode_one(record)


def test_decode_one_reports_missing_required_field(make_record) -> None:
    record = make_record("Heading", "1234")
    del record["pid"]

    with pytest.raises(DecodeError) as exc:
        decode_one(record)

    assert "pid" in exc.value.message
    assert exc.value.record is record


def test_decode_as_refuses_record_of_another_kind(make_record) -> None:
    with pytest.raises(DecodeError):
        decode_as(Category, make_record("Option", "mexican"))


def test_decode_as_rejects_non_objects() -> None:
    with pytest.raises(DecodeError):
        decode_as(Category, ["not", "an", "object"])


def test_decode_many_skips_unknown_and_malformed_records(make_record, caplog) -> None:
    caplog.set_level(logging.WARNING, logger="domain.taxonomy.decoder")
    malformed = make_record("Category", "broken")
    del malformed["slug"]
    records = [
        make_record("Category", "pizza"),
        make_record("Widget", "gear"),
        malformed,
        "not a record",
        make_record("Option", "mexican"),
    ]

    nodes = decode_many(records)

    assert nodes == [Category(opco="PKT", slug="pizza"), Option(opco="PKT", slug="mexican")]
    assert "unknown definition 'Widget'" in caplog.text
    assert "Skipping record 2" in caplog.text
    assert "Skipping record 3" in caplog.text


def test_decode_many_requires_an_array(make_record) -> None:
    with pytest.raises(DecodeError):
        decode_many(make_record("Category", "pizza"))


def test_decode_list_is_strict(make_record) -> None:
    good = [make_record("Property", "cuisine", options=[make_record("Option", "mexican")])]
    props = decode_list(Property, good)
    assert props[0].options == [Option(opco="PKT", slug="mexican")]

    with pytest.raises(DecodeError):
        decode_list(Property, good + [make_record("Option", "stray")])


def test_parse_json_wraps_syntax_errors() -> None:
    assert parse_json('{"a": 1}') == {"a": 1}
    with pytest.raises(DecodeError):
        parse_json("<html>Bad gateway</html>")


def test_decode_strings() -> None:
    assert decode_strings(["created pizza", "deleted sushi"]) == ["created pizza", "deleted sushi"]
    with pytest.raises(DecodeError):
        decode_strings(["ok", 3])
