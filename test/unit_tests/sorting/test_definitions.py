import pytest

from activeresource.sorting import Identity, Mapped, SortAttribute, Wildcard, parse_attribute_map
from activeresource.utils.errors import InvalidSortDefinitionError


def test_parse_attribute_map_mapping():
    attributes = parse_attribute_map(
        {
            "mail": "email",
            "user": {"asc": "first_name", "desc": "first_name.DESC", "label": "Owner", "default": "desc"},
            0: "*",
            1: "created_at",
        }
    )
    assert attributes == (
        SortAttribute("mail", Identity("email")),
        SortAttribute("user", Mapped(asc="first_name", desc="first_name.DESC", label="Owner", default="desc")),
        SortAttribute(None, Wildcard()),
        SortAttribute("created_at", Identity("created_at")),
    )


def test_parse_attribute_map_sequence():
    assert parse_attribute_map(["name", "*", Identity("email")]) == (
        SortAttribute("name", Identity("name")),
        SortAttribute(None, Wildcard()),
        SortAttribute("email", Identity("email")),
    )


def test_parse_attribute_map_accepts_definitions():
    mapped = Mapped(asc="a")
    assert parse_attribute_map({"x": mapped, 0: Wildcard()}) == (
        SortAttribute("x", mapped),
        SortAttribute(None, Wildcard()),
    )


def test_parse_attribute_map_empty():
    assert parse_attribute_map(None) == ()
    assert parse_attribute_map({}) == ()
    assert parse_attribute_map([]) == ()


@pytest.mark.parametrize(
    "raw",
    [
        "name",
        {"user": 1},
        {"user": ""},
        {"user": {"asc": 1}},
        {"user": {"sort": "name"}},
        {"user": {"default": "up"}},
        {"user": "*"},
        {0: {"asc": "name"}},
        [None],
    ],
)
def test_parse_attribute_map_invalid(raw):
    with pytest.raises(InvalidSortDefinitionError):
        parse_attribute_map(raw)


def test_invalid_sort_definition_error_message():
    with pytest.raises(InvalidSortDefinitionError, match="wildcard") as exc_info:
        parse_attribute_map({"user": "*"})
    assert exc_info.value.key == "user"
    assert "(key: 'user')" in str(exc_info.value)
