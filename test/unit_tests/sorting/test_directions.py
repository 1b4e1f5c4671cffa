import pytest

from activeresource.sorting import create_sort_var_value, parse_sort_var


@pytest.mark.parametrize(
    "value,expected",
    [
        ("name", [("name", False)]),
        ("name.desc", [("name", True)]),
        ("name.asc", [("name.asc", False)]),
        ("name-email.desc", [("name", False), ("email", True)]),
        ("user.name.desc", [("user.name", True)]),
        ("-name--", [("name", False)]),
        (".desc", []),
        (None, []),
    ],
)
def test_parse_sort_var(value, expected):
    assert list(parse_sort_var(value)) == expected


def test_parse_sort_var_custom_separators():
    assert list(parse_sort_var("a:down,b", separators=(",", ":"), desc_tag="down")) == [("a", True), ("b", False)]


def test_create_sort_var_value():
    assert create_sort_var_value({"a": True, "b": False}, separators=(",", ":"), desc_tag="down") == "a:down,b"
    assert create_sort_var_value({}) == ""


@pytest.mark.parametrize("separators", [("-",), ("-", "-"), ("", ".")])
def test_invalid_separators(separators):
    with pytest.raises(ValueError):
        list(parse_sort_var("name", separators=separators))
    with pytest.raises(ValueError):
        create_sort_var_value({"name": True}, separators=separators)
