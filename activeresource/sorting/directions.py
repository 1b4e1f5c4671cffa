# Copyright 2019-2026 SURF.
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
from collections.abc import Iterator, Mapping, Sequence

DirectionSet = dict[str, bool]


def _check_separators(separators: Sequence[str]) -> tuple[str, str]:
    if len(separators) != 2 or not all(separators) or separators[0] == separators[1]:
        raise ValueError(f"Expected two distinct, non-empty separators, got {separators!r}")
    return separators[0], separators[1]


def parse_sort_var(
    value: str | None, separators: Sequence[str] = ("-", "."), desc_tag: str = "desc"
) -> Iterator[tuple[str, bool]]:
    """Parse the value of the sort request variable into (attribute, descending) pairs.

    Attributes are separated by the first separator. An attribute ending in the second separator followed by the
    descending tag is sorted descending.

    >>> list(parse_sort_var("name-created_at.desc"))
    [('name', False), ('created_at', True)]

    >>> list(parse_sort_var("user.name.desc"))
    [('user.name', True)]

    >>> list(parse_sort_var(""))
    []
    """
    attribute_separator, direction_separator = _check_separators(separators)
    if not value:
        return

    for token in value.split(attribute_separator):
        attribute, sep, tag = token.rpartition(direction_separator)
        descending = bool(sep) and tag == desc_tag
        if not descending:
            attribute = token
        if attribute:
            yield attribute, descending


def create_sort_var_value(
    directions: Mapping[str, bool], separators: Sequence[str] = ("-", "."), desc_tag: str = "desc"
) -> str:
    """Inverse of `parse_sort_var`.

    >>> create_sort_var_value({"name": False, "created_at": True})
    'name-created_at.desc'
    """
    attribute_separator, direction_separator = _check_separators(separators)
    return attribute_separator.join(
        f"{attribute}{direction_separator}{desc_tag}" if descending else attribute
        for attribute, descending in directions.items()
    )
