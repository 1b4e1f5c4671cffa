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
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Literal, Union

from activeresource.utils.errors import InvalidSortDefinitionError

WILDCARD = "*"

DESC_SUFFIX = ".DESC"


@dataclass(frozen=True)
class Identity:
    """Sort on a single attribute name."""

    name: str


@dataclass(frozen=True)
class Mapped:
    """Virtual attribute with explicit order fragments per direction.

    Note the `.DESC` suffix for the descending fragment: `Mapped(asc="first_name", desc="first_name.DESC")`.
    """

    asc: str | None = None
    desc: str | None = None
    label: str | None = None
    default: Literal["asc", "desc"] | None = None


@dataclass(frozen=True)
class Wildcard:
    """Accept any key that is an attribute of the model."""


Definition = Union[Identity, Mapped, Wildcard]
ResolvedDefinition = Union[Identity, Mapped]


@dataclass(frozen=True)
class SortAttribute:
    """An entry of an attribute map. `key` is None for positional entries."""

    key: str | None
    definition: Definition


AttributeMap = tuple[SortAttribute, ...]

_MAPPED_FIELDS = frozenset(("asc", "desc", "label", "default"))


def _parse_mapped(key: str | int | None, raw: Mapping[str, Any]) -> Mapped:
    if unknown := set(raw) - _MAPPED_FIELDS:
        raise InvalidSortDefinitionError(f"Unknown fields in sort definition: {sorted(unknown)}", key)
    for field in ("asc", "desc", "label"):
        if raw.get(field) is not None and not isinstance(raw[field], str):
            raise InvalidSortDefinitionError(f"Sort definition field '{field}' must be a string", key)
    if (default := raw.get("default")) not in (None, "asc", "desc"):
        raise InvalidSortDefinitionError("Sort definition field 'default' must be 'asc' or 'desc'", key)
    return Mapped(asc=raw.get("asc"), desc=raw.get("desc"), label=raw.get("label"), default=default)


def parse_definition(key: str | int | None, raw: Any) -> SortAttribute:
    """Turn one raw attribute map entry into a `SortAttribute`.

    String keys name the sort key. Int keys (and entries of a plain list) are positional: the definition must then be
    an attribute name or the `*` wildcard, and the attribute name doubles as the sort key.
    """
    if key is not None and not isinstance(key, (str, int)):
        raise InvalidSortDefinitionError("Sort attribute keys must be strings or positions", key)

    if isinstance(raw, (Identity, Mapped, Wildcard)):
        definition: Definition = raw
    elif raw == WILDCARD:
        definition = Wildcard()
    elif isinstance(raw, str) and raw:
        definition = Identity(raw)
    elif isinstance(raw, Mapping):
        definition = _parse_mapped(key, raw)
    else:
        raise InvalidSortDefinitionError(f"Invalid sort definition {raw!r}", key)

    if isinstance(key, str):
        if isinstance(definition, Wildcard):
            raise InvalidSortDefinitionError("The wildcard can only be used as a positional entry", key)
        return SortAttribute(key, definition)

    match definition:
        case Identity(name):
            return SortAttribute(name, definition)
        case Wildcard():
            return SortAttribute(None, definition)
        case Mapped():
            raise InvalidSortDefinitionError("A virtual attribute definition needs a sort key", key)


def parse_attribute_map(raw: Mapping[str | int, Any] | Iterable[Any] | None) -> AttributeMap:
    """Build an ordered attribute map.

    >>> parse_attribute_map(["name", "*"])
    (SortAttribute(key='name', definition=Identity(name='name')), SortAttribute(key=None, definition=Wildcard()))

    >>> parse_attribute_map({"user": {"asc": "first_name", "desc": "first_name.DESC"}})
    (SortAttribute(key='user', definition=Mapped(asc='first_name', desc='first_name.DESC', label=None, default=None)),)
    """
    if raw is None:
        return ()
    if isinstance(raw, str):
        raise InvalidSortDefinitionError("Sort attributes must be a mapping or a sequence, not a string")
    if isinstance(raw, Mapping):
        return tuple(parse_definition(key, value) for key, value in raw.items())
    return tuple(
        entry if isinstance(entry, SortAttribute) else parse_definition(None, entry) for entry in raw
    )
