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
"""Sorting of active resource queries on real and virtual resource attributes."""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import structlog
from more_itertools import first

from activeresource.resource.base import ResourceModel
from activeresource.resource.criteria import QueryCriteria
from activeresource.resource.registry import RESOURCE_MODEL_REGISTRY, ModelRef, ResourceRegistry
from activeresource.settings import app_settings
from activeresource.sorting.definitions import (
    DESC_SUFFIX,
    AttributeMap,
    Identity,
    Mapped,
    ResolvedDefinition,
    Wildcard,
    parse_attribute_map,
)
from activeresource.sorting.directions import DirectionSet, create_sort_var_value, parse_sort_var

logger = structlog.get_logger(__name__)

RawAttributeMap = Mapping[str | int, Any] | Iterable[Any]


class AttributeSortResolver:
    """Turn the sort requested by a client into the order of an active resource query.

    Sort keys are resolved against `attributes`, an ordered map of the keys that may be sorted on:

        AttributeSortResolver(
            model="User",
            attributes={
                "email": "email_address",  # sort key differs from the attribute name
                "user": {"asc": "first_name", "desc": "first_name.DESC", "label": "Owner"},  # virtual attribute
                0: "*",  # any other attribute of the model
            },
        )

    Without `attributes` every attribute of `model` can be sorted on. Keys that do not resolve are ignored, so a
    client can never sort on something that was not configured.

    Descending order is written as the attribute followed by `.DESC`, e.g. `"first_name.DESC"`.

    The active sort is taken from `directions` when given, otherwise it is parsed from the `sort_var` entry of the
    request `params`, e.g. `?sort=name-created_at.desc`. When neither yields anything, `default_order` applies: a
    string is used as order as is, a mapping of attribute to descending flag is used as directions.
    """

    def __init__(
        self,
        model: ModelRef | None = None,
        attributes: RawAttributeMap | None = None,
        default_order: str | Mapping[str, bool] | None = None,
        directions: Mapping[str, bool] | None = None,
        params: Mapping[str, Any] | None = None,
        multi_sort: bool | None = None,
        sort_var: str | None = None,
        desc_tag: str | None = None,
        separators: Sequence[str] | None = None,
        registry: ResourceRegistry | None = None,
    ) -> None:
        self.model_ref = model
        self.attributes: AttributeMap = parse_attribute_map(attributes)
        self.default_order = default_order
        self.directions = dict(directions) if directions is not None else None
        self.params = params or {}
        self.multi_sort = app_settings.SORT_MULTI if multi_sort is None else multi_sort
        self.sort_var = sort_var or app_settings.SORT_VAR
        self.desc_tag = desc_tag or app_settings.SORT_DESC_TAG
        self.separators = tuple(separators or app_settings.SORT_SEPARATORS)
        self.registry = registry if registry is not None else RESOURCE_MODEL_REGISTRY

    @property
    def model(self) -> ResourceModel | None:
        if self.model_ref is None:
            return None
        return self.registry.model(self.model_ref)

    def resolve_attribute(self, attribute: str) -> ResolvedDefinition | None:
        """Return the definition of a sort key, or None when it can't be sorted on.

        With a non-empty attribute map, string keys are matched first (the first equal key wins). When none matches
        and the map holds a wildcard, any attribute of the model resolves to itself. With an empty attribute map
        every attribute of the model resolves to itself.
        """
        if self.attributes:
            if (definition := self._find_keyed(attribute)) is not None:
                return definition
            has_wildcard = any(isinstance(entry.definition, Wildcard) for entry in self.attributes)
            if has_wildcard and (model := self.model) is not None and model.has_attribute(attribute):
                return Identity(attribute)
            return None

        if (model := self.model) is not None and attribute in model.attribute_names():
            return Identity(attribute)
        return None

    def _find_keyed(self, attribute: str) -> ResolvedDefinition | None:
        matches = (
            entry.definition
            for entry in self.attributes
            if entry.key == attribute and not isinstance(entry.definition, Wildcard)
        )
        return first(matches, default=None)  # type: ignore[arg-type]

    def resolve_label(self, attribute: str) -> str:
        match self.resolve_attribute(attribute):
            case Mapped(label=str(label)):
                return label
            case Identity(name):
                attribute = name

        if (model := self.model) is not None:
            return model.get_attribute_label(attribute)
        return attribute

    def get_directions(self) -> DirectionSet:
        """Return the requested sort as an ordered map of sort key to descending flag."""
        if self.directions is not None:
            return dict(self.directions)

        directions: DirectionSet = {}
        value = self.params.get(self.sort_var)
        if isinstance(value, str):
            for attribute, descending in parse_sort_var(value, self.separators, self.desc_tag):
                if self.resolve_attribute(attribute) is None:
                    logger.debug("Ignoring requested sort on unknown attribute", attribute=attribute)
                    continue
                directions[attribute] = descending
                if not self.multi_sort:
                    break

        if not directions and isinstance(self.default_order, Mapping):
            directions = dict(self.default_order)
        return directions

    def get_direction(self, attribute: str) -> bool | None:
        """Return True when sorted descending on `attribute`, False when ascending and None when not sorted on it."""
        return self.get_directions().get(attribute)

    def get_order_by(self, criteria: QueryCriteria | None = None) -> str:
        """Return the order represented by the requested sort, e.g. `"first_name, created_at.DESC"`.

        `criteria` is accepted for symmetry with `apply_order`; resources are never joined so its alias is not used.
        """
        directions = self.get_directions()
        if not directions:
            return self.default_order if isinstance(self.default_order, str) else ""

        orders = []
        for attribute, descending in directions.items():
            match self.resolve_attribute(attribute):
                case Mapped(asc=asc, desc=desc):
                    if descending:
                        orders.append(desc or f"{attribute}{DESC_SUFFIX}")
                    else:
                        orders.append(asc or attribute)
                case Identity(name):
                    orders.append(f"{name}{DESC_SUFFIX}" if descending else name)
                case None:
                    logger.debug("Skipping unresolvable sort attribute", attribute=attribute)
        return ", ".join(orders)

    def apply_order(self, criteria: QueryCriteria) -> None:
        """Append the requested order to `criteria.order`.

        Calling this twice on the same criteria appends the order twice.
        """
        if order := self.get_order_by(criteria):
            criteria.order = f"{criteria.order}, {order}" if criteria.order else order
            logger.debug("Applied sort order", order=order, criteria_order=criteria.order)

    def toggle_directions(self, attribute: str) -> DirectionSet:
        """Return the directions to request when the client asks to sort on `attribute`.

        A key that is already sorted on flips direction; otherwise the default direction of its definition is used
        (ascending when it has none). With multi-sort the key moves to the front of the current directions, otherwise
        it replaces them.
        """
        directions = self.get_directions()
        if (current := directions.pop(attribute, None)) is not None:
            descending = not current
        else:
            match self.resolve_attribute(attribute):
                case Mapped(default=default):
                    descending = default == "desc"
                case _:
                    descending = False

        if self.multi_sort:
            return {attribute: descending} | directions
        return {attribute: descending}

    def create_sort_var_value(self, directions: Mapping[str, bool]) -> str:
        return create_sort_var_value(directions, self.separators, self.desc_tag)

    def create_url(self, base_url: str, directions: Mapping[str, bool]) -> str:
        """Return `base_url` with the sort variable set to `directions`, keeping its other query parameters."""
        scheme, netloc, path, query, fragment = urlsplit(base_url)
        params = [(key, value) for key, value in parse_qsl(query, keep_blank_values=True) if key != self.sort_var]
        if directions:
            params.append((self.sort_var, self.create_sort_var_value(directions)))
        return urlunsplit((scheme, netloc, path, urlencode(params), fragment))

    def create_toggle_url(self, base_url: str, attribute: str) -> str:
        return self.create_url(base_url, self.toggle_directions(attribute))


__all__ = ["AttributeSortResolver"]
