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
from activeresource.sorting.definitions import (
    DESC_SUFFIX,
    WILDCARD,
    AttributeMap,
    Definition,
    Identity,
    Mapped,
    ResolvedDefinition,
    SortAttribute,
    Wildcard,
    parse_attribute_map,
)
from activeresource.sorting.directions import DirectionSet, create_sort_var_value, parse_sort_var
from activeresource.sorting.sort import AttributeSortResolver

__all__ = [
    "AttributeMap",
    "AttributeSortResolver",
    "DESC_SUFFIX",
    "Definition",
    "DirectionSet",
    "Identity",
    "Mapped",
    "ResolvedDefinition",
    "SortAttribute",
    "WILDCARD",
    "Wildcard",
    "create_sort_var_value",
    "parse_attribute_map",
    "parse_sort_var",
]
