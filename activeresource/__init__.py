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

"""Sorting of active resource queries on real and virtual attributes."""

__version__ = "1.0.0"

from activeresource.resource import (
    RESOURCE_MODEL_REGISTRY,
    ActiveResource,
    QueryCriteria,
    ResourceRegistry,
    register_resource,
)
from activeresource.settings import app_settings
from activeresource.sorting import AttributeSortResolver, Identity, Mapped, Wildcard

__all__ = [
    "ActiveResource",
    "AttributeSortResolver",
    "Identity",
    "Mapped",
    "QueryCriteria",
    "RESOURCE_MODEL_REGISTRY",
    "ResourceRegistry",
    "Wildcard",
    "app_settings",
    "register_resource",
    "__version__",
]
