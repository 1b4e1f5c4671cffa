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
from collections.abc import Callable, Iterator
from typing import TypeVar, overload

import structlog

from activeresource.resource.base import ActiveResource
from activeresource.utils.errors import InvalidResourceModelError, UnknownResourceError

logger = structlog.get_logger(__name__)

R = TypeVar("R", bound=type[ActiveResource])

ModelRef = str | type[ActiveResource]


class ResourceRegistry:
    """Maps resource identifiers to `ActiveResource` model classes."""

    def __init__(self) -> None:
        self._models: dict[str, type[ActiveResource]] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._models

    def __iter__(self) -> Iterator[str]:
        return iter(self._models)

    def __len__(self) -> int:
        return len(self._models)

    def register(self, model: type[ActiveResource], name: str | None = None) -> type[ActiveResource]:
        if not (isinstance(model, type) and issubclass(model, ActiveResource)):
            raise InvalidResourceModelError(f"{model!r} is not an ActiveResource model")

        name = name or model.__resource_name__ or model.__name__
        if (existing := self._models.get(name)) and existing is not model:
            logger.warning("Replacing registered resource model", name=name, old=existing.__name__, new=model.__name__)
        self._models[name] = model
        return model

    def unregister(self, name: str) -> None:
        if self._models.pop(name, None) is None:
            raise UnknownResourceError(name)

    def clear(self) -> None:
        self._models.clear()

    def model(self, ref: ModelRef) -> type[ActiveResource]:
        """Return the model class for an identifier, or the class itself when a class is given."""
        if isinstance(ref, str):
            try:
                return self._models[ref]
            except KeyError:
                raise UnknownResourceError(ref) from None
        if isinstance(ref, type) and issubclass(ref, ActiveResource):
            return ref
        raise InvalidResourceModelError(f"{ref!r} is neither a resource name nor an ActiveResource model")


RESOURCE_MODEL_REGISTRY = ResourceRegistry()


@overload
def register_resource(model: R, /) -> R: ...


@overload
def register_resource(*, name: str | None = None, registry: ResourceRegistry | None = None) -> Callable[[R], R]: ...


def register_resource(
    model: R | None = None, /, *, name: str | None = None, registry: ResourceRegistry | None = None
) -> R | Callable[[R], R]:
    """Class decorator adding a resource model to a registry (the global one by default).

    Can be used bare (`@register_resource`) or with arguments (`@register_resource(name="users")`).
    """
    target = registry if registry is not None else RESOURCE_MODEL_REGISTRY

    def decorator(cls: R) -> R:
        target.register(cls, name)
        return cls

    return decorator(model) if model is not None else decorator
