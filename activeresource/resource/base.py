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
from typing import ClassVar, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict

from activeresource.utils.helpers import generate_attribute_label


@runtime_checkable
class ResourceModel(Protocol):
    """Attribute metadata a sort resolver needs from a resource model."""

    def attribute_names(self) -> list[str]: ...

    def has_attribute(self, name: str) -> bool: ...

    def get_attribute_label(self, name: str) -> str: ...


class ActiveResource(BaseModel):
    """Local model of a resource exposed by a remote REST endpoint.

    The declared fields are the attributes of the remote resource. Labels can be given per field with
    `Field(title=...)` or for several attributes at once by overriding `attribute_labels`:

        class User(ActiveResource):
            first_name: str
            email: str = Field(title="E-mail")

            @classmethod
            def attribute_labels(cls) -> dict[str, str]:
                return {"first_name": "Given name"}
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    __resource_name__: ClassVar[str | None] = None

    @classmethod
    def attribute_names(cls) -> list[str]:
        return list(cls.model_fields)

    @classmethod
    def has_attribute(cls, name: str) -> bool:
        return name in cls.model_fields

    @classmethod
    def attribute_labels(cls) -> dict[str, str]:
        return {}

    @classmethod
    def get_attribute_label(cls, name: str) -> str:
        if label := cls.attribute_labels().get(name):
            return label
        if (field := cls.model_fields.get(name)) and field.title:
            return field.title
        return generate_attribute_label(name)
