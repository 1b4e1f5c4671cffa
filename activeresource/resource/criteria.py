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
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class QueryCriteria(BaseModel):
    """Parameters collected for a query before it is sent to a resource's endpoint.

    `order` uses the `attribute.DESC` convention for descending attributes, e.g. `"name, created_at.DESC"`.
    """

    model_config = ConfigDict(validate_assignment=True)

    order: str = ""
    alias: str | None = None
    condition: dict[str, Any] = Field(default_factory=dict)
    limit: int | None = Field(default=None, ge=0)
    offset: int | None = Field(default=None, ge=0)

    def to_query_params(self, order_param: str = "order") -> dict[str, Any]:
        params: dict[str, Any] = dict(self.condition)
        if self.order:
            params[order_param] = self.order
        if self.limit is not None:
            params["limit"] = self.limit
        if self.offset is not None:
            params["offset"] = self.offset
        return params
