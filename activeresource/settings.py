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

from pydantic import field_validator
from pydantic_settings import BaseSettings


class AppSettings(BaseSettings):
    SORT_VAR: str = "sort"  # Name of the request parameter holding the requested sort
    SORT_DESC_TAG: str = "desc"
    SORT_SEPARATORS: list[str] = ["-", "."]  # Between attributes, and between an attribute and its direction
    SORT_MULTI: bool = False
    LOG_LEVEL: str = "INFO"

    @field_validator("SORT_SEPARATORS")
    @classmethod
    def validate_separators(cls, v: list[str]) -> list[str]:
        if len(v) != 2 or not all(v) or v[0] == v[1]:
            raise ValueError("SORT_SEPARATORS needs two distinct, non-empty separators")
        return v


app_settings = AppSettings()
