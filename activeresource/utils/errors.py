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


class ActiveResourceError(Exception):
    """Base class for configuration errors raised by activeresource."""


class UnknownResourceError(ActiveResourceError, KeyError):
    name: str

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"No resource model registered under '{self.name}'"


class InvalidResourceModelError(ActiveResourceError, TypeError):
    pass


class InvalidSortDefinitionError(ActiveResourceError, ValueError):
    key: str | int | None

    def __init__(self, message: str, key: str | int | None = None) -> None:
        super().__init__(message, key)
        self.message = message
        self.key = key

    def __str__(self) -> str:
        if self.key is None:
            return self.message
        return f"{self.message} (key: {self.key!r})"
