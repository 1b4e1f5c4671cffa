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
import re


def camel_to_snake(s: str) -> str:
    name = re.sub("(.)([A-Z][a-z]+)", r"\1_\2", s)
    return re.sub("([a-z0-9])([A-Z])", r"\1_\2", name).lower()


def generate_attribute_label(name: str) -> str:
    """Generate a human readable label from an attribute name.

    Underscores, dashes and dots become word boundaries, as do camelCase humps.

    >>> generate_attribute_label("first_name")
    'First Name'

    >>> generate_attribute_label("firstName")
    'First Name'

    >>> generate_attribute_label("user.email-address")
    'User Email Address'

    Args:
        name: the attribute name

    Returns:
        The label with every word capitalized.

    """
    words = re.sub(r"[-_.]", " ", camel_to_snake(name)).split()
    return " ".join(word.capitalize() for word in words)
