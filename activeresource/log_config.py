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
import os

from structlog import get_logger

from activeresource.settings import app_settings
from nwastdlib.logging import initialise_logging

logger = get_logger(__name__)


def logger_config(name: str, default_level: str = "INFO") -> tuple[str, dict]:
    """Create config for the given logger with the given loglevel.

    A logger's level can be overruled at deploy time by setting an env-var, for example:
     - Level of logger "activeresource" is controlled by LOG_LEVEL_ACTIVERESOURCE
     - Level of logger "activeresource.sorting" is controlled by LOG_LEVEL_ACTIVERESOURCE_SORTING
    """
    name_upper = name.upper().replace(".", "_")
    env_var_name = f"LOG_LEVEL_{name_upper}"
    effective_level = os.environ.get(env_var_name, default_level).upper()

    # No handler and 'propagate: True' so the root logger does the formatting.
    return name, {"level": effective_level, "propagate": True}


def get_logger_overrides(default_level: str | None = None) -> dict[str, dict]:
    level = default_level or app_settings.LOG_LEVEL
    return dict(
        [
            logger_config("activeresource", default_level=level),
            logger_config("activeresource.sorting", default_level=level),
        ]
    )


LOGGER_OVERRIDES = get_logger_overrides()


def setup_logging(additional_loggers: dict[str, dict] | None = None) -> None:
    """Route the activeresource loggers through structlog.

    Applications embedding activeresource call this once during start-up. Extra logger configs, for example
    created with `logger_config`, are merged over the defaults.
    """
    loggers = LOGGER_OVERRIDES | (additional_loggers or {})
    initialise_logging(additional_loggers=loggers)
    logger.debug("Initialised logging", loggers=sorted(loggers))
