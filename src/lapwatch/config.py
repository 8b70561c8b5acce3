# Copyright (c) 2021 - present / Neuralmagic, Inc. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing,
# software distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Package level configuration, settable through environment variables:

- LAPWATCH_CLOCK: time source for new registries, "monotonic" (default) or "wall"
- LAPWATCH_LOG_LEVEL: log level for the lapwatch loggers, default "INFO"
"""

import os
from typing import Optional

from pydantic import BaseModel, Field

from lapwatch.log import set_logging_level
from lapwatch.utils.time import Clock


__all__ = ["LAPWATCH_CLOCK", "LAPWATCH_LOG_LEVEL", "LapwatchConfig"]

LAPWATCH_CLOCK = "LAPWATCH_CLOCK"
LAPWATCH_LOG_LEVEL = "LAPWATCH_LOG_LEVEL"


class LapwatchConfig(BaseModel):
    clock: Clock = Field(
        default=Clock.MONOTONIC,
        description=(
            "Time source used to measure laps. 'monotonic' is unaffected by "
            "system clock changes, 'wall' follows the system clock"
        ),
    )
    log_level: str = Field(
        default="INFO",
        description="Log level for the lapwatch and __main__ loggers",
    )

    @classmethod
    def from_env(cls, **overrides) -> "LapwatchConfig":
        """
        :param overrides: values that take precedence over the environment
        :return: a config built from the LAPWATCH_* environment variables
        """
        values = {}
        clock: Optional[str] = os.getenv(LAPWATCH_CLOCK)
        log_level: Optional[str] = os.getenv(LAPWATCH_LOG_LEVEL)
        if clock:
            values["clock"] = clock.lower()
        if log_level:
            values["log_level"] = log_level
        values.update(overrides)

        return cls(**values)

    def apply_logging(self):
        """
        Set the lapwatch loggers to this config's log level
        """
        set_logging_level(self.log_level)
