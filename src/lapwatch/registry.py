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
Registry that creates and tracks uniquely identified stopwatches
"""

import logging
import threading
from typing import Callable, List, Optional, Tuple, Union

from lapwatch.config import LapwatchConfig
from lapwatch.errors import DuplicateStopwatchIdError, InvalidStopwatchIdError
from lapwatch.stopwatch import _REGISTRY_KEY, Stopwatch
from lapwatch.utils.time import Clock, resolve_clock


__all__ = [
    "StopwatchRegistry",
    "get_default_registry",
    "get_stopwatch",
    "get_stopwatches",
]

_LOGGER = logging.getLogger(__name__)


class StopwatchRegistry:
    """
    Thread safe factory for Stopwatch objects. Keeps a reference to every
    stopwatch it creates and guarantees that no two of them share an id.
    Ids are claimed for the lifetime of the registry; there is no way to
    remove a stopwatch.

    A single lock guards both the claimed ids and the creation ordered list
    of stopwatches, so claiming an id and publishing the new stopwatch happen
    as one step with respect to every other caller.

    :param clock: time source for the created stopwatches, either a Clock
        or a callable returning the current time in whole milliseconds.
        Defaults to the clock of the given config
    :param config: package config to read the default clock from.
        Defaults to LapwatchConfig.from_env()
    """

    def __init__(
        self,
        clock: Union[Clock, str, Callable[[], int], None] = None,
        config: Optional[LapwatchConfig] = None,
    ):
        if clock is None:
            config = config or LapwatchConfig.from_env()
            clock = config.clock

        self._clock = resolve_clock(clock)
        self._lock = threading.Lock()
        self._ids = set()
        self._stopwatches: List[Stopwatch] = []

    def __len__(self) -> int:
        with self._lock:
            return len(self._stopwatches)

    def __bool__(self) -> bool:
        # a registry is truthy even before any stopwatch is created
        return True

    def __contains__(self, id) -> bool:
        if not isinstance(id, str):
            return False
        with self._lock:
            return id in self._ids

    @property
    def ids(self) -> Tuple[str, ...]:
        """
        :return: the ids of all created stopwatches in creation order
        """
        return tuple(stopwatch.id for stopwatch in self.get_stopwatches())

    def get_stopwatch(self, id: str) -> Stopwatch:
        """
        Creates and returns a new Stopwatch with the given id. When several
        threads race for the same id, exactly one of them succeeds

        :param id: the unique identifier of the new stopwatch
        :return: the new Stopwatch
        :raises InvalidStopwatchIdError: if id is None, not a string, or empty
        :raises DuplicateStopwatchIdError: if id is already taken
        """
        if id is None:
            raise InvalidStopwatchIdError("Stopwatch id must be given, found None")
        if not isinstance(id, str):
            raise InvalidStopwatchIdError(
                f"Stopwatch id must be a string, found {type(id).__name__}"
            )
        if not id:
            raise InvalidStopwatchIdError("Stopwatch id must not be empty")

        with self._lock:
            if id in self._ids:
                raise DuplicateStopwatchIdError(f"Stopwatch id {id} is already taken")
            stopwatch = Stopwatch(id, self._clock, _key=_REGISTRY_KEY)
            self._ids.add(id)
            self._stopwatches.append(stopwatch)

        _LOGGER.debug(f"Created stopwatch {id}")
        return stopwatch

    def get_stopwatches(self) -> Tuple[Stopwatch, ...]:
        """
        Never raises

        :return: all stopwatches created so far in creation order, or an
            empty tuple if none have been created. Later creations do not
            change the returned tuple
        """
        with self._lock:
            return tuple(self._stopwatches)


_default_registry: Optional[StopwatchRegistry] = None
_default_registry_lock = threading.Lock()


def get_default_registry() -> StopwatchRegistry:
    """
    :return: the process wide registry used by get_stopwatch and
        get_stopwatches, created from the environment config on first use
    """
    global _default_registry
    with _default_registry_lock:
        if _default_registry is None:
            _default_registry = StopwatchRegistry()
        return _default_registry


def get_stopwatch(id: str) -> Stopwatch:
    """
    Creates a new Stopwatch in the process wide registry

    :param id: the unique identifier of the new stopwatch
    :return: the new Stopwatch
    """
    return get_default_registry().get_stopwatch(id)


def get_stopwatches() -> Tuple[Stopwatch, ...]:
    """
    :return: all stopwatches created in the process wide registry
    """
    return get_default_registry().get_stopwatches()
