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
Thread safe stopwatch for timing laps
"""

import logging
import threading
from typing import Callable, List, Tuple

from lapwatch.errors import StopwatchStateError
from lapwatch.schemas import StopwatchSnapshot
from lapwatch.utils.time import format_elapsed_time


__all__ = ["Stopwatch"]

_LOGGER = logging.getLogger(__name__)

# sentinel for start and stop times that have not been recorded
UNSET_TIME = -1

# only holders of this key (the registry) may construct stopwatches
_REGISTRY_KEY = object()


class Stopwatch:
    """
    A thread safe object for timing laps. Stopwatches are created by a
    StopwatchRegistry, never directly. Different threads can share a single
    stopwatch and safely call any of its methods; every read or write of the
    timing state happens under a single per instance lock.

    example:
    ```python
    stopwatch = get_stopwatch("download")

    stopwatch.start()
    download_part_1()
    stopwatch.lap()
    download_part_2()
    stopwatch.stop()

    stopwatch.get_lap_times()  # (1503, 2211)
    str(stopwatch)  # "00:00:03.714"
    ```

    States are unstarted, running and stopped. start() is only valid while not
    running, lap() and stop() only while running, reset() always.
    All times are whole milliseconds read from the registry's clock.

    :param id: the unique id of this stopwatch
    :param clock: callable returning the current time in whole milliseconds
    """

    def __init__(self, id: str, clock: Callable[[], int], _key: object = None):
        if _key is not _REGISTRY_KEY:
            raise TypeError(
                "Stopwatch objects can only be created through a StopwatchRegistry, "
                "use lapwatch.get_stopwatch(id) instead"
            )

        self._id = id
        self._clock = clock
        # reentrant, elapsed_time is read while already holding the lock
        self._lock = threading.RLock()

        self._running = False
        self._start_time = UNSET_TIME
        self._stop_time = UNSET_TIME
        self._total_time = 0
        self._lap_times: List[int] = []

    @property
    def id(self) -> str:
        """
        :return: the id of this stopwatch
        """
        return self._id

    @property
    def running(self) -> bool:
        """
        :return: True if the stopwatch has been started and not yet stopped or reset
        """
        with self._lock:
            return self._running

    @property
    def total_time(self) -> int:
        """
        :return: the sum of all completed laps in milliseconds, excluding
            the in flight interval of a running stopwatch
        """
        with self._lock:
            return self._total_time

    @property
    def elapsed_time(self) -> int:
        """
        :return: the total time in milliseconds including the in flight
            interval if the stopwatch is running, 0 if it was never started
        """
        with self._lock:
            if self._start_time == UNSET_TIME:
                return 0
            if self._running:
                # clamped, a wall clock may step backwards
                return self._total_time + max(0, self._clock() - self._start_time)
            return self._total_time

    def start(self):
        """
        Starts the stopwatch

        :raises StopwatchStateError: if the stopwatch is already running
        """
        with self._lock:
            if self._running:
                raise StopwatchStateError(f"Stopwatch {self._id} is already running")
            self._start_time = self._clock()
            self._running = True

        _LOGGER.debug(f"Stopwatch {self._id} started")

    def lap(self) -> int:
        """
        Records the time elapsed since the last lap, or since start() if this
        is the first lap, and begins measuring the next lap

        :return: the recorded lap time in milliseconds
        :raises StopwatchStateError: if the stopwatch isn't running
        """
        with self._lock:
            self._check_running("record a lap for")
            lap_time = self._record_lap()
            self._start_time = self._stop_time

        _LOGGER.debug(f"Stopwatch {self._id} recorded lap of {lap_time} ms")
        return lap_time

    def stop(self) -> int:
        """
        Stops the stopwatch and records one final lap

        :return: the final lap time in milliseconds
        :raises StopwatchStateError: if the stopwatch isn't running
        """
        with self._lock:
            self._check_running("stop")
            lap_time = self._record_lap()
            self._running = False

        _LOGGER.debug(f"Stopwatch {self._id} stopped with final lap of {lap_time} ms")
        return lap_time

    def reset(self):
        """
        Resets the stopwatch to its freshly created state. A running stopwatch
        is stopped first. All recorded laps are cleared
        """
        with self._lock:
            self._running = False
            self._start_time = UNSET_TIME
            self._stop_time = UNSET_TIME
            self._total_time = 0
            self._lap_times.clear()

        _LOGGER.debug(f"Stopwatch {self._id} reset")

    def get_lap_times(self) -> Tuple[int, ...]:
        """
        Can be called at any time and never raises

        :return: the recorded lap times in milliseconds, in the order they
            were recorded, or an empty tuple if no laps are recorded
        """
        with self._lock:
            return tuple(self._lap_times)

    def snapshot(self) -> StopwatchSnapshot:
        """
        :return: a consistent view of the full state of this stopwatch
        """
        with self._lock:
            return StopwatchSnapshot(
                id=self._id,
                running=self._running,
                lap_times=list(self._lap_times),
                total_time=self._total_time,
                elapsed_time=self.elapsed_time,
            )

    def __str__(self) -> str:
        """
        :return: the elapsed time of this stopwatch formatted as HH:MM:SS.mmm
        """
        return format_elapsed_time(self.elapsed_time)

    def __repr__(self) -> str:
        with self._lock:
            return (
                f"Stopwatch(id={self._id!r}, running={self._running}, "
                f"lap_times={self._lap_times}, total_time={self._total_time})"
            )

    def __eq__(self, other) -> bool:
        """
        Two stopwatches are equal if their id, running flag, lap times,
        total time, start time and stop time are all equal
        """
        if other is self:
            return True
        if not isinstance(other, Stopwatch):
            return NotImplemented

        # only one instance lock is held at a time
        other_state = other._state()
        return self._state() == other_state

    def __hash__(self) -> int:
        # equal stopwatches share an id
        return hash(self._id)

    def _state(self) -> Tuple:
        with self._lock:
            return (
                self._id,
                self._running,
                tuple(self._lap_times),
                self._total_time,
                self._start_time,
                self._stop_time,
            )

    def _check_running(self, action: str):
        if not self._running:
            raise StopwatchStateError(
                f"Cannot {action} stopwatch {self._id}, it is not running"
            )

    def _record_lap(self) -> int:
        self._stop_time = self._clock()
        lap_time = max(0, self._stop_time - self._start_time)
        self._lap_times.append(lap_time)
        self._total_time += lap_time
        return lap_time
