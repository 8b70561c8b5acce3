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

import time
from enum import Enum
from typing import Callable, Union


__all__ = [
    "MS_PER_HOUR",
    "MS_PER_MINUTE",
    "MS_PER_SECOND",
    "Clock",
    "monotonic_ms",
    "wall_clock_ms",
    "resolve_clock",
    "format_elapsed_time",
]

MS_PER_HOUR = 3_600_000
MS_PER_MINUTE = 60_000
MS_PER_SECOND = 1_000
_NS_PER_MS = 1_000_000


class Clock(str, Enum):
    """
    Time sources a stopwatch registry can read from
    """

    MONOTONIC = "monotonic"
    WALL = "wall"


def monotonic_ms() -> int:
    """
    :return: the current value of the monotonic clock in whole milliseconds
    """
    return time.monotonic_ns() // _NS_PER_MS


def wall_clock_ms() -> int:
    """
    :return: milliseconds since the epoch according to the system clock
    """
    return time.time_ns() // _NS_PER_MS


_CLOCKS = {
    Clock.MONOTONIC: monotonic_ms,
    Clock.WALL: wall_clock_ms,
}


def resolve_clock(clock: Union[Clock, str, Callable[[], int]]) -> Callable[[], int]:
    """
    :param clock: a Clock (or its string value) naming a built in time source,
        or a callable returning the current time in whole milliseconds
    :return: a callable returning the current time in whole milliseconds
    """
    if callable(clock):
        return clock

    try:
        return _CLOCKS[Clock(clock)]
    except ValueError:
        raise ValueError(
            f"Unknown clock given: {clock}; "
            f"expected one of {[option.value for option in Clock]} or a callable"
        )


def format_elapsed_time(elapsed_ms: int) -> str:
    """
    Format a duration as HH:MM:SS.mmm

    Hours, minutes and seconds are zero padded to two digits and milliseconds
    to three. Hours are not clamped, so durations of 100 hours or more render
    with more than two hour digits.

    example:
    ```
    format_elapsed_time(3_725_025)  # "01:02:05.025"
    ```

    :param elapsed_ms: the duration to format in whole milliseconds
    :return: the formatted duration
    """
    elapsed_ms = int(elapsed_ms)
    if elapsed_ms < 0:
        raise ValueError(f"elapsed time must be non negative, given {elapsed_ms}")

    hours, remainder = divmod(elapsed_ms, MS_PER_HOUR)
    minutes, remainder = divmod(remainder, MS_PER_MINUTE)
    seconds, milliseconds = divmod(remainder, MS_PER_SECOND)

    return f"{hours:02d}:{minutes:02d}:{seconds:02d}.{milliseconds:03d}"
