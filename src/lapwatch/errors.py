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
Exceptions raised by stopwatches and the stopwatch registry
"""


__all__ = [
    "StopwatchError",
    "InvalidStopwatchIdError",
    "DuplicateStopwatchIdError",
    "StopwatchStateError",
]


class StopwatchError(Exception):
    """
    Base class for all errors raised by lapwatch
    """


class InvalidStopwatchIdError(StopwatchError, ValueError):
    """
    Raised when a stopwatch is requested with a missing, non string,
    or empty id
    """


class DuplicateStopwatchIdError(StopwatchError, ValueError):
    """
    Raised when a stopwatch is requested with an id that is already taken
    """


class StopwatchStateError(StopwatchError, RuntimeError):
    """
    Raised when an operation is invalid for the current state of a stopwatch,
    e.g. starting a running stopwatch or stopping one that is not running
    """
