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

import logging
import threading

import pytest
from lapwatch import StopwatchRegistry


logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class FakeClock:
    """
    Manually advanced millisecond clock for deterministic timings
    """

    def __init__(self, now: int = 1_000):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int):
        self.now += ms


class TickingClock:
    """
    Thread safe clock that moves forward by one millisecond every time it is read
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._now = 0

    def __call__(self) -> int:
        with self._lock:
            now = self._now
            self._now += 1
            return now


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def ticking_clock():
    return TickingClock()


@pytest.fixture
def registry(fake_clock):
    return StopwatchRegistry(clock=fake_clock)


@pytest.fixture
def monotonic_registry():
    return StopwatchRegistry(clock="monotonic")
