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

from typing import Iterable, List

from pydantic import BaseModel, Field

from lapwatch.utils.time import format_elapsed_time


__all__ = ["StopwatchSnapshot", "StopwatchSummary"]


class StopwatchSnapshot(BaseModel):
    """
    A consistent, point in time view of the state of a single stopwatch.
    All times are in whole milliseconds
    """

    id: str = Field(description="Unique id of the stopwatch")
    running: bool = Field(description="True if the stopwatch is currently running")
    lap_times: List[int] = Field(
        default_factory=list,
        description="Recorded lap durations in the order they were recorded",
    )
    total_time: int = Field(
        default=0, description="Sum of all completed laps since the last reset"
    )
    elapsed_time: int = Field(
        default=0,
        description="total_time plus the in flight interval if running",
    )

    @property
    def formatted(self) -> str:
        """
        :return: the elapsed time of the snapshot formatted as HH:MM:SS.mmm
        """
        return format_elapsed_time(self.elapsed_time)


class StopwatchSummary(BaseModel):
    """
    Aggregated view over a batch of stopwatch snapshots
    """

    num_stopwatches: int = 0
    num_running: int = 0
    num_laps: int = 0
    total_time: int = 0
    elapsed_time: int = 0

    @classmethod
    def from_snapshots(
        cls, snapshots: Iterable[StopwatchSnapshot]
    ) -> "StopwatchSummary":
        """
        Aggregates (merges) a batch of snapshots by summing their counts
        and times

        :param snapshots: the snapshots to aggregate
        :return: a single summary over all given snapshots
        """
        summary = {field_name: 0 for field_name in dict(cls())}
        for snapshot in snapshots:
            summary["num_stopwatches"] += 1
            summary["num_running"] += int(snapshot.running)
            summary["num_laps"] += len(snapshot.lap_times)
            summary["total_time"] += snapshot.total_time
            summary["elapsed_time"] += snapshot.elapsed_time

        return cls(**summary)

    @property
    def formatted(self) -> str:
        """
        :return: the summed elapsed time formatted as HH:MM:SS.mmm
        """
        return format_elapsed_time(self.elapsed_time)
