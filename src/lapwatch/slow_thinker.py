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
Usage: lapwatch.slow_thinker [OPTIONS]

  Demo of sharing the stopwatch registry between threads. Each thread gets
  its own stopwatch, records a number of laps while "thinking" (sleeping),
  stops the stopwatch and logs the recorded lap times.

Options:
  --num_threads INTEGER           Number of thinker threads to run  [default: 1]
  --num_laps INTEGER              Laps recorded by each thread  [default: 10]
  --lap_interval FLOAT            Seconds each thread thinks per lap
                                  [default: 5.0]
  --clock [monotonic|wall]        Time source for the stopwatches
  --log_level TEXT                Log level for lapwatch loggers
  --help                          Show this message and exit.
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

import click
from pydantic import BaseModel, Field

from lapwatch.config import LapwatchConfig
from lapwatch.log import get_main_logger
from lapwatch.registry import StopwatchRegistry
from lapwatch.schemas import StopwatchSnapshot, StopwatchSummary
from lapwatch.utils.time import Clock


__all__ = ["SlowThinkerConfig", "run_slow_thinker", "main"]

_LOGGER = logging.getLogger(__name__)


class SlowThinkerConfig(BaseModel):
    num_threads: int = Field(default=1, ge=1, description="Number of threads")
    num_laps: int = Field(
        default=10, ge=0, description="Laps recorded by each thread before stopping"
    )
    lap_interval: float = Field(
        default=5.0, gt=0, description="Seconds each thread sleeps per lap"
    )


def _think(
    registry: StopwatchRegistry, index: int, config: SlowThinkerConfig
) -> StopwatchSnapshot:
    stopwatch = registry.get_stopwatch(f"ID {index}")
    stopwatch.start()
    for _ in range(config.num_laps):
        time.sleep(config.lap_interval)
        stopwatch.lap()
    stopwatch.stop()

    get_main_logger().info(f"{stopwatch.id}: {list(stopwatch.get_lap_times())}")
    return stopwatch.snapshot()


def run_slow_thinker(
    config: SlowThinkerConfig, registry: Optional[StopwatchRegistry] = None
) -> List[StopwatchSnapshot]:
    """
    Runs config.num_threads thinker threads that share a single registry

    :param config: settings for the threads
    :param registry: registry to create the stopwatches in. Defaults to a new
        registry configured from the environment
    :return: a snapshot of each thread's stopwatch, in thread order
    """
    if registry is None:
        registry = StopwatchRegistry()
    _LOGGER.info(
        f"Starting {config.num_threads} thinker thread(s) recording "
        f"{config.num_laps} lap(s) of {config.lap_interval} second(s)"
    )

    with ThreadPoolExecutor(
        max_workers=config.num_threads, thread_name_prefix="lapwatch.slow_thinker"
    ) as executor:
        futures = [
            executor.submit(_think, registry, index, config)
            for index in range(config.num_threads)
        ]
        # result() re-raises anything a thinker thread raised
        snapshots = [future.result() for future in futures]

    summary = StopwatchSummary.from_snapshots(snapshots)
    _LOGGER.info(
        f"{summary.num_stopwatches} stopwatch(es) recorded {summary.num_laps} "
        f"lap(s) totalling {summary.formatted}"
    )
    return snapshots


@click.command()
@click.option(
    "--num_threads",
    type=int,
    default=1,
    show_default=True,
    help="Number of thinker threads to run",
)
@click.option(
    "--num_laps",
    type=int,
    default=10,
    show_default=True,
    help="Laps recorded by each thread",
)
@click.option(
    "--lap_interval",
    type=float,
    default=5.0,
    show_default=True,
    help="Seconds each thread thinks per lap",
)
@click.option(
    "--clock",
    type=click.Choice([clock.value for clock in Clock]),
    default=None,
    help="Time source for the stopwatches. Defaults to LAPWATCH_CLOCK or monotonic",
)
@click.option(
    "--log_level",
    type=str,
    default=None,
    help="Log level for lapwatch loggers. Defaults to LAPWATCH_LOG_LEVEL or INFO",
)
def main(
    num_threads: int,
    num_laps: int,
    lap_interval: float,
    clock: Optional[str],
    log_level: Optional[str],
):
    overrides = {}
    if clock:
        overrides["clock"] = clock
    if log_level:
        overrides["log_level"] = log_level
    lapwatch_config = LapwatchConfig.from_env(**overrides)
    lapwatch_config.apply_logging()

    config = SlowThinkerConfig(
        num_threads=num_threads, num_laps=num_laps, lap_interval=lap_interval
    )
    run_slow_thinker(config, registry=StopwatchRegistry(config=lapwatch_config))


if __name__ == "__main__":
    main()
