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

import pytest
from click.testing import CliRunner
from lapwatch import (
    StopwatchRegistry,
    get_lapwatch_root_logger,
    set_logging_level,
    slow_thinker,
)
from lapwatch.slow_thinker import SlowThinkerConfig, main, run_slow_thinker
from lapwatch.utils import monotonic_ms, wall_clock_ms
from pydantic import ValidationError


def test_run_slow_thinker(monotonic_registry):
    config = SlowThinkerConfig(num_threads=4, num_laps=3, lap_interval=0.01)

    snapshots = run_slow_thinker(config, registry=monotonic_registry)

    assert [snapshot.id for snapshot in snapshots] == [f"ID {i}" for i in range(4)]
    assert set(monotonic_registry.ids) == {f"ID {i}" for i in range(4)}
    for snapshot in snapshots:
        assert not snapshot.running
        # num_laps laps plus the final lap recorded by stop
        assert len(snapshot.lap_times) == 4
        assert sum(snapshot.lap_times) == snapshot.total_time
        assert all(lap >= 5 for lap in snapshot.lap_times[:3])


def test_run_slow_thinker_without_laps(ticking_clock):
    registry = StopwatchRegistry(clock=ticking_clock)
    config = SlowThinkerConfig(num_threads=2, num_laps=0, lap_interval=1)

    snapshots = run_slow_thinker(config, registry=registry)

    assert [len(snapshot.lap_times) for snapshot in snapshots] == [1, 1]
    assert len(registry) == 2
    assert registry.ids == ("ID 0", "ID 1")


def test_run_slow_thinker_surfaces_thread_errors(monotonic_registry):
    monotonic_registry.get_stopwatch("ID 0")
    config = SlowThinkerConfig(num_threads=1, num_laps=0, lap_interval=1)

    with pytest.raises(ValueError):
        run_slow_thinker(config, registry=monotonic_registry)


@pytest.mark.parametrize(
    "kwargs",
    [
        dict(num_threads=0),
        dict(num_laps=-1),
        dict(lap_interval=0),
    ],
)
def test_slow_thinker_config_validation(kwargs):
    with pytest.raises(ValidationError):
        SlowThinkerConfig(**kwargs)


def test_cli():
    runner = CliRunner()
    result = runner.invoke(
        main,
        [
            "--num_threads",
            "2",
            "--num_laps",
            "2",
            "--lap_interval",
            "0.01",
            "--clock",
            "wall",
        ],
    )

    assert result.exit_code == 0, result.output


def test_cli_invalid_clock():
    runner = CliRunner()
    result = runner.invoke(main, ["--clock", "sundial"])

    assert result.exit_code != 0


@pytest.mark.parametrize(
    "args,expected_clock,expected_level",
    [
        (["--clock", "wall", "--log_level", "debug"], wall_clock_ms, logging.DEBUG),
        (["--clock", "monotonic"], monotonic_ms, logging.INFO),
    ],
)
def test_cli_options_reach_the_registry(
    monkeypatch, args, expected_clock, expected_level
):
    monkeypatch.delenv("LAPWATCH_CLOCK", raising=False)
    monkeypatch.delenv("LAPWATCH_LOG_LEVEL", raising=False)
    calls = []

    def _record_run(config, registry=None):
        calls.append((config, registry))
        return []

    monkeypatch.setattr(slow_thinker, "run_slow_thinker", _record_run)
    runner = CliRunner()
    try:
        result = runner.invoke(main, ["--num_threads", "3", "--num_laps", "0"] + args)
        level = get_lapwatch_root_logger().level
    finally:
        set_logging_level(logging.INFO)

    assert result.exit_code == 0, result.output
    assert len(calls) == 1
    config, registry = calls[0]
    assert config.num_threads == 3
    assert config.num_laps == 0
    assert isinstance(registry, StopwatchRegistry)
    assert registry._clock is expected_clock
    assert level == expected_level
