"""Sampling and the public timing entry points.

Design by Contract:
- runs MUST be a positive int (crash before any sampling if not)
- callbacks run strictly in sequence on the caller's thread
- elapsed times are returned as measured; a negative delta (clock went
  backwards) is logged, never clamped

The clock is injected rather than global: anything callable with no
arguments that returns seconds as a float. ``time.perf_counter`` is the
default; tests pass a ``timed_runs.testing.FakeClock``.
"""

import time
from collections.abc import Callable
from typing import Any

from loguru import logger

from timed_runs._contracts import checked
from timed_runs._report import DEFAULT_REPORT_NAME, TimedRun, TimedRunReport, build_summary

Clock = Callable[[], float]

DEFAULT_RUNS = 10_000


class Sampler:
    """Times a callback against a clock.

    Args:
        clock: Zero-argument callable returning seconds (default: time.perf_counter)

    Example:
        sampler = Sampler()
        samples = sampler.run_many(lambda: sorted(data), 1_000)
    """

    @checked
    def __init__(self, clock: Clock | None = None) -> None:
        self.clock: Clock = clock if clock is not None else time.perf_counter

    @checked
    def run_once(self, callback: Callable[[], Any]) -> float:
        """Run ``callback`` once and return the elapsed seconds."""
        start = self.clock()
        callback()
        elapsed = self.clock() - start

        if elapsed < 0:
            logger.warning(
                f"Negative elapsed time: {elapsed:.9f}s. Clock is not monotonic."
            )
        return elapsed

    @checked
    def run_many(self, callback: Callable[[], Any], count: int) -> list[float]:
        """Run ``callback`` ``count`` times in sequence.

        Returns:
            One elapsed time per run, in execution order.
        """
        assert count > 0, f"Run count must be positive: {count}"

        samples = [self.run_once(callback) for _ in range(count)]
        logger.debug(f"Sampled {count} runs in {sum(samples):.6f}s")
        return samples


@checked
def time_it(
    callback: Callable[[], Any],
    *,
    name: str | None = None,
    clock: Clock | None = None,
) -> TimedRun:
    """Time a single run of ``callback``.

    Args:
        callback: Function to time
        name: Optional descriptive title for the run
        clock: Time source (default: time.perf_counter)

    Returns:
        TimedRun with the elapsed seconds.
    """
    return TimedRun(seconds=Sampler(clock).run_once(callback), name=name)


@checked
def time_it_report(
    callback: Callable[[], Any],
    *,
    name: str = DEFAULT_REPORT_NAME,
    runs: int = DEFAULT_RUNS,
    clock: Clock | None = None,
) -> TimedRunReport:
    """Run ``callback`` repeatedly and summarize the timings.

    Args:
        callback: Function to time
        name: Report title (default: "Timed Run Report")
        runs: How many times to run the callback (default: 10,000)
        clock: Time source (default: time.perf_counter)

    Returns:
        TimedRunReport over all runs. Use ``.format()`` to render it and
        ``.compare_to()`` to diff it against another report.
    """
    assert runs > 0, f"Run count must be positive: {runs}"

    samples = Sampler(clock).run_many(callback, runs)
    return build_summary(name, samples)
