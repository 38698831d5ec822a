"""Tests for sampling and the public timing entry points.

Scenarios run against a FakeClock for determinism; a couple use the real
perf_counter clock with time.sleep.
"""

import time

import pytest
from beartype.roar import BeartypeCallHintParamViolation

from timed_runs import (
    DEFAULT_REPORT_NAME,
    DEFAULT_RUNS,
    Sampler,
    TimedRun,
    TimedRunReport,
    time_it,
    time_it_report,
)
from timed_runs.testing import FakeClock


def advance_by_call_index(clock: FakeClock):
    """Callback that advances ``clock`` by i on its i-th call (1-based)."""
    calls = 0

    def callback() -> None:
        nonlocal calls
        calls += 1
        clock.advance_by(calls)

    return callback


# ---------------------------------------------------------------------------
# FakeClock
# ---------------------------------------------------------------------------

class TestFakeClock:
    def test_starts_at_zero(self, fake_clock):
        assert fake_clock() == 0.0

    def test_set_time_and_advance(self, fake_clock):
        fake_clock.set_time(5)
        fake_clock.advance_by(2.5)
        assert fake_clock() == 7.5

    def test_advance_for_each_call(self, fake_clock):
        fake_clock.advance_for_each_call(3)
        assert fake_clock() == 3.0
        assert fake_clock() == 6.0
        assert fake_clock.current == 6.0

    def test_reset_clears_time_and_increment(self, fake_clock):
        fake_clock.set_time(100)
        fake_clock.advance_for_each_call(1)
        fake_clock.reset()
        assert fake_clock() == 0.0
        assert fake_clock() == 0.0


# ---------------------------------------------------------------------------
# Sampler
# ---------------------------------------------------------------------------

class TestSampler:
    def test_run_once_measures_callback(self, fake_clock):
        sampler = Sampler(fake_clock)
        assert sampler.run_once(lambda: fake_clock.advance_by(100)) == 100

    def test_run_once_counts_per_call_clock_advance(self, fake_clock):
        """The end read advances the clock too, so elapsed includes it."""
        fake_clock.advance_for_each_call(0.25)
        assert Sampler(fake_clock).run_once(lambda: None) == 0.25

    def test_run_many_returns_samples_in_execution_order(self, fake_clock):
        samples = Sampler(fake_clock).run_many(advance_by_call_index(fake_clock), 10)
        assert samples == [float(i) for i in range(1, 11)]

    def test_run_many_calls_callback_exactly_count_times(self, fake_clock):
        calls = []
        Sampler(fake_clock).run_many(lambda: calls.append(1), 7)
        assert len(calls) == 7

    def test_run_many_logs_batch(self, fake_clock, log_messages):
        Sampler(fake_clock).run_many(lambda: fake_clock.advance_by(1), 4)
        assert any("Sampled 4 runs" in m for m in log_messages)

    @pytest.mark.parametrize("count", [0, -1])
    def test_run_many_rejects_non_positive_count(self, fake_clock, count):
        with pytest.raises(AssertionError, match="positive"):
            Sampler(fake_clock).run_many(lambda: None, count)

    def test_negative_elapsed_is_returned_and_logged(self, fake_clock, log_messages):
        fake_clock.set_time(10)
        elapsed = Sampler(fake_clock).run_once(lambda: fake_clock.set_time(4))
        assert elapsed == -6
        assert any("Negative elapsed time" in m for m in log_messages)

    def test_default_clock_is_perf_counter(self):
        assert Sampler().clock is time.perf_counter

    def test_beartype_rejects_non_callable_clock(self):
        with pytest.raises(BeartypeCallHintParamViolation):
            Sampler(clock=42)


# ---------------------------------------------------------------------------
# time_it
# ---------------------------------------------------------------------------

class TestTimeIt:
    def test_returns_elapsed_seconds(self, fake_clock):
        result = time_it(lambda: fake_clock.advance_by(100), clock=fake_clock)
        assert result == TimedRun(seconds=100)
        assert result.name is None

    def test_keeps_name(self, fake_clock):
        result = time_it(lambda: fake_clock.advance_by(2), name="Encode", clock=fake_clock)
        assert result.name == "Encode"
        assert result.seconds == 2

    def test_real_clock(self):
        result = time_it(lambda: time.sleep(0.01))
        assert result.seconds >= 0.01

    def test_beartype_rejects_non_callable(self):
        with pytest.raises(BeartypeCallHintParamViolation):
            time_it("not callable")


# ---------------------------------------------------------------------------
# time_it_report
# ---------------------------------------------------------------------------

class TestTimeItReport:
    def test_summarizes_increasing_runs(self, fake_clock):
        report = time_it_report(
            advance_by_call_index(fake_clock), runs=10, clock=fake_clock
        )
        assert report == TimedRunReport(
            name=DEFAULT_REPORT_NAME,
            runs=10,
            average=5.5,
            median=6,
            low=1,
            high=10,
        )

    def test_defaults_to_ten_thousand_runs(self, fake_clock):
        report = time_it_report(lambda: fake_clock.advance_by(1), clock=fake_clock)
        assert report.runs == DEFAULT_RUNS == 10_000
        assert report.name == "Timed Run Report"

    def test_named_report(self, fake_clock):
        report = time_it_report(
            lambda: fake_clock.advance_by(5), name="Encode", runs=3, clock=fake_clock
        )
        assert report.name == "Encode"
        assert (report.average, report.median, report.low, report.high) == (5, 5, 5, 5)

    def test_real_clock(self):
        report = time_it_report(lambda: None, runs=100)
        assert report.runs == 100
        assert 0 <= report.low <= report.median <= report.high

    @pytest.mark.parametrize("runs", [0, -5])
    def test_non_positive_runs_rejected_before_sampling(self, fake_clock, runs):
        calls = []
        with pytest.raises(AssertionError, match="positive"):
            time_it_report(lambda: calls.append(1), runs=runs, clock=fake_clock)
        assert calls == []

    def test_beartype_rejects_non_integer_runs(self, fake_clock):
        calls = []
        with pytest.raises(BeartypeCallHintParamViolation):
            time_it_report(lambda: calls.append(1), runs=2.5, clock=fake_clock)
        assert calls == []

    def test_compare_reports_of_constant_runs(self, fake_clock):
        fast = time_it_report(lambda: fake_clock.advance_by(5), runs=20, clock=fake_clock)
        slow = time_it_report(lambda: fake_clock.advance_by(20), runs=20, clock=fake_clock)

        comparison = fast.compare_to(slow)
        assert comparison.average == 15
        assert comparison.median == 15
        assert comparison.low == 15
        assert comparison.high == 15
        assert comparison.runs == 20
