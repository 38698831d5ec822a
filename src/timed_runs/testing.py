"""Deterministic clock for tests.

Usage:
    clock = FakeClock()
    clock.advance_for_each_call(0.5)
    report = time_it_report(lambda: None, runs=10, clock=clock)
"""

from timed_runs._contracts import checked


class FakeClock:
    """Controllable stand-in for ``time.perf_counter``.

    Calling the instance returns the current fake time, after first
    advancing it by the per-call increment (0 unless set). The owner is
    responsible for calling ``reset()`` between scenarios.
    """

    def __init__(self) -> None:
        self._current: float = 0.0
        self._per_call: float = 0.0

    def __call__(self) -> float:
        self.advance_by(self._per_call)
        return self._current

    @property
    def current(self) -> float:
        """Current fake time, without advancing it."""
        return self._current

    @checked
    def set_time(self, seconds: float) -> None:
        self._current = seconds

    @checked
    def advance_by(self, seconds: float) -> None:
        self._current += seconds

    @checked
    def advance_for_each_call(self, seconds: float) -> None:
        """Advance the time by ``seconds`` on every read."""
        self._per_call = seconds

    def reset(self) -> None:
        self._current = 0.0
        self._per_call = 0.0
