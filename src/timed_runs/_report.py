"""Timed run reports: summary building, comparison and text layout.

A report is one of two variants:
- TimedRunReport: statistics reduced from raw samples
- TimedRunComparison: the field-wise ``to - from`` difference of two reports

Both expose the same fields (name, runs, average, median, low, high), so
either can be formatted, logged or compared again. Rendering dispatches on
the variant in ``format_report``.

Design by Contract:
- runs >= 1 (an empty sample set has no low/high/median)
- median is ``sorted[len // 2]``: the upper-middle sample on even counts,
  not the mean of the two middle samples
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Union

from loguru import logger

from timed_runs._contracts import checked
from timed_runs._format import FormatOptions, group_thousands, percent_change, render_number
from timed_runs._units import AUTO, Notation, convert_seconds, pick_unit

DEFAULT_REPORT_NAME = "Timed Run Report"

_FIELDS = ("average", "median", "low", "high")


@dataclass(frozen=True)
class TimedRun:
    """The time it took to run a callback once.

    Attributes:
        seconds: Elapsed time in seconds, at the resolution of the clock used
        name: Descriptive title, if one was given
    """

    seconds: float
    name: str | None = None


class _ReportMethods:
    """Operations shared by both report variants."""

    def format(self, **options) -> str:
        """Format this report as a user-friendly string.

        Accepts the fields of FormatOptions as keyword arguments; omitted
        fields keep their defaults.

        Example (``precision=2``)::

            =========== Result ===========
            Total Runs: 10,000

            Average: 5.88 μs
            Median: 5.80 μs

            Low: 5.70 μs
            High: 24.60 μs
            ==============================
        """
        return format_report(self, FormatOptions(**options))

    def compare_to(self, other: "Report", name: str | None = None) -> "TimedRunComparison":
        """Compare this report (``from``) against ``other`` (``to``)."""
        return compare(self, other, name=name)

    def log(self, **options) -> None:
        """Log the formatted report line by line via loguru."""
        for line in self.format(**options).splitlines():
            logger.info(line)

    def __str__(self) -> str:
        return self.format()


@dataclass(frozen=True)
class TimedRunReport(_ReportMethods):
    """Statistics over a set of timed runs of one callback.

    Attributes:
        name: Title displayed at the top of the formatted report
        runs: How many times the callback was run (MUST be >= 1)
        average: Mean of all runs, in seconds
        median: Middle run of the sorted runs, in seconds
        low: Fastest run, in seconds
        high: Slowest run, in seconds
    """

    name: str
    runs: int
    average: float
    median: float
    low: float
    high: float

    def __post_init__(self) -> None:
        assert self.runs >= 1, f"Report must cover at least one run: {self.runs}"

    @classmethod
    def from_samples(cls, name: str, samples: Sequence[float]) -> "TimedRunReport":
        return build_summary(name, samples)


@dataclass(frozen=True)
class TimedRunComparison(_ReportMethods):
    """The difference between two reports.

    Every time field is ``to.<field> - from_.<field>``, so a positive value
    means ``to`` was slower. ``runs`` is taken from ``from_``.

    Formatting a comparison always prefixes a sign, and ``percent=True``
    renders each field as the percent change from ``from_`` to ``to``.
    """

    name: str
    from_: "Report"
    to: "Report"

    @property
    def runs(self) -> int:
        return self.from_.runs

    @property
    def average(self) -> float:
        return self.to.average - self.from_.average

    @property
    def median(self) -> float:
        return self.to.median - self.from_.median

    @property
    def low(self) -> float:
        return self.to.low - self.from_.low

    @property
    def high(self) -> float:
        return self.to.high - self.from_.high


Report = Union[TimedRunReport, TimedRunComparison]


@checked
def build_summary(name: str, samples: Sequence[float]) -> TimedRunReport:
    """Reduce raw samples (seconds) into a TimedRunReport.

    Args:
        name: Report title
        samples: Elapsed times in seconds (MUST be non-empty)

    Returns:
        TimedRunReport with average, median, low and high. The result does
        not depend on the order of ``samples``.
    """
    assert len(samples) > 0, "Cannot summarize an empty sample set"

    ordered = sorted(samples)
    low = ordered[0]
    high = ordered[-1]
    median = ordered[len(ordered) // 2]

    # fsum/n can land one ulp outside [low, high]
    average = min(max(math.fsum(ordered) / len(ordered), low), high)

    return TimedRunReport(
        name=name,
        runs=len(ordered),
        average=average,
        median=median,
        low=low,
        high=high,
    )


@checked
def compare(from_: Report, to: Report, name: str | None = None) -> TimedRunComparison:
    """Build the comparison of ``from_`` against ``to``.

    Without an explicit name the comparison keeps the shared name of both
    reports, or is named ``"{from_.name} => {to.name}"`` when they differ.
    """
    if name is None:
        name = from_.name if from_.name == to.name else f"{from_.name} => {to.name}"
    return TimedRunComparison(name=name, from_=from_, to=to)


def _render_field(report: Report, field: str, options: FormatOptions) -> str:
    is_comparison = isinstance(report, TimedRunComparison)

    if is_comparison and options.percent:
        change = percent_change(getattr(report.from_, field), getattr(report.to, field))
        return render_number(change, Notation.FLOAT, options.precision, signed=True) + "%"

    seconds = getattr(report, field)
    unit = pick_unit(seconds) if options.unit == AUTO else options.unit
    text = render_number(
        convert_seconds(seconds, unit),
        options.notation,
        options.precision,
        signed=is_comparison,
    )
    if options.notation is Notation.FLOAT and options.commas:
        text = group_thousands(text)

    return f"{text} {unit.value}"


@checked
def format_report(report: Report, options: FormatOptions | None = None) -> str:
    """Render a report as a fixed-layout text block.

    Each time field picks its own unit when ``options.unit`` is ``"auto"``.
    The footer border always matches the header width.
    """
    if options is None:
        options = FormatOptions()

    average, median, low, high = (_render_field(report, f, options) for f in _FIELDS)
    runs = group_thousands(str(report.runs)) if options.commas else str(report.runs)
    padding = "=" * (len(report.name) + 2)

    return "\n".join(
        [
            f"=========== {report.name} ===========",
            f"Total Runs: {runs}",
            "",
            f"Average: {average}",
            f"Median: {median}",
            "",
            f"Low: {low}",
            f"High: {high}",
            f"==========={padding}===========",
        ]
    )
