"""timed-runs: Micro-benchmarking with summary reports.

Provides:
- time_it: Time a single run of a callback
- time_it_report: Run a callback many times and summarize the timings
- TimedRunReport / TimedRunComparison: Reports that format, log and compare
- FormatOptions: Unit, notation, precision and comma settings for rendering
- Sampler: Lower-level timing of callbacks against an injectable clock

Usage:
    from timed_runs import time_it_report

    at_once = time_it_report(lambda: json.dumps(rows), name="At once")
    per_row = time_it_report(lambda: [json.dumps(r) for r in rows], name="Per row")

    print(at_once.compare_to(per_row).format(precision=2))
    print(at_once.compare_to(per_row).format(percent=True, precision=2))
"""

from timed_runs._core import DEFAULT_RUNS, Clock, Sampler, time_it, time_it_report
from timed_runs._format import FormatOptions, group_thousands, percent_change, render_number
from timed_runs._report import (
    DEFAULT_REPORT_NAME,
    Report,
    TimedRun,
    TimedRunComparison,
    TimedRunReport,
    build_summary,
    compare,
    format_report,
)
from timed_runs._units import Notation, TimeUnit, convert_seconds, pick_unit

__all__ = [
    "DEFAULT_REPORT_NAME",
    "DEFAULT_RUNS",
    "Clock",
    "FormatOptions",
    "Notation",
    "Report",
    "Sampler",
    "TimeUnit",
    "TimedRun",
    "TimedRunComparison",
    "TimedRunReport",
    "build_summary",
    "compare",
    "convert_seconds",
    "format_report",
    "group_thousands",
    "percent_change",
    "pick_unit",
    "render_number",
    "time_it",
    "time_it_report",
]

__version__ = "0.1.0"
