"""Time units and numeric notations used when rendering reports."""

from enum import Enum

from timed_runs._contracts import checked


class TimeUnit(str, Enum):
    """Unit a period of time is displayed in."""

    NANOSECONDS = "ns"
    MICROSECONDS = "μs"
    MILLISECONDS = "ms"
    SECONDS = "s"
    MINUTES = "m"


class Notation(str, Enum):
    """How a number is written out.

    FLOAT is fixed-point, SCIENTIFIC is ``d.ddde+XX`` and SHORTEST picks
    whichever of the two renders with fewer characters.
    """

    FLOAT = "float"
    SCIENTIFIC = "scientific"
    SHORTEST = "shortest"


AUTO = "auto"

_SCALE: dict[TimeUnit, float] = {
    TimeUnit.NANOSECONDS: 1e9,
    TimeUnit.MICROSECONDS: 1e6,
    TimeUnit.MILLISECONDS: 1e3,
    TimeUnit.SECONDS: 1.0,
}


@checked
def pick_unit(seconds: float) -> TimeUnit:
    """Pick the most readable unit for a value in seconds.

    For example ``1.213e-3`` reads best as ``1.213 ms`` rather than
    ``1213000 ns`` or ``0.001213 s``.
    """
    magnitude = abs(seconds)
    if magnitude <= 1e-6:
        return TimeUnit.NANOSECONDS
    if magnitude <= 1e-4:
        return TimeUnit.MICROSECONDS
    if magnitude < 10:
        return TimeUnit.MILLISECONDS
    if magnitude < 60:
        return TimeUnit.SECONDS
    return TimeUnit.MINUTES


@checked
def convert_seconds(seconds: float, unit: TimeUnit) -> float:
    """Convert a value in seconds into ``unit``."""
    if unit is TimeUnit.MINUTES:
        return seconds / 60
    return seconds * _SCALE[unit]
