"""Formatting primitives: options, number rendering and digit grouping.

Design by Contract:
- Options are fully validated on construction (unknown unit/notation
  raises ValueError, negative precision crashes), so a report is never
  partially rendered.
- Percent change follows IEEE division: a zero ``from`` value produces
  inf/nan instead of raising.
"""

import math
from dataclasses import dataclass
from decimal import Decimal

from timed_runs._contracts import checked
from timed_runs._units import AUTO, Notation, TimeUnit, convert_seconds

_SCIENTIFIC_DEFAULT_PRECISION = 6


@checked
@dataclass(frozen=True)
class FormatOptions:
    """Settings for rendering a report as text.

    Args:
        unit: A TimeUnit (or its symbol, e.g. ``"ms"``), or ``"auto"`` to pick
            the best unit for each value independently (default: ``"auto"``)
        notation: A Notation (or its name, e.g. ``"scientific"``)
            (default: FLOAT)
        commas: Separate thousands with commas; only applies to FLOAT
            notation and the run count (default: True)
        percent: Render comparisons as percent change instead of time
            differences. No effect on a base report (default: None)
        precision: Decimal places to round to; None keeps the full value
            (default: None)
    """

    unit: TimeUnit | str = AUTO
    notation: Notation | str = Notation.FLOAT
    commas: bool = True
    percent: bool | None = None
    precision: int | None = None

    def __post_init__(self) -> None:
        if self.unit != AUTO:
            object.__setattr__(self, "unit", TimeUnit(self.unit))
        object.__setattr__(self, "notation", Notation(self.notation))

        assert self.precision is None or self.precision >= 0, (
            f"Precision must be non-negative: {self.precision}"
        )


def _fixed(value: float, precision: int | None, sign: str) -> str:
    if precision is not None:
        return format(value, f"{sign}.{precision}f")
    if not math.isfinite(value):
        return format(value, f"{sign}f")
    # Shortest repr round-trips exactly; Decimal expands it without an exponent.
    return format(Decimal(repr(float(value))), f"{sign}f")


def _scientific(value: float, precision: int | None, sign: str) -> str:
    if precision is None:
        precision = _SCIENTIFIC_DEFAULT_PRECISION
    return format(value, f"{sign}.{precision}e")


@checked
def render_number(
    value: float,
    notation: Notation,
    precision: int | None = None,
    signed: bool = False,
) -> str:
    """Render a number in the given notation.

    Args:
        value: Number to render
        notation: FLOAT, SCIENTIFIC or SHORTEST
        precision: Digits after the decimal point, or None for full precision
            (scientific notation falls back to 6 digits)
        signed: Always prefix a ``+``/``-`` sign

    Returns:
        The rendered number, without unit or digit grouping.
    """
    sign = "+" if signed else ""
    if notation is Notation.FLOAT:
        return _fixed(value, precision, sign)
    if notation is Notation.SCIENTIFIC:
        return _scientific(value, precision, sign)

    fixed = _fixed(value, precision, sign)
    scientific = _scientific(value, precision, sign)
    return fixed if len(fixed) <= len(scientific) else scientific


@checked
def group_thousands(text: str) -> str:
    """Insert thousands separators into the integer digits of a rendered number.

    The sign stays outside the grouped digits and the fractional part is left
    untouched: ``"-3900.15"`` becomes ``"-3,900.15"``. Text without a leading
    digit run (``"inf"``, ``"nan"``) is returned unchanged.
    """
    sign = text[:1] if text[:1] in ("+", "-") else ""
    integer, dot, fraction = text[len(sign):].partition(".")
    if not integer.isdigit():
        return text

    groups: list[str] = []
    while len(integer) > 3:
        groups.append(integer[-3:])
        integer = integer[:-3]
    groups.append(integer)

    return sign + ",".join(reversed(groups)) + dot + fraction


@checked
def percent_change(from_seconds: float, to_seconds: float) -> float:
    """Percent change from one time to another.

    Both values are converted to nanoseconds first, so the result does not
    depend on which unit either side would be displayed in. ``1 -> 3`` is
    ``+200%``.
    """
    from_ns = convert_seconds(from_seconds, TimeUnit.NANOSECONDS)
    to_ns = convert_seconds(to_seconds, TimeUnit.NANOSECONDS)

    if from_ns == 0:
        if to_ns == 0 or math.isnan(to_ns):
            ratio = math.nan
        else:
            ratio = math.copysign(math.inf, to_ns) * math.copysign(1.0, from_ns)
    else:
        ratio = to_ns / from_ns

    return (ratio - 1) * 100
