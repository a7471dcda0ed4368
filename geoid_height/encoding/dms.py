"""
Decimal degrees to degrees/minutes/seconds form fields.

The remote form takes each angle as three separate fields. The sign
handling below reproduces the values the service has always been sent:

* degrees carry ``signum(v)``;
* minutes and seconds are negated only when ``-1 < v < 0``.

So ``-14.5`` encodes as ``(-14, 30, "0.0")`` and ``-0.5`` as
``(0, -30, "-0.0")``.
"""
from __future__ import annotations

import math

from .. import constants
from ..common_core import DMSTriple


def _signum(value: float) -> float:
    if value == 0.0:
        return 0.0
    return math.copysign(1.0, value)


def minutes_sign(value: float) -> int:
    # only the (-1, 0) band is negative; v <= -1 keeps a positive sign
    return -1 if -1.0 < value < 0.0 else 1


def whole_degrees(value: float) -> int:
    return int(math.floor(abs(value)))


def whole_minutes(value: float) -> int:
    minutes = 60.0 * (abs(value) - whole_degrees(value))
    return int(math.floor(minutes))


def seconds(value: float) -> float:
    return 3600.0 * (abs(value) - whole_degrees(value) - whole_minutes(value) / 60.0)


def truncate_seconds(value: float, max_chars: int = constants.SECONDS_MAX_CHARS) -> str:
    """Render *value* and cut the text (sign and point included) to *max_chars*."""
    return repr(float(value))[:max_chars]


def to_dms(value: float) -> DMSTriple:
    """Encode one signed decimal-degree angle. No range validation is applied."""
    if not math.isfinite(value):
        raise ValueError(f"cannot encode non-finite angle {value!r}")
    sign = minutes_sign(value)
    return DMSTriple(
        degrees=int(_signum(value) * whole_degrees(value)),
        minutes=sign * whole_minutes(value),
        seconds=truncate_seconds(sign * seconds(value)),
    )
