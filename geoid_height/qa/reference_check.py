"""
Compare live service answers with NGA's published check points (outintpt.dat).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from .. import constants
from ..api.intpt_client import IntptClient
from ..calculator import lookup_geoid_height
from ..common_core import HeightResult

ReferencePoint = Tuple[float, float, float]


@dataclass(frozen=True)
class PointCheck:
    lat: float
    lng: float
    expected_m: float
    result: HeightResult
    tolerance_m: float

    @property
    def passed(self) -> bool:
        return self.result.ok and abs(self.result.value - self.expected_m) <= self.tolerance_m

    def to_row(self) -> dict:
        return {
            "lat": self.lat,
            "lng": self.lng,
            "expected_m": self.expected_m,
            "actual_m": self.result.value if self.result.ok else None,
            "status": "pass" if self.passed else "fail",
            "message": self.result.detail or self.result.status.value,
            "result": self.result.to_dict(),
        }


def check_reference_points(
    client: IntptClient,
    points: Optional[Iterable[ReferencePoint]] = None,
    tolerance_m: float = constants.REFERENCE_TOLERANCE_M,
) -> List[PointCheck]:
    points = constants.REFERENCE_POINTS if points is None else points
    return [
        PointCheck(lat, lng, expected, lookup_geoid_height(lat, lng, client=client), tolerance_m)
        for lat, lng, expected in points
    ]


def all_passed(checks: Sequence[PointCheck]) -> bool:
    return bool(checks) and all(check.passed for check in checks)
