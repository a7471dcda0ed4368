"""
Shared dataclasses for the geoid height pipeline.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from . import constants


@dataclass(frozen=True)
class Coordinate:
    lat: float
    lng: float

    def validate(self) -> "Coordinate":
        """Raise ValueError when lat/lng fall outside the accepted ranges."""
        if not -90.0 <= self.lat <= 90.0:
            raise ValueError(f"latitude {self.lat} outside [-90, 90]")
        if not -180.0 <= self.lng < 360.0:
            raise ValueError(f"longitude {self.lng} outside [-180, 360)")
        return self


@dataclass(frozen=True)
class DMSTriple:
    """Form-ready degrees/minutes/seconds fields for one angle."""
    degrees: int
    minutes: int
    seconds: str  # at most constants.SECONDS_MAX_CHARS characters

    def as_fields(self) -> tuple[str, str, str]:
        return str(self.degrees), str(self.minutes), self.seconds


class HeightStatus(str, Enum):
    OK = "ok"
    NO_DATA = "no_data"
    TRANSPORT_ERROR = "transport_error"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class HeightResult:
    status: HeightStatus
    value: float = constants.NO_HEIGHT  # meters; sentinel unless status is OK
    detail: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is HeightStatus.OK

    @staticmethod
    def success(value: float) -> "HeightResult":
        return HeightResult(HeightStatus.OK, float(value))

    @staticmethod
    def failure(status: HeightStatus, detail: Optional[str] = None) -> "HeightResult":
        if status is HeightStatus.OK:
            raise ValueError("failure() requires a non-OK status")
        return HeightResult(status, constants.NO_HEIGHT, detail)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-friendly dict."""
        return {
            "status": self.status.value,
            "value": float(self.value),
            "detail": self.detail,
        }
