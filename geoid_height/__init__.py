"""EGM96 geoid height lookup via the NGA ``intpt.cgi`` interpolation service."""
from __future__ import annotations

from .calculator import egm96_altitude, get_height, lookup_geoid_height
from .common_core import Coordinate, DMSTriple, HeightResult, HeightStatus
from .constants import NO_HEIGHT, __version__

__all__ = [
    "Coordinate",
    "DMSTriple",
    "HeightResult",
    "HeightStatus",
    "NO_HEIGHT",
    "__version__",
    "egm96_altitude",
    "get_height",
    "lookup_geoid_height",
]
