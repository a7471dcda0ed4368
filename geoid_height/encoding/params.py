"""
Form body builder for the intpt.cgi request.
"""
from __future__ import annotations

from typing import List, Tuple

from .. import constants
from .dms import to_dms


def form_fields(lat: float, lng: float) -> List[Tuple[str, str]]:
    """Ordered (name, value) pairs for the latitude, longitude and units fields."""
    fields: List[Tuple[str, str]] = []
    for names, angle in ((constants.LATITUDE_FIELDS, lat), (constants.LONGITUDE_FIELDS, lng)):
        fields.extend(zip(names, to_dms(angle).as_fields()))
    return fields


def create_params(lat: float, lng: float) -> str:
    # values are digits, signs and points only, so no escaping is applied
    pairs = [f"{name}={value}" for name, value in form_fields(lat, lng)]
    pairs.append(constants.UNITS)
    return "&".join(pairs)
