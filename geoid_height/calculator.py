"""
Geoid undulation lookup and WGS84 to EGM96 altitude conversion.

GPS receivers report heights above the WGS84 ellipsoid; what people
usually expect is the height above the EGM96 geoid::

    h_egm96 = h_wgs84 - N(lat, lng)

N is looked up on the NGA interpolation service.
"""
from __future__ import annotations

import logging
from contextlib import nullcontext
from typing import Optional

import requests

from .api.intpt_client import IntptClient
from .common_core import HeightResult, HeightStatus
from .constants import ALTITUDE_DECIMALS
from .encoding.params import create_params
from .parsing.cgi_output import parse_cgi_output

log = logging.getLogger(__name__)


def lookup_geoid_height(lat: float, lng: float, client: Optional[IntptClient] = None) -> HeightResult:
    """Return the geoid undulation N at (*lat*, *lng*) in meters.

    Transport failures are logged and reported as
    ``HeightStatus.TRANSPORT_ERROR``; they never propagate.
    """
    body = create_params(lat, lng)
    owned = client is None
    with (IntptClient() if owned else nullcontext(client)) as active:
        try:
            html = active.post_form(body)
        except requests.RequestException as exc:
            log.error("Geoid service request to %s failed: %s", active.url, exc)
            return HeightResult.failure(HeightStatus.TRANSPORT_ERROR, str(exc))
    return parse_cgi_output(html)


def get_height(lat: float, lng: float, client: Optional[IntptClient] = None) -> float:
    """Float-only variant of lookup_geoid_height: the sentinel -9999.99 marks any failure."""
    return lookup_geoid_height(lat, lng, client=client).value


def egm96_altitude(
    lat: float,
    lng: float,
    wgs84_altitude: float,
    client: Optional[IntptClient] = None,
) -> HeightResult:
    """Convert an ellipsoidal altitude into an altitude above the EGM96 geoid.

    The result is rounded to millimeters, the precision the service reports N in.
    """
    undulation = lookup_geoid_height(lat, lng, client=client)
    if not undulation.ok:
        return undulation
    return HeightResult.success(round(float(wgs84_altitude) - undulation.value, ALTITUDE_DECIMALS))
