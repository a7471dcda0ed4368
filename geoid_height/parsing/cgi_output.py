"""
Extract the geoid undulation from the intpt.cgi HTML answer.

The service renders the result as ``<br> 50.066 Meters<br>``; only the
first occurrence is considered.
"""
from __future__ import annotations

import logging
import re

from .. import constants
from ..common_core import HeightResult, HeightStatus

log = logging.getLogger(__name__)

_HEIGHT_RE = re.compile(constants.HEIGHT_PATTERN, re.IGNORECASE)


def parse_cgi_output(html: str) -> HeightResult:
    match = _HEIGHT_RE.search(html or "")
    if match is None:
        log.warning("No height found in service response (%d chars)", len(html or ""))
        return HeightResult.failure(HeightStatus.NO_DATA, "height pattern not found")

    captured = match.group(1).strip()
    try:
        value = float(captured)
    except ValueError:
        log.warning("Service returned a non-numeric height: %r", captured)
        return HeightResult.failure(HeightStatus.MALFORMED, f"not a number: {captured!r}")
    return HeightResult.success(value)
