from __future__ import annotations

import pytest

from geoid_height.common_core import HeightStatus
from geoid_height.parsing.cgi_output import parse_cgi_output
from fakes import height_html


def test_extracts_height() -> None:
    result = parse_cgi_output(height_html("50.066"))
    assert result.ok
    assert result.value == 50.066


def test_pattern_is_case_insensitive_and_trimmed() -> None:
    result = parse_cgi_output("<BR>   -31.628 meters<Br>")
    assert result.status is HeightStatus.OK
    assert result.value == -31.628


def test_only_first_match_is_used() -> None:
    result = parse_cgi_output("<br>1.5 Meters<br>2.5 Meters<br><br>3.5 Meters<br>")
    assert result.value == 1.5


@pytest.mark.parametrize("html", ["", "<html><body>Service unavailable</body></html>", "<br>17.329 Feet<br>"])
def test_missing_pattern_gives_sentinel(html: str) -> None:
    result = parse_cgi_output(html)
    assert result.status is HeightStatus.NO_DATA
    assert result.value == -9999.99


def test_non_numeric_capture_is_malformed() -> None:
    result = parse_cgi_output("<br>n/a Meters<br>")
    assert result.status is HeightStatus.MALFORMED
    assert result.value == -9999.99
    assert "n/a" in result.detail
