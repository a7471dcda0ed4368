from __future__ import annotations

import pytest
import requests

from geoid_height import calculator
from geoid_height.api.intpt_client import IntptClient
from geoid_height.calculator import egm96_altitude, get_height, lookup_geoid_height
from geoid_height.common_core import HeightStatus
from geoid_height.encoding.params import create_params
from fakes import FakeSession, height_html


def _client(session: FakeSession) -> IntptClient:
    return IntptClient(url="http://geoid.test/intpt.cgi", timeout=5, session=session)


def test_reference_point_height() -> None:
    session = FakeSession(text=height_html("50.066"))
    result = lookup_geoid_height(38.625473, 359.9995, client=_client(session))

    assert result.status is HeightStatus.OK
    assert result.value == 50.066
    assert session.calls[0]["data"] == create_params(38.625473, 359.9995)


def test_get_height_returns_plain_float() -> None:
    session = FakeSession(text=height_html("50.066"))
    assert get_height(38.625473, 359.9995, client=_client(session)) == 50.066


def test_no_pattern_gives_sentinel() -> None:
    session = FakeSession(text="<html><body>Invalid input</body></html>")
    result = lookup_geoid_height(38.625473, 359.9995, client=_client(session))
    assert result.status is HeightStatus.NO_DATA
    assert get_height(38.625473, 359.9995, client=_client(session)) == -9999.99


@pytest.mark.parametrize(
    "exc",
    [requests.ConnectionError("refused"), requests.Timeout("slow"), requests.HTTPError("502")],
)
def test_transport_failure_gives_sentinel(exc: Exception, caplog: pytest.LogCaptureFixture) -> None:
    session = FakeSession(exc=exc)
    result = lookup_geoid_height(10.0, 20.0, client=_client(session))

    assert result.status is HeightStatus.TRANSPORT_ERROR
    assert result.value == -9999.99
    assert "request to http://geoid.test/intpt.cgi failed" in caplog.text


def test_server_error_status_gives_sentinel() -> None:
    session = FakeSession(text=height_html("50.066"), status_code=503)
    result = lookup_geoid_height(10.0, 20.0, client=_client(session))
    assert result.status is HeightStatus.TRANSPORT_ERROR


def test_unreachable_endpoint_does_not_raise() -> None:
    client = IntptClient(url="http://127.0.0.1:9/intpt.cgi", timeout=1.0)
    with client:
        assert get_height(38.625473, 359.9995, client=client) == -9999.99


def test_default_client_is_created_and_closed(monkeypatch: pytest.MonkeyPatch) -> None:
    session = FakeSession(text=height_html("-31.628"))
    monkeypatch.setattr(calculator, "IntptClient", lambda: _client(session))

    assert get_height(38.628155, 269.779155) == -31.628
    assert session.closed


def test_caller_client_stays_open() -> None:
    session = FakeSession(text=height_html("17.329"))
    lookup_geoid_height(-0.466744, 0.0023, client=_client(session))
    assert not session.closed


def test_egm96_altitude_subtracts_undulation() -> None:
    session = FakeSession(text=height_html("50.066"))
    result = egm96_altitude(38.625473, 359.9995, 100.0, client=_client(session))
    assert result.ok
    assert result.value == pytest.approx(49.934)


def test_egm96_altitude_passes_failures_through() -> None:
    session = FakeSession(text="nothing here")
    result = egm96_altitude(38.625473, 359.9995, 100.0, client=_client(session))
    assert result.status is HeightStatus.NO_DATA
    assert result.value == -9999.99


def test_egm96_altitude_is_rounded_to_millimeters() -> None:
    session = FakeSession(text=height_html("50.066"))
    result = egm96_altitude(38.625473, 359.9995, 100.1, client=_client(session))
    assert result.value == 50.034
    assert repr(result.value) == "50.034"
