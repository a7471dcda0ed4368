"""NGA ``intpt.cgi`` form client.

The client keeps the interface intentionally small: one form POST that
returns the response body as text. It does not retry; callers decide what
a failure means.
"""
from __future__ import annotations

import logging
from typing import Optional

import requests

from .. import config, constants

log = logging.getLogger(__name__)


class IntptClient:
    """Thin convenience wrapper around the EGM96 point interpolation form."""

    def __init__(
        self,
        url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.url = config.resolve_url(url)
        self.timeout = config.resolve_timeout(timeout)
        self.session = session if session is not None else requests.Session()
        self.session.headers.update({"User-Agent": constants.USER_AGENT})

    def __enter__(self) -> "IntptClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def post_form(self, body: str) -> str:
        """POST the url-encoded *body* and return the response text.

        Line breaks are dropped, so markup split over several lines is
        matched as one string. Raises ``requests.RequestException`` on any
        transport failure or non-2xx status.
        """
        log.debug("POST %s (%d bytes)", self.url, len(body))
        resp = self.session.post(
            self.url,
            data=body,
            headers={"Content-Type": constants.FORM_CONTENT_TYPE},
            timeout=self.timeout,
        )
        resp.raise_for_status()
        return "".join(resp.text.splitlines())
