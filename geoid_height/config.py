"""
Runtime settings resolution.

Every setting follows the same precedence: explicit argument, then
environment variable, then the default from ``constants``.
"""
from __future__ import annotations

import logging
import os
from typing import Optional

from . import constants

log = logging.getLogger(__name__)


def resolve_url(explicit: Optional[str] = None) -> str:
    if explicit and explicit.strip():
        return explicit.strip()

    env_url = os.getenv(constants.ENV_URL)
    if env_url and env_url.strip():
        log.debug("Using service URL from %s", constants.ENV_URL)
        return env_url.strip()

    return constants.INTPT_CGI_URL


def resolve_timeout(explicit: Optional[float] = None) -> float:
    """Return the request timeout in seconds; must be positive."""
    if explicit is not None:
        return _positive_timeout(explicit, "timeout argument")

    env_timeout = os.getenv(constants.ENV_TIMEOUT)
    if env_timeout and env_timeout.strip():
        try:
            value = float(env_timeout)
        except ValueError as exc:
            raise ValueError(
                f"{constants.ENV_TIMEOUT} must be a number of seconds, got {env_timeout!r}"
            ) from exc
        return _positive_timeout(value, constants.ENV_TIMEOUT)

    return constants.REQUEST_TIMEOUT_S


def _positive_timeout(value: float, source: str) -> float:
    value = float(value)
    if value <= 0:
        raise ValueError(f"{source} must be positive, got {value}")
    return value
