"""Encoding of decimal-degree coordinates into intpt.cgi form parameters."""

from .dms import to_dms
from .params import create_params

__all__ = ["to_dms", "create_params"]
