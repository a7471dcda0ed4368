"""HTTP client for the NGA EGM96 interpolation service.

The module provides:
- intpt_client: thin wrapper around the ``intpt.cgi`` form handler
"""

from .intpt_client import IntptClient

__all__ = ["IntptClient"]
