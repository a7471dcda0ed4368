"""Scraping of the intpt.cgi HTML response."""

from .cgi_output import parse_cgi_output

__all__ = ["parse_cgi_output"]
