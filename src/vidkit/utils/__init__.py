"""Utility helpers shared across vidkit modules."""

from vidkit.utils.validation import ParsedURL, URLParseError, parse_url, strip_www, try_parse_url

__all__ = ["ParsedURL", "URLParseError", "parse_url", "strip_www", "try_parse_url"]
