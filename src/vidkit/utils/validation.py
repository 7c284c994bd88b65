"""Validation helpers shared by every platform URL dialect."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple
from urllib.parse import SplitResult, parse_qsl, unquote, urlsplit


class URLParseError(ValueError):
    """Raised when a candidate string cannot be parsed as an absolute web URL."""


_SCHEME_PATTERN = re.compile(r"^https?://", re.IGNORECASE)
_HOST_PATTERN = re.compile(r"^[0-9a-z._~!$&'()*+,;=-]+$")
_QUERY_OR_FRAGMENT = re.compile(r"[?#]")


@dataclass(frozen=True, slots=True)
class ParsedURL:
    """Decomposed view of a URL as seen by the platform engines."""

    scheme: str
    raw_hostname: str
    hostname: str
    path: str
    query: str
    query_pairs: Tuple[Tuple[str, str], ...]

    @property
    def path_segments(self) -> List[str]:
        """Path segments with empty entries removed."""

        return [segment for segment in self.path.split("/") if segment]

    @property
    def trimmed_path(self) -> str:
        """Path with leading and trailing slashes stripped."""

        return self.path.strip("/")

    @property
    def query_keys(self) -> List[str]:
        return [key for key, _ in self.query_pairs]

    @property
    def parameters(self) -> Dict[str, str]:
        """Query parameters as a mapping; the last duplicate key wins."""

        return dict(self.query_pairs)

    def first_param(self, key: str) -> Optional[str]:
        """Return the first value for ``key``, mirroring browser ``URLSearchParams.get``."""

        for name, value in self.query_pairs:
            if name == key:
                return value
        return None


def has_scheme(url: str) -> bool:
    """Return ``True`` when the string starts with an ``http://`` or ``https://`` scheme."""

    return bool(_SCHEME_PATTERN.match(url))


def strip_www(hostname: str) -> str:
    """Lowercase a hostname and remove one leading ``www.`` label."""

    lowered = hostname.lower()
    return lowered[4:] if lowered.startswith("www.") else lowered


def backslashes_to_slashes(url: str) -> str:
    """Treat ``\\`` as ``/`` before the query, as browsers do for http(s) URLs."""

    boundary = _QUERY_OR_FRAGMENT.search(url)
    end = boundary.start() if boundary else len(url)
    return url[:end].replace("\\", "/") + url[end:]


def coerce_scheme(url: str, *, allow_no_protocol: bool = True) -> str:
    """Trim the input and prepend ``https://`` when no web scheme is present."""

    stripped = url.strip()
    if has_scheme(stripped):
        return stripped
    if not allow_no_protocol:
        raise URLParseError(f"URL is missing an http(s) scheme: {url!r}")
    return f"https://{stripped}"


def parse_url(url: object, *, allow_no_protocol: bool = True) -> ParsedURL:
    """Parse untrusted input into a :class:`ParsedURL`.

    Parameters
    ----------
    url:
        Raw user input. Anything other than a non-empty string is rejected.
    allow_no_protocol:
        When ``False`` the input must already carry an ``http(s)://`` scheme.

    Raises
    ------
    URLParseError
        If the input is empty, not a string, lacks a permitted scheme, or does
        not contain a syntactically valid host.
    """

    if not isinstance(url, str) or not url.strip():
        raise URLParseError("URL must be a non-empty string")

    candidate = coerce_scheme(url, allow_no_protocol=allow_no_protocol)
    try:
        split: SplitResult = urlsplit(backslashes_to_slashes(candidate))
        hostname = unquote(split.hostname).lower() if split.hostname else None
        _ = split.port  # raises ValueError on a malformed port
    except ValueError as exc:
        raise URLParseError(f"Malformed URL: {url!r}") from exc

    if not hostname or not _HOST_PATTERN.fullmatch(hostname):
        raise URLParseError(f"URL has no valid host: {url!r}")

    return ParsedURL(
        scheme=split.scheme.lower(),
        raw_hostname=hostname,
        hostname=strip_www(hostname),
        path=split.path or "/",
        query=split.query,
        query_pairs=tuple(parse_qsl(split.query, keep_blank_values=True)),
    )


def try_parse_url(url: object, *, allow_no_protocol: bool = True) -> Optional[ParsedURL]:
    """Return the parsed URL, or ``None`` when :func:`parse_url` rejects it."""

    try:
        return parse_url(url, allow_no_protocol=allow_no_protocol)
    except URLParseError:
        return None


__all__ = [
    "ParsedURL",
    "URLParseError",
    "coerce_scheme",
    "has_scheme",
    "parse_url",
    "strip_www",
    "try_parse_url",
]
