"""TikTok URL engine: validation, extraction, normalisation, and share links."""

from __future__ import annotations

import re
from typing import Callable, Optional

from vidkit.models.options import OptionsLike
from vidkit.models.platform import Platform
from vidkit.services.dialect import Candidate, PathRule, PlatformDialect
from vidkit.utils.validation import ParsedURL, try_parse_url


class InvalidTikTokVideoIdError(ValueError):
    """Raised when a share link is requested for a malformed TikTok video id."""


_VIDEO_ID_PATTERN = re.compile(r"^[0-9]{19}$")
_USERNAME_PATTERN = re.compile(r"^[a-zA-Z0-9._]{2,24}$")


def _is_exact_video_id(video_id: str) -> bool:
    return bool(_VIDEO_ID_PATTERN.fullmatch(video_id))


WEB_HOST = "tiktok.com"
SHORT_LINK_HOST = "vm.tiktok.com"
TIKTOK_HOSTS = frozenset({WEB_HOST, SHORT_LINK_HOST})

PLACEHOLDER_USERNAME = "user"
CANONICAL_URL = "https://www.tiktok.com/@{username}/video/{video_id}"
SHARE_URL = "https://vm.tiktok.com/{video_id}"


class TikTokForm:
    """Names of the recognised TikTok URL shapes."""

    PROFILE_VIDEO = "profile_video"
    LOCALIZED_PROFILE_VIDEO = "localized_profile_video"
    SHORT_LINK = "short_link"


def is_valid_tiktok_video_id(video_id: object) -> bool:
    """Return ``True`` for exactly 19 decimal digits (surrounding whitespace ignored)."""

    if not isinstance(video_id, str) or not video_id:
        return False
    return _is_exact_video_id(video_id.strip())


def is_valid_tiktok_username(username: object) -> bool:
    """Return ``True`` for 2-24 characters of letters, digits, ``.`` or ``_``; a leading ``@`` is ignored."""

    if not isinstance(username, str) or not username:
        return False
    return bool(_USERNAME_PATTERN.fullmatch(username.removeprefix("@")))


def _video_after(index: int) -> Callable[[ParsedURL], Optional[Candidate]]:
    def extract(url: ParsedURL) -> Optional[Candidate]:
        parts = url.path_segments
        if len(parts) < index + 2 or parts[index] != "video":
            return None
        return Candidate(parts[index + 1], username=parts[index - 1].removeprefix("@") or None)

    return extract


def _short_link(url: ParsedURL) -> Optional[Candidate]:
    return Candidate(url.trimmed_path)


TIKTOK_DIALECT = PlatformDialect(
    platform=Platform.TIKTOK,
    hosts=TIKTOK_HOSTS,
    www_hosts=frozenset({WEB_HOST}),
    rules=(
        PathRule(TikTokForm.PROFILE_VIDEO, frozenset({WEB_HOST}), _video_after(1)),
        PathRule(TikTokForm.LOCALIZED_PROFILE_VIDEO, frozenset({WEB_HOST}), _video_after(2)),
        PathRule(TikTokForm.SHORT_LINK, frozenset({SHORT_LINK_HOST}), _short_link),
    ),
    is_valid_video_id=_is_exact_video_id,
    accepts_query=lambda url: not url.query,
)


def is_valid_tiktok_video_url(url: str, options: OptionsLike = None) -> bool:
    """Validate a TikTok video URL.

    Accepts ``tiktok.com/@user/video/<id>``, ``tiktok.com/<locale>/@user/video/<id>``
    and ``vm.tiktok.com/<id>``. A username that is present but malformed
    invalidates the URL. With ``allow_query_params=False`` any query string rejects.

    >>> is_valid_tiktok_video_url("https://www.tiktok.com/@username/video/1234567890123456789")
    True
    >>> is_valid_tiktok_video_url("https://tiktok.com/@a/video/1234567890123456789")
    False
    """

    match = TIKTOK_DIALECT.match(url, options)
    if match is None:
        return False
    return match.username is None or is_valid_tiktok_username(match.username)


def get_tiktok_video_id(url: str, options: OptionsLike = None) -> Optional[str]:
    """Extract the 19-digit video id; the username, if any, is not checked."""

    match = TIKTOK_DIALECT.match(url, options)
    return match.video_id if match else None


def normalize_tiktok_video_url(url: str) -> Optional[str]:
    """Return ``https://www.tiktok.com/@<username>/video/<id>``.

    Unlike :func:`is_valid_tiktok_video_url`, a missing or malformed username does
    not fail normalisation; the placeholder ``user`` is substituted instead.
    """

    match = TIKTOK_DIALECT.match(url)
    if match is None:
        return None
    username = match.username if is_valid_tiktok_username(match.username) else PLACEHOLDER_USERNAME
    return CANONICAL_URL.format(username=username, video_id=match.video_id)


def is_tiktok_url(url: str) -> bool:
    """Return ``True`` only for ``tiktok.com`` and ``vm.tiktok.com``; other subdomains do not count."""

    parsed = try_parse_url(url)
    return parsed is not None and parsed.hostname in TIKTOK_HOSTS


def generate_tiktok_share_url(video_id: str) -> str:
    """Build a ``vm.tiktok.com`` share link.

    Raises
    ------
    InvalidTikTokVideoIdError
        If ``video_id`` is not 19 digits after trimming whitespace.
    """

    if not is_valid_tiktok_video_id(video_id):
        raise InvalidTikTokVideoIdError("Invalid TikTok video ID")
    return SHARE_URL.format(video_id=video_id.strip())


__all__ = [
    "InvalidTikTokVideoIdError",
    "TIKTOK_DIALECT",
    "TikTokForm",
    "generate_tiktok_share_url",
    "get_tiktok_video_id",
    "is_tiktok_url",
    "is_valid_tiktok_username",
    "is_valid_tiktok_video_id",
    "is_valid_tiktok_video_url",
    "normalize_tiktok_video_url",
]
