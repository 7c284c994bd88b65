"""YouTube URL engine: validation, extraction, normalisation, and form conversion."""

from __future__ import annotations

import re
from typing import Callable, Mapping, Optional, Union
from urllib.parse import quote

from vidkit.models.options import OptionsLike
from vidkit.models.platform import Platform
from vidkit.models.youtube import YouTubeURLComponents, YouTubeURLType
from vidkit.services.dialect import Candidate, PathRule, PlatformDialect
from vidkit.utils.validation import ParsedURL, try_parse_url


_VIDEO_ID_PATTERN = re.compile(r"^[0-9A-Za-z_-]{11}$")
_DEGENERATE_ID_PATTERN = re.compile(r"^(.)\1{10}$")

MAIN_HOSTS = frozenset({"youtube.com", "m.youtube.com"})
SHORT_LINK_HOSTS = frozenset({"youtu.be"})
VIDEO_HOSTS = MAIN_HOSTS | SHORT_LINK_HOSTS
KNOWN_DOMAINS = ("youtube.com", "m.youtube.com", "youtu.be", "music.youtube.com")

WATCH_URL = "https://www.youtube.com/watch?v={video_id}"
EMBED_URL = "https://www.youtube.com/embed/{video_id}"
SHORT_URL = "https://youtu.be/{video_id}"

# encodeURIComponent leaves these unescaped
_COMPONENT_SAFE = "-_.!~*'()"

ShareParams = Mapping[str, Union[str, int, float]]


class YouTubeForm:
    """Names of the recognised YouTube URL shapes."""

    WATCH = "watch"
    SHORTS = "shorts"
    EMBED = "embed"
    LIVE = "live"
    SHORT_LINK = "short_link"


VALIDATION_FORMS = frozenset({YouTubeForm.WATCH, YouTubeForm.SHORT_LINK})
NORMALIZATION_FORMS = frozenset({YouTubeForm.WATCH, YouTubeForm.SHORTS, YouTubeForm.SHORT_LINK})


def is_valid_youtube_video_id(video_id: str) -> bool:
    """Return ``True`` for an 11-character id that is not one repeated character."""

    return bool(_VIDEO_ID_PATTERN.fullmatch(video_id)) and not _DEGENERATE_ID_PATTERN.fullmatch(video_id)


def _second_segment(url: ParsedURL) -> Optional[str]:
    parts = url.path.split("/")
    return parts[2] if len(parts) > 2 else None


def _watch(url: ParsedURL) -> Optional[Candidate]:
    if url.path != "/watch":
        return None
    return Candidate(url.first_param("v"))


def _prefixed(prefix: str) -> Callable[[ParsedURL], Optional[Candidate]]:
    def extract(url: ParsedURL) -> Optional[Candidate]:
        if not url.path.startswith(prefix):
            return None
        return Candidate(_second_segment(url))

    return extract


def _short_link(url: ParsedURL) -> Optional[Candidate]:
    return Candidate(url.trimmed_path)


def _only_video_param(url: ParsedURL) -> bool:
    return all(key == "v" for key in url.query_keys)


YOUTUBE_DIALECT = PlatformDialect(
    platform=Platform.YOUTUBE,
    hosts=VIDEO_HOSTS,
    www_hosts=frozenset({"youtube.com"}),
    rules=(
        PathRule(YouTubeForm.WATCH, MAIN_HOSTS, _watch),
        PathRule(YouTubeForm.SHORTS, MAIN_HOSTS, _prefixed("/shorts/")),
        PathRule(YouTubeForm.EMBED, MAIN_HOSTS, _prefixed("/embed/")),
        PathRule(YouTubeForm.LIVE, MAIN_HOSTS, _prefixed("/live/")),
        PathRule(YouTubeForm.SHORT_LINK, SHORT_LINK_HOSTS, _short_link),
    ),
    is_valid_video_id=is_valid_youtube_video_id,
    accepts_query=_only_video_param,
)


def is_valid_youtube_video_url(url: str, options: OptionsLike = None) -> bool:
    """Validate a YouTube video URL.

    Only ``/watch?v=`` URLs on ``youtube.com`` / ``m.youtube.com`` and bare
    ``youtu.be/<id>`` links count as video URLs here; use
    :func:`get_youtube_video_id` to also accept shorts, embed, and live paths.

    Parameters
    ----------
    url:
        Untrusted input. Non-string or empty values are rejected.
    options:
        :class:`~vidkit.models.options.URLValidationOptions`, a mapping of its
        fields, or ``None`` for the lenient defaults. With
        ``allow_query_params=False`` any query key other than ``v`` rejects.

    Examples
    --------
    >>> is_valid_youtube_video_url("https://www.youtube.com/watch?v=dQw4w9WgXcQ")
    True
    >>> is_valid_youtube_video_url("https://youtu.be/aaaaaaaaaaa")
    False
    """

    return YOUTUBE_DIALECT.match(url, options, forms=VALIDATION_FORMS) is not None


def get_youtube_video_id(url: str, options: OptionsLike = None) -> Optional[str]:
    """Extract the video id from watch, shorts, embed, live, or ``youtu.be`` URLs.

    Returns ``None`` on any failure; the returned id always satisfies
    :func:`is_valid_youtube_video_id`.
    """

    match = YOUTUBE_DIALECT.match(url, options)
    return match.video_id if match else None


def normalize_youtube_video_url(url: str) -> Optional[str]:
    """Return ``https://www.youtube.com/watch?v=<id>`` for a watch, shorts, or ``youtu.be`` URL.

    The scheme is optional and every query parameter other than the video id is
    dropped, so start times and tracking tags do not survive normalisation.
    """

    match = YOUTUBE_DIALECT.match(url, forms=NORMALIZATION_FORMS)
    return WATCH_URL.format(video_id=match.video_id) if match else None


def generate_youtube_share_url(video_id: str, params: Optional[ShareParams] = None) -> str:
    """Build a ``youtu.be`` share link, appending ``params`` in insertion order.

    The id is not validated.

    >>> generate_youtube_share_url("dQw4w9WgXcQ", {"t": 120})
    'https://youtu.be/dQw4w9WgXcQ?t=120'
    """

    url = SHORT_URL.format(video_id=video_id)
    query = "&".join(
        f"{quote(str(key), safe=_COMPONENT_SAFE)}={quote(str(value), safe=_COMPONENT_SAFE)}"
        for key, value in (params or {}).items()
    )
    return f"{url}?{query}" if query else url


def parse_youtube_url(url: str) -> YouTubeURLComponents:
    """Classify a YouTube URL without validating any identifier.

    Unrecognised shapes and unparseable input yield ``YouTubeURLType.UNKNOWN``.
    ``parameters`` is filled whenever the URL parses, even for unknown shapes.
    """

    original = url if isinstance(url, str) else ""
    parsed = try_parse_url(url)
    if parsed is None:
        return YouTubeURLComponents(original_url=original)

    fields: dict = {}
    on_main_host = parsed.hostname in MAIN_HOSTS
    path = parsed.path
    if on_main_host and path == "/watch":
        fields = {"type": YouTubeURLType.VIDEO, "video_id": parsed.first_param("v") or None}
    elif parsed.hostname in SHORT_LINK_HOSTS:
        fields = {"type": YouTubeURLType.VIDEO, "video_id": parsed.trimmed_path or None}
    elif on_main_host and path.startswith("/shorts/"):
        fields = {"type": YouTubeURLType.SHORT, "video_id": _second_segment(parsed) or None}
    elif on_main_host and path.startswith("/embed/"):
        fields = {"type": YouTubeURLType.VIDEO, "video_id": _second_segment(parsed) or None, "is_embed": True}
    elif on_main_host and path.startswith("/live/"):
        fields = {"type": YouTubeURLType.LIVE, "video_id": _second_segment(parsed) or None}
    elif on_main_host and path.startswith("/playlist"):
        fields = {"type": YouTubeURLType.PLAYLIST, "playlist_id": parsed.first_param("list") or None}
    elif on_main_host and path.startswith("/channel/"):
        fields = {"type": YouTubeURLType.CHANNEL, "channel_id": _second_segment(parsed) or None}

    return YouTubeURLComponents(parameters=parsed.parameters, original_url=original, **fields)


def is_youtube_url(url: str) -> bool:
    """Return ``True`` for any URL on a YouTube domain or one of its subdomains.

    Paths and parameters are ignored, so ``music.youtube.com`` and a bare
    ``youtube.com`` both qualify.
    """

    parsed = try_parse_url(url)
    if parsed is None:
        return False
    return any(parsed.hostname == domain or parsed.hostname.endswith(f".{domain}") for domain in KNOWN_DOMAINS)


def to_youtube_embed_url(url: str) -> Optional[str]:
    """Convert any extractable YouTube URL to ``https://www.youtube.com/embed/<id>``."""

    video_id = get_youtube_video_id(url)
    return EMBED_URL.format(video_id=video_id) if video_id else None


def to_youtube_short_url(url: str) -> Optional[str]:
    """Convert any extractable YouTube URL to ``https://youtu.be/<id>``."""

    video_id = get_youtube_video_id(url)
    return SHORT_URL.format(video_id=video_id) if video_id else None


def is_youtube_embed_url(url: str) -> bool:
    """Structural check for ``youtube.com/embed/...``; the id itself is not validated."""

    parsed = try_parse_url(url)
    return parsed is not None and parsed.hostname == "youtube.com" and parsed.path.startswith("/embed/")


__all__ = [
    "NORMALIZATION_FORMS",
    "VALIDATION_FORMS",
    "YOUTUBE_DIALECT",
    "YouTubeForm",
    "generate_youtube_share_url",
    "get_youtube_video_id",
    "is_valid_youtube_video_id",
    "is_valid_youtube_video_url",
    "is_youtube_embed_url",
    "is_youtube_url",
    "normalize_youtube_video_url",
    "parse_youtube_url",
    "to_youtube_embed_url",
    "to_youtube_short_url",
]
