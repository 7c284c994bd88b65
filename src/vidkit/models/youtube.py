"""Pydantic models describing classified YouTube URLs."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional

from pydantic import Field

from vidkit.models.base import VidkitBaseModel


class YouTubeURLType(str, Enum):
    """Kinds of YouTube resources a URL can point at."""

    VIDEO = "video"
    PLAYLIST = "playlist"
    CHANNEL = "channel"
    SHORT = "short"
    LIVE = "live"
    UNKNOWN = "unknown"


class YouTubeURLComponents(VidkitBaseModel):
    """Best-effort breakdown of a YouTube URL.

    Produced by :func:`vidkit.services.youtube.parse_youtube_url`. Identifiers are copied
    from the URL as-is; no shape validation is applied, so a ``video_id`` here is not
    guaranteed to be a playable 11-character identifier.
    """

    type: YouTubeURLType = YouTubeURLType.UNKNOWN
    video_id: Optional[str] = None
    playlist_id: Optional[str] = None
    channel_id: Optional[str] = None
    parameters: Dict[str, str] = Field(default_factory=dict)
    is_embed: bool = False
    original_url: str = ""


__all__ = ["YouTubeURLComponents", "YouTubeURLType"]
