"""Platform detection across the supported URL engines."""

from __future__ import annotations

from typing import Callable, Optional, Tuple

from vidkit.models.platform import Platform
from vidkit.services.tiktok import is_tiktok_url
from vidkit.services.youtube import is_youtube_url


_DETECTORS: Tuple[Tuple[Platform, Callable[[str], bool]], ...] = (
    (Platform.YOUTUBE, is_youtube_url),
    (Platform.TIKTOK, is_tiktok_url),
)


def detect_platform(url: str) -> Optional[Platform]:
    """Return the platform whose host predicate accepts ``url``, or ``None``."""

    for platform, predicate in _DETECTORS:
        if predicate(url):
            return platform
    return None


__all__ = ["detect_platform"]
