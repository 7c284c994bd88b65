"""Service layer: one URL engine per supported platform."""

from vidkit.services.detection import detect_platform
from vidkit.services.dialect import PlatformDialect, VideoMatch
from vidkit.services.tiktok import TIKTOK_DIALECT, InvalidTikTokVideoIdError
from vidkit.services.youtube import YOUTUBE_DIALECT

__all__ = [
    "InvalidTikTokVideoIdError",
    "PlatformDialect",
    "TIKTOK_DIALECT",
    "VideoMatch",
    "YOUTUBE_DIALECT",
    "detect_platform",
]
