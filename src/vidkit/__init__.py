"""vidkit: recognise, validate, and canonicalise YouTube and TikTok video URLs."""

from vidkit.models.options import URLValidationOptions
from vidkit.models.platform import Platform
from vidkit.models.youtube import YouTubeURLComponents, YouTubeURLType
from vidkit.services.detection import detect_platform
from vidkit.services.tiktok import (
    InvalidTikTokVideoIdError,
    generate_tiktok_share_url,
    get_tiktok_video_id,
    is_tiktok_url,
    is_valid_tiktok_video_url,
    normalize_tiktok_video_url,
)
from vidkit.services.youtube import (
    generate_youtube_share_url,
    get_youtube_video_id,
    is_valid_youtube_video_url,
    is_youtube_embed_url,
    is_youtube_url,
    normalize_youtube_video_url,
    parse_youtube_url,
    to_youtube_embed_url,
    to_youtube_short_url,
)

__version__ = "1.1.0"

__all__ = [
    "InvalidTikTokVideoIdError",
    "Platform",
    "URLValidationOptions",
    "YouTubeURLComponents",
    "YouTubeURLType",
    "__version__",
    "detect_platform",
    "generate_tiktok_share_url",
    "generate_youtube_share_url",
    "get_tiktok_video_id",
    "get_youtube_video_id",
    "is_tiktok_url",
    "is_valid_tiktok_video_url",
    "is_valid_youtube_video_url",
    "is_youtube_embed_url",
    "is_youtube_url",
    "normalize_tiktok_video_url",
    "normalize_youtube_video_url",
    "parse_youtube_url",
    "to_youtube_embed_url",
    "to_youtube_short_url",
]
