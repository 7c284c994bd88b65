"""Value objects exchanged by the vidkit engines."""

from vidkit.models.options import URLValidationOptions
from vidkit.models.platform import Platform
from vidkit.models.youtube import YouTubeURLComponents, YouTubeURLType

__all__ = ["Platform", "URLValidationOptions", "YouTubeURLComponents", "YouTubeURLType"]
