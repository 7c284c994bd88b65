"""Enumeration of the video platforms vidkit understands."""

from __future__ import annotations

from enum import Enum


class Platform(str, Enum):
    """Supported video platforms."""

    YOUTUBE = "youtube"
    TIKTOK = "tiktok"


__all__ = ["Platform"]
