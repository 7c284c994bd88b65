"""Tests for the TikTok URL engine (services/tiktok.py)."""

from __future__ import annotations

import pytest

from vidkit.models.options import URLValidationOptions
from vidkit.services.tiktok import (
    InvalidTikTokVideoIdError,
    generate_tiktok_share_url,
    get_tiktok_video_id,
    is_tiktok_url,
    is_valid_tiktok_username,
    is_valid_tiktok_video_id,
    is_valid_tiktok_video_url,
    normalize_tiktok_video_url,
)

VIDEO_ID = "1234567890123456789"
PROFILE_URL = f"https://www.tiktok.com/@username/video/{VIDEO_ID}"
SHORT_URL = f"https://vm.tiktok.com/{VIDEO_ID}"


class TestShapes:
    @pytest.mark.parametrize("video_id", [VIDEO_ID, f"  {VIDEO_ID}  ", "7476926243661679902"])
    def test_valid_video_ids(self, video_id: str) -> None:
        assert is_valid_tiktok_video_id(video_id)

    @pytest.mark.parametrize(
        "video_id", ["", "123", "12345678901234567890", "123456789012345678a", "١٢٣٤٥٦٧٨٩٠١٢٣٤٥٦٧٨٩", None, 123]
    )
    def test_invalid_video_ids(self, video_id: object) -> None:
        assert not is_valid_tiktok_video_id(video_id)

    @pytest.mark.parametrize("username", ["ab", "@username", "finger.down89", "under_score", "a" * 24])
    def test_valid_usernames(self, username: str) -> None:
        assert is_valid_tiktok_username(username)

    @pytest.mark.parametrize("username", ["", "a", "@a", "user!", "a" * 25, "with space", None])
    def test_invalid_usernames(self, username: object) -> None:
        assert not is_valid_tiktok_username(username)


class TestIsValidTikTokVideoURL:
    @pytest.mark.parametrize(
        "url",
        [
            PROFILE_URL,
            f"https://tiktok.com/@username/video/{VIDEO_ID}",
            f"https://www.tiktok.com/username/video/{VIDEO_ID}",
            SHORT_URL,
            f"tiktok.com/@username/video/{VIDEO_ID}",
            f"vm.tiktok.com/{VIDEO_ID}",
            f"{PROFILE_URL}/",
            f"{SHORT_URL}/",
            f"https://www.tiktok.com/en/@creator/video/{VIDEO_ID}",
            f"https://www.tiktok.com/@username/video/{VIDEO_ID}?is_from_webapp=1",
        ],
    )
    def test_accepts(self, url: str) -> None:
        assert is_valid_tiktok_video_url(url) is True

    @pytest.mark.parametrize(
        "url",
        [
            "invalid-url",
            "",
            "https://youtube.com/watch?v=123",
            "https://tiktok.com/@username/video/duhefhewfew",
            "https://tiktok.com/@username",
            "https://vm.tiktok.com/ZMabc123/",
            f"https://music.tiktok.com/@username/video/{VIDEO_ID}",
            f"https://evil.com\\@www.tiktok.com/@username/video/{VIDEO_ID}",
        ],
    )
    def test_rejects(self, url: str) -> None:
        assert is_valid_tiktok_video_url(url) is False

    @pytest.mark.parametrize(
        "username",
        ["@user!", "@a", "@very_long_username_that_exceeds_limit"],
    )
    def test_rejects_invalid_usernames(self, username: str) -> None:
        assert is_valid_tiktok_video_url(f"https://tiktok.com/{username}/video/{VIDEO_ID}") is False

    def test_rejects_invalid_username_in_localized_form(self) -> None:
        assert is_valid_tiktok_video_url(f"https://tiktok.com/en/@a/video/{VIDEO_ID}") is False

    def test_protocol_required(self) -> None:
        url = f"tiktok.com/@username/video/{VIDEO_ID}"
        assert is_valid_tiktok_video_url(url, {"allowNoProtocol": False}) is False
        assert is_valid_tiktok_video_url(f"https://{url}", {"allowNoProtocol": False}) is True

    def test_query_params_disallowed(self) -> None:
        options = URLValidationOptions(allow_query_params=False)
        assert is_valid_tiktok_video_url(f"https://tiktok.com/@username/video/{VIDEO_ID}?param=value", options) is False
        assert is_valid_tiktok_video_url(PROFILE_URL, options) is True

    def test_www_required(self) -> None:
        options = URLValidationOptions(allow_no_www=False)
        assert is_valid_tiktok_video_url(PROFILE_URL, options) is True
        assert is_valid_tiktok_video_url(f"https://tiktok.com/@username/video/{VIDEO_ID}", options) is False
        assert is_valid_tiktok_video_url(SHORT_URL, options) is True


class TestGetTikTokVideoId:
    @pytest.mark.parametrize(
        "url",
        [
            PROFILE_URL,
            f"https://tiktok.com/@username/video/{VIDEO_ID}",
            f"https://www.tiktok.com/username/video/{VIDEO_ID}",
            SHORT_URL,
            f"{PROFILE_URL}/",
            f"{SHORT_URL}/",
            f"  {PROFILE_URL}  ",
            f"https://www.tiktok.com/de-DE/@creator/video/{VIDEO_ID}",
        ],
    )
    def test_extracts(self, url: str) -> None:
        assert get_tiktok_video_id(url) == VIDEO_ID

    @pytest.mark.parametrize(
        "url",
        [
            "invalid-url",
            "https://youtube.com/watch?v=123",
            "https://tiktok.com/@username/video/invalid-id",
            f"https://evil.com\\@vm.tiktok.com/{VIDEO_ID}",
        ],
    )
    def test_returns_none(self, url: str) -> None:
        assert get_tiktok_video_id(url) is None

    def test_ignores_username_validity(self) -> None:
        assert get_tiktok_video_id(f"https://tiktok.com/@user!/video/{VIDEO_ID}") == VIDEO_ID

    def test_query_params_disallowed(self) -> None:
        assert get_tiktok_video_id(f"{SHORT_URL}?lang=en", {"allowQueryParams": False}) is None


class TestNormalizeTikTokVideoURL:
    def test_strips_tracking_params(self) -> None:
        url = "https://www.tiktok.com/@finger.down89/video/7476926243661679902?is_from_webapp=1&sender_device=pc"
        assert normalize_tiktok_video_url(url) == "https://www.tiktok.com/@finger.down89/video/7476926243661679902"

    @pytest.mark.parametrize(
        "url",
        [
            f"https://tiktok.com/@username/video/{VIDEO_ID}",
            f"https://www.tiktok.com/username/video/{VIDEO_ID}",
            f"{PROFILE_URL}/",
            f"https://www.tiktok.com/en/@username/video/{VIDEO_ID}",
        ],
    )
    def test_keeps_username(self, url: str) -> None:
        assert normalize_tiktok_video_url(url) == PROFILE_URL

    @pytest.mark.parametrize("url", [SHORT_URL, f"{SHORT_URL}/", f"vm.tiktok.com/{VIDEO_ID}"])
    def test_short_links_use_placeholder(self, url: str) -> None:
        assert normalize_tiktok_video_url(url) == f"https://www.tiktok.com/@user/video/{VIDEO_ID}"

    def test_invalid_username_uses_placeholder(self) -> None:
        assert (
            normalize_tiktok_video_url(f"https://tiktok.com/@user!/video/{VIDEO_ID}")
            == f"https://www.tiktok.com/@user/video/{VIDEO_ID}"
        )

    @pytest.mark.parametrize(
        "url",
        ["invalid-url", "https://youtube.com/watch?v=123", "https://tiktok.com/@username/video/invalid-id", None],
    )
    def test_returns_none(self, url: object) -> None:
        assert normalize_tiktok_video_url(url) is None  # type: ignore[arg-type]


class TestIsTikTokURL:
    @pytest.mark.parametrize(
        "url",
        [
            PROFILE_URL,
            SHORT_URL,
            f"tiktok.com/@username/video/{VIDEO_ID}",
            f"{PROFILE_URL}/",
            f"{SHORT_URL}/",
            "https://www.tiktok.com",
            "TIKTOK.com",
        ],
    )
    def test_accepts(self, url: str) -> None:
        assert is_tiktok_url(url) is True

    @pytest.mark.parametrize(
        "url",
        [
            "https://youtube.com/watch?v=123",
            "invalid-url",
            "music.tiktok.com",
            "https://vt.tiktok.com/x",
            "https://evil.com\\@www.tiktok.com/@username",
            "",
            None,
        ],
    )
    def test_rejects(self, url: object) -> None:
        assert is_tiktok_url(url) is False  # type: ignore[arg-type]


class TestGenerateTikTokShareURL:
    def test_generates(self) -> None:
        assert generate_tiktok_share_url(VIDEO_ID) == SHORT_URL

    def test_trims_whitespace(self) -> None:
        assert generate_tiktok_share_url(f"  {VIDEO_ID}  ") == SHORT_URL

    @pytest.mark.parametrize("video_id", ["invalid-id", "123", "", "   ", None])
    def test_rejects_invalid_ids(self, video_id: object) -> None:
        with pytest.raises(InvalidTikTokVideoIdError, match="Invalid TikTok video ID"):
            generate_tiktok_share_url(video_id)  # type: ignore[arg-type]

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            generate_tiktok_share_url("123")


class TestRoundTrips:
    @pytest.mark.parametrize("url", [PROFILE_URL, SHORT_URL, f"https://www.tiktok.com/en/@username/video/{VIDEO_ID}"])
    def test_normalized_url_is_valid(self, url: str) -> None:
        normalized = normalize_tiktok_video_url(url)
        assert normalized is not None
        assert is_valid_tiktok_video_url(normalized)
        assert get_tiktok_video_id(normalized) == VIDEO_ID

    def test_share_url_round_trips(self) -> None:
        assert get_tiktok_video_id(generate_tiktok_share_url(VIDEO_ID)) == VIDEO_ID
